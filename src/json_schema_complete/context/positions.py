"""Conversion between host-editor cursor offsets and Python string indices.

Editors speaking LSP (and VS Code) count positions in UTF-16 code units,
while Python indexes strings by code point.  Characters outside the Basic
Multilingual Plane occupy two UTF-16 units but one Python index, so the two
diverge as soon as such a character precedes the cursor.

Out-of-range offsets are clamped rather than rejected.
"""

from __future__ import annotations

from json_schema_complete.config import PositionEncoding


def _utf16_units(char: str) -> int:
    return 2 if ord(char) > 0xFFFF else 1


def to_index(text: str, offset: int, encoding: PositionEncoding) -> int:
    """Convert a host offset into an index usable for slicing ``text``.

    Args:
        text:     The full document text.
        offset:   Cursor offset in ``encoding`` units.
        encoding: Unit in which ``offset`` is expressed.

    Returns:
        An index in ``[0, len(text)]``.  A UTF-16 offset that falls between
        the two halves of a surrogate pair resolves to the index before the
        character.
    """
    if offset <= 0:
        return 0
    if encoding == PositionEncoding.CODEPOINT:
        return min(offset, len(text))

    units = 0
    for index, char in enumerate(text):
        units += _utf16_units(char)
        if units > offset:
            return index
    return len(text)


def to_offset(text: str, index: int, encoding: PositionEncoding) -> int:
    """Convert a Python string index back into a host offset."""
    index = max(0, min(index, len(text)))
    if encoding == PositionEncoding.CODEPOINT:
        return index
    return sum(_utf16_units(char) for char in text[:index])
