"""Best-effort reconstruction of the key path from the document root to a cursor.

The parser is a single forward pass with bounded lookahead, not a grammar
parser, so it runs in linear time on the truncated or invalid JSON that
exists mid-edit and never raises.

State machine (outside string literals):

- ``{``  opens an object frame and starts expecting a key.
- A string closed while expecting a key is a key only when the first
  non-whitespace character after it, within the lookahead window, is a
  colon.  Keys are pushed onto the path.
- ``,``  inside an object drops the previous key so siblings do not stack
  up, and starts expecting a key again.
- ``}``  closes the innermost frame, dropping its pending key.
- ``[``  opens an array frame and pushes ``ARRAY_PLACEHOLDER``.
- ``]``  closes the innermost frame, dropping its placeholder.

With ``member_position`` the key pending in the innermost object is dropped:
the cursor sits after that member's value, where a sibling key goes.

Array positions are never tracked: every element resolves to the first
element's placeholder.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from json_schema_complete.context.nodes import ARRAY_PLACEHOLDER


@dataclass(slots=True)
class _Frame:
    """One open container on the parser stack.

    ``segments`` is how many path entries this frame currently owns: the
    placeholder for arrays, the pending key (0 or 1) for objects.
    """

    is_object: bool
    segments: int = 0


def decode_key(raw: str) -> str:
    """Unescape a key's raw source text; fall back to the raw text."""
    if "\\" not in raw:
        return raw
    try:
        decoded = json.loads(f'"{raw}"')
    except json.JSONDecodeError:
        return raw
    return decoded if isinstance(decoded, str) else raw


def _colon_follows(text: str, start: int, lookahead: int) -> bool:
    """True when the first non-blank character within the window is a colon."""
    for char in text[start : start + lookahead]:
        if char == ":":
            return True
        if not char.isspace():
            return False
    return False


def parse_json_path(
    prefix: str, lookahead: int = 10, *, member_position: bool = False
) -> tuple[str, ...]:
    """Return the path segments from the document root to the end of ``prefix``.

    Args:
        prefix:          Document text from the start up to the cursor.
        lookahead:       How many characters after a closing quote are
                         searched for the colon that marks a key.
        member_position: The cursor is known to be at a member (key)
                         position, so a key pending in the innermost object
                         already has its value and is dropped.

    Returns:
        Tuple of object keys and ``ARRAY_PLACEHOLDER`` tokens.  Empty at the
        document root or when nothing can be inferred.

    Example::

        parse_json_path('{"spec": {"domains": [')
        # ("spec", "domains", "0")
        parse_json_path('{"spec": {"port": 80\\n', member_position=True)
        # ("spec",)
    """
    path, frames = _walk(prefix, lookahead)
    if member_position and frames and frames[-1].is_object:
        del path[len(path) - frames[-1].segments :]
    return tuple(path)


def _walk(prefix: str, lookahead: int) -> tuple[list[str], list[_Frame]]:
    path: list[str] = []
    frames: list[_Frame] = []
    expecting_key = False
    in_string = False
    escape_next = False
    string_start = 0

    for i, char in enumerate(prefix):
        if escape_next:
            escape_next = False
            continue

        if in_string:
            if char == "\\":
                escape_next = True
            elif char == '"':
                in_string = False
                frame = frames[-1] if frames else None
                if (
                    expecting_key
                    and frame is not None
                    and frame.is_object
                    and i > string_start
                    and _colon_follows(prefix, i + 1, lookahead)
                ):
                    del path[len(path) - frame.segments :]
                    path.append(decode_key(prefix[string_start:i]))
                    frame.segments = 1
                    expecting_key = False
            continue

        if char == '"':
            in_string = True
            string_start = i + 1
        elif char == "{":
            frames.append(_Frame(is_object=True))
            expecting_key = True
        elif char == "[":
            frames.append(_Frame(is_object=False, segments=1))
            path.append(ARRAY_PLACEHOLDER)
            expecting_key = False
        elif char in "}]":
            if frames:
                frame = frames.pop()
                del path[len(path) - frame.segments :]
            expecting_key = False
        elif char == ",":
            if frames and frames[-1].is_object:
                frame = frames[-1]
                del path[len(path) - frame.segments :]
                frame.segments = 0
                expecting_key = True

    return path, frames
