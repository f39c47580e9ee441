"""pytest plugin for json-schema-complete.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_schema_complete.config import PositionEncoding
from json_schema_complete.context.positions import to_offset

CURSOR_MARKER = "|"


@pytest.fixture(scope="session")
def cursor_document() -> Any:
    """Fixture that returns a callable splitting marked-up text into text and cursor.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_key_position(cursor_document):
            text, offset = cursor_document('{"metadata": {|}}')
            assert text == '{"metadata": {}}'
            assert offset == 14

    Returns:
        A callable ``_split(marked, marker="|", encoding=PositionEncoding.UTF16)
        -> (text, offset)`` that raises ``ValueError`` unless ``marked``
        contains the marker exactly once.
    """

    def _split(
        marked: str,
        marker: str = CURSOR_MARKER,
        encoding: PositionEncoding = PositionEncoding.UTF16,
    ) -> tuple[str, int]:
        """Remove the cursor marker and return the text and the cursor offset.

        Args:
            marked:   Document text with one cursor marker.
            marker:   Cursor marker.  Defaults to ``"|"``.
            encoding: Unit of the returned offset.  Defaults to UTF-16 code
                      units, as editors report them.

        Raises:
            ValueError: When the marker is missing or appears more than once.
        """
        count = marked.count(marker)
        if count != 1:
            msg = f"expected exactly one cursor marker {marker!r}, found {count}"
            raise ValueError(msg)
        index = marked.index(marker)
        text = marked[:index] + marked[index + len(marker) :]
        return text, to_offset(text, index, encoding)

    return _split
