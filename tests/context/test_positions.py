"""Tests for host offset <-> string index conversion."""

from __future__ import annotations

from json_schema_complete.config import PositionEncoding
from json_schema_complete.context.positions import to_index, to_offset

UTF16 = PositionEncoding.UTF16
CODEPOINT = PositionEncoding.CODEPOINT

EMOJI_TEXT = "a\U0001f600b"


class TestToIndex:
    def test_ascii_identity(self) -> None:
        assert to_index("abc", 2, UTF16) == 2
        assert to_index("abc", 2, CODEPOINT) == 2

    def test_astral_character_counts_twice(self) -> None:
        assert to_index(EMOJI_TEXT, 3, UTF16) == 2
        assert to_index(EMOJI_TEXT, 4, UTF16) == 3

    def test_offset_inside_surrogate_pair(self) -> None:
        assert to_index(EMOJI_TEXT, 2, UTF16) == 1

    def test_bmp_non_ascii_is_single_unit(self) -> None:
        assert to_index("été", 2, UTF16) == 2

    def test_clamped(self) -> None:
        assert to_index("abc", 99, UTF16) == 3
        assert to_index("abc", 99, CODEPOINT) == 3
        assert to_index("abc", -1, UTF16) == 0


class TestToOffset:
    def test_astral_character(self) -> None:
        assert to_offset(EMOJI_TEXT, 2, UTF16) == 3
        assert to_offset(EMOJI_TEXT, 2, CODEPOINT) == 2

    def test_round_trip(self) -> None:
        for index in range(len(EMOJI_TEXT) + 1):
            offset = to_offset(EMOJI_TEXT, index, UTF16)
            assert to_index(EMOJI_TEXT, offset, UTF16) == index
