"""Tests for CompletionConfig validation and defaults."""

from __future__ import annotations

import dataclasses

import pytest

from json_schema_complete import CompletionConfig, PositionEncoding


class TestDefaults:
    def test_default_values(self) -> None:
        cfg = CompletionConfig()
        assert cfg.indent_unit == 2
        assert cfg.key_lookahead == 10
        assert cfg.position_encoding == PositionEncoding.UTF16
        assert cfg.include_optional is True
        assert cfg.inline_max_length == 50
        assert cfg.inline_max_array_length == 50
        assert cfg.inline_max_object_length == 30

    def test_indent(self) -> None:
        assert CompletionConfig().indent == "  "
        assert CompletionConfig(indent_unit=4).indent == "    "

    def test_frozen(self) -> None:
        cfg = CompletionConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.indent_unit = 3  # type: ignore[misc]

    def test_encoding_values(self) -> None:
        assert PositionEncoding.UTF16 == "utf16"
        assert PositionEncoding.CODEPOINT == "codepoint"


class TestValidation:
    @pytest.mark.parametrize("value", [0, -1])
    def test_indent_unit(self, value: int) -> None:
        with pytest.raises(ValueError, match="indent_unit"):
            CompletionConfig(indent_unit=value)

    def test_key_lookahead(self) -> None:
        with pytest.raises(ValueError, match="key_lookahead"):
            CompletionConfig(key_lookahead=0)

    @pytest.mark.parametrize(
        "field",
        ["inline_max_length", "inline_max_array_length", "inline_max_object_length"],
    )
    def test_inline_limits(self, field: str) -> None:
        with pytest.raises(ValueError, match=field):
            CompletionConfig(**{field: -1})

    def test_zero_inline_limit_allowed(self) -> None:
        assert CompletionConfig(inline_max_length=0).inline_max_length == 0
