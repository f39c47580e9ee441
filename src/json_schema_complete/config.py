"""CompletionConfig and PositionEncoding for completion engine configuration.

CompletionConfig is a frozen (immutable) dataclass holding the engine
parameters.  PositionEncoding selects how cursor offsets supplied by the
host editor are counted: UTF-16 code units (LSP / VS Code) or Python
code points.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class PositionEncoding(StrEnum):
    """How a host-supplied cursor offset indexes into the document text.

    - UTF16:     Offsets count UTF-16 code units (VS Code, LSP default).
    - CODEPOINT: Offsets are plain Python string indices.
    """

    UTF16 = auto()
    CODEPOINT = auto()


@dataclass(frozen=True, slots=True)
class CompletionConfig:
    """Immutable configuration for the completion engine.

    Attributes:
        indent_unit: Spaces per indentation level (>= 1).  Used both to derive
            ``JsonContext.indent_level`` and as the extra indent applied to
            template fields.
        key_lookahead: Maximum distance (in characters) between a closing
            quote and the colon that marks the string as an object key (>= 1).
        position_encoding: Unit in which cursor offsets are expressed.
        include_optional: When True, object templates also contain optional
            properties that carry a recommended value.
        inline_max_length: Longest compact literal offered as ghost text for
            scalar-like values (>= 0).
        inline_max_array_length: Longest compact array literal offered as
            ghost text (>= 0).
        inline_max_object_length: Longest compact object literal offered as
            ghost text (>= 0).
    """

    indent_unit: int = 2
    key_lookahead: int = 10
    position_encoding: PositionEncoding = PositionEncoding.UTF16
    include_optional: bool = True
    inline_max_length: int = 50
    inline_max_array_length: int = 50
    inline_max_object_length: int = 30

    def __post_init__(self) -> None:
        if self.indent_unit < 1:
            msg = f"indent_unit must be >= 1, got {self.indent_unit}"
            raise ValueError(msg)
        if self.key_lookahead < 1:
            msg = f"key_lookahead must be >= 1, got {self.key_lookahead}"
            raise ValueError(msg)
        for name in (
            "inline_max_length",
            "inline_max_array_length",
            "inline_max_object_length",
        ):
            value = getattr(self, name)
            if value < 0:
                msg = f"{name} must be >= 0, got {value}"
                raise ValueError(msg)

    @property
    def indent(self) -> str:
        """One indentation unit rendered as spaces."""
        return " " * self.indent_unit
