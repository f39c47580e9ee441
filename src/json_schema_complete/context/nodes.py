"""JsonContext and ContainerState: the inferred cursor location in JSON text.

Both records are created fresh per completion request and hold no
references to the document they were derived from.
"""

from __future__ import annotations

from dataclasses import dataclass

# Every array segment in a path is this token.  The path parser does not
# track which element holds the cursor; array schemas are homogeneous.
ARRAY_PLACEHOLDER = "0"


@dataclass(frozen=True, slots=True)
class ContainerState:
    """Net unclosed braces and brackets before the cursor.

    Attributes:
        brace_depth:   ``{`` count minus ``}`` count outside string literals.
        bracket_depth: ``[`` count minus ``]`` count outside string literals.
        in_string:     True when the prefix ends inside an open string literal.
    """

    brace_depth: int = 0
    bracket_depth: int = 0
    in_string: bool = False

    @property
    def in_object(self) -> bool:
        return self.brace_depth > 0

    @property
    def in_array(self) -> bool:
        return self.bracket_depth > 0


@dataclass(frozen=True, slots=True)
class JsonContext:
    """Structural location of a cursor inside (possibly invalid) JSON text.

    Attributes:
        path:          Keys from the document root to the cursor.  Array
                       segments are always ``ARRAY_PLACEHOLDER``.
        after_colon:   Cursor sits in the value position of a property.
        in_object:     At least one object is open before the cursor.
        in_array:      At least one array is open before the cursor.
        property_name: Key whose value the cursor is filling in, when
                       ``after_colon`` is True and the key could be read.
        indent_level:  Leading whitespace of the cursor line divided by the
                       configured indent unit.
        indent_string: Leading whitespace of the cursor line, verbatim.
    """

    path: tuple[str, ...] = ()
    after_colon: bool = False
    in_object: bool = False
    in_array: bool = False
    property_name: str | None = None
    indent_level: int = 0
    indent_string: str = ""

    @property
    def is_root(self) -> bool:
        """True when the cursor is not inside any keyed or indexed value."""
        return len(self.path) == 0

    def value_path(self) -> tuple[str, ...] | None:
        """Path to the value being typed after a property colon.

        The path parser already records the pending key, so the property
        name is appended only when it is not the last segment.  Returns None
        when the cursor is not in a value position.
        """
        if not self.after_colon or self.property_name is None:
            return None
        if self.path and self.path[-1] == self.property_name:
            return self.path
        return (*self.path, self.property_name)
