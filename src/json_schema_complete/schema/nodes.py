"""Schema tree node types: ScalarNode, ObjectNode and ArrayNode.

A schema tree describes the shape of a resource document.  Each node is
one of three tagged variants so that navigation is a total match over
the variants instead of presence checks on optional fields:

- ScalarNode -> leaf values (string, number, integer, boolean, null, ...)
- ObjectNode -> carries ``properties`` and ``required``
- ArrayNode  -> carries ``items``

Nodes are frozen.  Trees are built by ``SchemaTreeBuilder`` and owned by
the ``SchemaRegistry``; completion code only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any, ClassVar, Final


class SchemaKind(StrEnum):
    """The three structural variants of a schema node."""

    SCALAR = auto()
    OBJECT = auto()
    ARRAY = auto()


class _Missing:
    """Marker for an absent value, distinct from JSON ``null`` (``None``)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


@dataclass(frozen=True, slots=True)
class _NodeBase:
    """Fields shared by every schema node variant.

    Attributes:
        type:              Declared type tags; the first one is primary.
        default:           Schema ``default`` or ``MISSING``.
        description:       Human-readable description, if any.
        recommended_value: Authoring suggestion that takes precedence over
                           ``default``; ``MISSING`` when not declared.
        is_server_default: The server fills the value in when omitted.
        enum:              Allowed values, if the schema restricts them.
    """

    type: tuple[str, ...] = ("string",)
    default: Any = MISSING
    description: str | None = None
    recommended_value: Any = MISSING
    is_server_default: bool = False
    enum: tuple[Any, ...] | None = None

    kind: ClassVar[SchemaKind]

    @property
    def primary_type(self) -> str:
        return self.type[0] if self.type else "string"

    @property
    def has_recommended_value(self) -> bool:
        return self.recommended_value is not MISSING

    @property
    def suggested_value(self) -> Any:
        """Recommended value if declared, else the default, else ``MISSING``."""
        if self.recommended_value is not MISSING:
            return self.recommended_value
        return self.default


@dataclass(frozen=True, slots=True)
class ScalarNode(_NodeBase):
    """A leaf schema node.  Navigation stops here."""

    kind: ClassVar[SchemaKind] = SchemaKind.SCALAR


@dataclass(frozen=True, slots=True)
class ObjectNode(_NodeBase):
    """An object schema node.

    Attributes:
        properties: Child schemas keyed by property name, in declaration order.
        required:   Names of required properties, in declaration order.
    """

    type: tuple[str, ...] = ("object",)
    properties: dict[str, SchemaNode] = field(default_factory=dict)
    required: tuple[str, ...] = ()

    kind: ClassVar[SchemaKind] = SchemaKind.OBJECT

    def is_required(self, name: str) -> bool:
        return name in self.required


@dataclass(frozen=True, slots=True)
class ArrayNode(_NodeBase):
    """An array schema node.

    Attributes:
        items: Schema shared by every element, or None when undeclared.
    """

    type: tuple[str, ...] = ("array",)
    items: SchemaNode | None = None

    kind: ClassVar[SchemaKind] = SchemaKind.ARRAY


SchemaNode = ScalarNode | ObjectNode | ArrayNode


@dataclass(frozen=True, slots=True)
class PropertyInfo:
    """Flattened view of one object property, used for template generation.

    Derived from an ``ObjectNode`` child on demand; never stored.
    """

    name: str
    type: tuple[str, ...]
    required: bool
    default: Any = MISSING
    recommended_value: Any = MISSING
    description: str | None = None
    is_server_default: bool = False

    @property
    def value(self) -> Any:
        """Recommended value if present, else default, else ``MISSING``."""
        if self.recommended_value is not MISSING:
            return self.recommended_value
        return self.default

    @classmethod
    def from_node(cls, name: str, node: SchemaNode, required: bool) -> PropertyInfo:
        return cls(
            name=name,
            type=node.type,
            required=required,
            default=node.default,
            recommended_value=node.recommended_value,
            description=node.description,
            is_server_default=node.is_server_default,
        )
