"""SchemaTreeBuilder: converts a JSON-Schema mapping into a typed SchemaNode tree.

Uses recursive dispatch on the schema keywords:

- ``properties`` present, or primary type ``object`` -> ObjectNode
- primary type ``array``                             -> ArrayNode
- anything else                                      -> ScalarNode

Resource-editing hints travel as vendor extensions and are lifted into
first-class node fields:

- ``x-f5xc-recommended-value`` -> ``recommended_value``
- ``x-f5xc-server-default``    -> ``is_server_default``

``$ref`` is not resolved; a reference-only node becomes a ScalarNode.  Boolean
subschemas (``true``/``false``) become ScalarNodes with no type tags.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from json_schema_complete.schema.nodes import (
    MISSING,
    ArrayNode,
    ObjectNode,
    ScalarNode,
    SchemaNode,
)

RECOMMENDED_VALUE_KEY = "x-f5xc-recommended-value"
SERVER_DEFAULT_KEY = "x-f5xc-server-default"


def _type_tags(schema: Mapping[str, Any]) -> tuple[str, ...]:
    declared = schema.get("type")
    if isinstance(declared, str):
        return (declared,)
    if isinstance(declared, list | tuple):
        tags = tuple(t for t in declared if isinstance(t, str))
        if tags:
            return tags
    # Undeclared: infer from structure, fall back to string.
    if "properties" in schema:
        return ("object",)
    if "items" in schema:
        return ("array",)
    return ("string",)


@dataclass
class SchemaTreeBuilder:
    """Converts a JSON-Schema (draft-07 style) mapping into a SchemaNode tree.

    The builder is stateless; one instance can be shared.

    Example::

        builder = SchemaTreeBuilder()
        root = builder.build({
            "type": "object",
            "properties": {"name": {"type": "string"}},
            "required": ["name"],
        })
        # root: ObjectNode(properties={"name": ScalarNode(type=("string",))})
    """

    def build(self, schema: Mapping[str, Any]) -> SchemaNode:
        """Convert a schema mapping into a SchemaNode.

        Args:
            schema: A JSON-Schema object (``dict`` or other ``Mapping``).

        Returns:
            The root node of the converted tree.

        Raises:
            TypeError: If ``schema`` is not a mapping.  Nested subschemas that
                are not mappings, such as the boolean schemas ``true`` and
                ``false``, become untyped ScalarNodes instead.
        """
        if not isinstance(schema, Mapping):
            raise TypeError(f"Schema must be a mapping, got {type(schema)!r}")
        return self._build(schema)

    def _build(self, schema: Any) -> SchemaNode:
        if not isinstance(schema, Mapping):
            return ScalarNode(type=())

        tags = _type_tags(schema)
        common: dict[str, Any] = {
            "type": tags,
            "default": schema.get("default", MISSING),
            "description": schema.get("description"),
            "recommended_value": schema.get(RECOMMENDED_VALUE_KEY, MISSING),
            "is_server_default": bool(schema.get(SERVER_DEFAULT_KEY, False)),
            "enum": tuple(schema["enum"]) if isinstance(schema.get("enum"), list) else None,
        }

        if "properties" in schema or tags[0] == "object":
            return self._build_object(schema, common)

        if tags[0] == "array":
            items = schema.get("items")
            if isinstance(items, list):
                # Tuple-style items: elements are addressed as the first one.
                items = items[0] if items else None
            return ArrayNode(
                items=self._build(items) if items is not None else None, **common
            )

        return ScalarNode(**common)

    def _build_object(
        self, schema: Mapping[str, Any], common: dict[str, Any]
    ) -> ObjectNode:
        """Build an ObjectNode, keeping property declaration order."""
        raw_properties = schema.get("properties")
        if not isinstance(raw_properties, Mapping):
            raw_properties = {}
        properties = {
            name: self._build(child) for name, child in raw_properties.items()
        }
        required = tuple(
            name for name in schema.get("required") or () if isinstance(name, str)
        )
        return ObjectNode(properties=properties, required=required, **common)
