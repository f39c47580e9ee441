"""TemplateBuilder: insertable JSON templates with sequential placeholders.

Property selection for an object template:

1. every ``required`` property, in schema declaration order
2. optionally, every other property that carries an explicit recommended
   value, in declaration order (a plain ``default`` is not enough)

Each selected property becomes one field ``"<name>": <placeholder>`` whose
placeholder is pre-filled with the recommended value, else the default,
else the blank for its type.  Placeholder numbers start at 1 and increase
left to right without reuse inside one template.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from json_schema_complete.config import CompletionConfig
from json_schema_complete.protocols import SnippetSyntax
from json_schema_complete.schema.nodes import (
    ArrayNode,
    ObjectNode,
    PropertyInfo,
    SchemaNode,
)
from json_schema_complete.snippet.formatter import format_value
from json_schema_complete.snippet.syntax import TabstopSyntax

__all__ = [
    "EMPTY_OBJECT",
    "TemplateBuilder",
    "build_object_template",
    "collect_properties",
]

EMPTY_OBJECT = "{}"


def collect_properties(
    node: SchemaNode, include_optional: bool = True
) -> list[PropertyInfo]:
    """Select and order the properties that go into an object template.

    Args:
        node:             Schema node whose properties are templated.
        include_optional: Also select optional properties that carry a
                          recommended value.

    Returns:
        Required properties first, then recommended optional ones.  Empty
        for nodes without properties.  Required names with no matching
        property schema are skipped.
    """
    if not isinstance(node, ObjectNode):
        return []

    selected = [
        PropertyInfo.from_node(name, node.properties[name], required=True)
        for name in node.required
        if name in node.properties
    ]
    if include_optional:
        selected.extend(
            PropertyInfo.from_node(name, child, required=False)
            for name, child in node.properties.items()
            if name not in node.required and child.has_recommended_value
        )
    return selected


def _quote_key(name: str) -> str:
    return json.dumps(name, ensure_ascii=False)


@dataclass
class TemplateBuilder:
    """Renders schema nodes into snippet text.

    Attributes:
        config: Engine parameters; ``indent_unit`` and ``include_optional``
                are used here.
        syntax: Placeholder serializer.  Defaults to ``TabstopSyntax``.

    Example::

        builder = TemplateBuilder()
        builder.object_template(node)
        # '{\\n  "name": ${1:""},\\n  "port": ${2:80}\\n}'
    """

    config: CompletionConfig = field(default_factory=CompletionConfig)
    syntax: SnippetSyntax = field(default_factory=TabstopSyntax)

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    def render_fields(
        self, properties: list[PropertyInfo], indent: str, start: int = 1
    ) -> tuple[str, int]:
        """Render one field per property, numbering placeholders from ``start``.

        Returns:
            ``(text, next_index)``: the fields joined by ``",\\n"``, each line
            prefixed with ``indent``, and the first unused placeholder number.
        """
        lines: list[str] = []
        index = start
        for prop in properties:
            text = format_value(prop.value, prop.type)
            lines.append(
                f"{indent}{_quote_key(prop.name)}: {self.syntax.placeholder(index, text)}"
            )
            index += 1
        return ",\n".join(lines), index

    def value_snippet(self, node: SchemaNode, index: int = 1) -> str:
        """Single placeholder pre-filled with the node's suggested value or blank."""
        text = format_value(node.suggested_value, node.type)
        return self.syntax.placeholder(index, text)

    # ------------------------------------------------------------------
    # Templates
    # ------------------------------------------------------------------

    def object_template(
        self,
        node: SchemaNode,
        indent: str = "",
        include_optional: bool | None = None,
    ) -> str:
        """Render a multi-line object literal for ``node``.

        Args:
            node:             Schema of the object being inserted.
            indent:           Indentation of the line the object opens on.
                              Fields get one extra indent unit.
            include_optional: Overrides ``config.include_optional``.

        Returns:
            ``"{\\n<fields>\\n<indent>}"``, or ``"{}"`` when no property is
            selected.
        """
        optional = (
            self.config.include_optional if include_optional is None else include_optional
        )
        properties = collect_properties(node, include_optional=optional)
        if not properties:
            return EMPTY_OBJECT
        fields, _ = self.render_fields(properties, indent + self.config.indent)
        return f"{{\n{fields}\n{indent}}}"

    def array_skeleton(self, indent: str = "") -> str:
        """Empty multi-line array with the final cursor inside."""
        inner = indent + self.config.indent
        cursor = self.syntax.final_cursor()
        return f"[\n{inner}{cursor}\n{indent}]"

    def section_template(self, name: str, node: SchemaNode, indent: str = "") -> str:
        """Render ``"<name>": {...}`` for a top-level document section."""
        return f"{_quote_key(name)}: {self.object_template(node, indent)}"

    def property_insert_text(self, name: str, node: SchemaNode, indent: str = "") -> str:
        """Render a complete ``"<name>": <value>`` member for property completion."""
        key = _quote_key(name)
        if isinstance(node, ObjectNode) and node.properties:
            return f"{key}: {self.object_template(node, indent)}"
        if isinstance(node, ArrayNode):
            return f"{key}: {self.array_skeleton(indent)}"
        return f"{key}: {self.value_snippet(node)}"

    def resource_template(self, root: SchemaNode, indent: str = "") -> str:
        """Render a whole resource document from its root schema.

        Each selected root property that is an object becomes a nested block
        of its own selected fields; other root properties become single
        fields.  Placeholder numbering runs across the whole document.  The
        final cursor is placed in the first block that has no fields.
        """
        unit = self.config.indent
        level1 = indent + unit
        level2 = level1 + unit
        blocks: list[str] = []
        index = 1
        cursor_placed = False

        for prop in collect_properties(root, self.config.include_optional):
            child = root.properties[prop.name] if isinstance(root, ObjectNode) else None
            key = _quote_key(prop.name)
            if not isinstance(child, ObjectNode):
                text = format_value(prop.value, prop.type)
                blocks.append(f"{level1}{key}: {self.syntax.placeholder(index, text)}")
                index += 1
                continue

            fields, index = self.render_fields(
                collect_properties(child, self.config.include_optional), level2, index
            )
            if not fields and not cursor_placed:
                cursor = self.syntax.final_cursor()
                if cursor:
                    fields = f"{level2}{cursor}"
                    cursor_placed = True
            body = f"\n{fields}\n{level1}" if fields else ""
            blocks.append(f"{level1}{key}: {{{body}}}")

        if not blocks:
            return EMPTY_OBJECT
        joined = ",\n".join(blocks)
        return f"{{\n{joined}\n{indent}}}"


def build_object_template(
    node: SchemaNode,
    indent: str = "",
    config: CompletionConfig | None = None,
    syntax: SnippetSyntax | None = None,
) -> str:
    """Functional shortcut for ``TemplateBuilder(...).object_template(node, indent)``."""
    builder = TemplateBuilder(
        config=config if config is not None else CompletionConfig(),
        syntax=syntax if syntax is not None else TabstopSyntax(),
    )
    return builder.object_template(node, indent)
