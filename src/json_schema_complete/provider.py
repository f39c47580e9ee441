"""CompletionProvider: orchestrator that wires SchemaRegistry + context resolver + TemplateBuilder.

This is the layer an editor integration talks to.  Given a document URI,
its text and a cursor offset it returns host-neutral ``CompletionItem``
records or a ghost-text string.

Architecture:
- The resource type is resolved from the URI; no type or no schema means
  no suggestions.
- The cursor context is computed fresh per request from the text alone.
- Dispatch on the context:
    * empty path            -> full resource template + one item per section
    * in object, no colon   -> one property item per member of the node
    * after a property colon -> value items for the property's schema
- Schema trees are borrowed from the registry for the duration of a call
  and never mutated.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from json_schema_complete.config import CompletionConfig
from json_schema_complete.context.nodes import JsonContext
from json_schema_complete.context.resolver import (
    get_json_context,
    is_after_property_colon,
)
from json_schema_complete.context.positions import to_index
from json_schema_complete.protocols import SnippetSyntax
from json_schema_complete.resource import detect_resource_type, is_resource_document
from json_schema_complete.result import CompletionItem, CompletionKind
from json_schema_complete.schema.navigator import navigate
from json_schema_complete.schema.nodes import MISSING, ArrayNode, ObjectNode, SchemaNode
from json_schema_complete.schema.registry import SchemaRegistry
from json_schema_complete.snippet.formatter import compact_json, format_value, primary_tag
from json_schema_complete.snippet.syntax import PlainSyntax, TabstopSyntax
from json_schema_complete.snippet.template import TemplateBuilder

_LOG = logging.getLogger(__name__)

__all__ = ["CompletionProvider"]

FULL_TEMPLATE_LABEL = "Full resource template"


def _describe(node: SchemaNode, required: bool) -> str:
    parts: list[str] = []
    if node.description:
        parts.append(node.description)
    if required:
        parts.append("**Required**")
    if node.has_recommended_value:
        parts.append(f"Recommended: `{compact_json(node.recommended_value)}`")
    if node.is_server_default:
        parts.append("*Server provides default*")
    return "\n\n".join(parts)


def _sort_prefix(node: SchemaNode, required: bool) -> str:
    if required:
        return "0"
    if node.has_recommended_value:
        return "1"
    return "2"


class CompletionProvider:
    """Schema-driven completion for resource documents.

    Example::

        from json_schema_complete.provider import CompletionProvider
        from json_schema_complete.schema import SchemaRegistry

        provider = CompletionProvider(SchemaRegistry.from_schemas(schemas))
        items = provider.complete("f5xc://p/ns/origin_pool/a.json", text, offset)
        [item.label for item in items]   # ["Full resource template", ...]
    """

    def __init__(
        self,
        registry: SchemaRegistry,
        config: CompletionConfig | None = None,
        syntax: SnippetSyntax | None = None,
    ) -> None:
        self._registry = registry
        self._config: CompletionConfig = (
            config if config is not None else CompletionConfig()
        )
        self._syntax: SnippetSyntax = syntax if syntax is not None else TabstopSyntax()
        self._templates = TemplateBuilder(config=self._config, syntax=self._syntax)

    @property
    def config(self) -> CompletionConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def schema_for(self, uri: str, language_id: str = "json") -> SchemaNode | None:
        """Return the schema tree that applies to the document at ``uri``."""
        known = self._registry.available_resource_types()
        if not is_resource_document(uri, language_id, known):
            return None
        resource_type = detect_resource_type(uri, known)
        if resource_type is None:
            _LOG.debug("Could not detect resource type for %s", uri)
            return None
        root = self._registry.get(resource_type)
        if root is None:
            _LOG.debug("No schema for resource type: %s", resource_type)
        return root

    def complete(
        self, uri: str, text: str, offset: int, language_id: str = "json"
    ) -> list[CompletionItem]:
        """Return completion items for the cursor at ``offset`` in ``text``.

        Args:
            uri:         Document URI; selects the resource schema.
            text:        Full document text, valid or not.
            offset:      Cursor offset in ``config.position_encoding`` units.
            language_id: Host language identifier; only ``"json"`` completes.

        Returns:
            Items in no particular order (hosts sort by ``sort_text``).  Empty
            when the document has no schema or the cursor location has none.
        """
        root = self.schema_for(uri, language_id)
        if root is None:
            return []
        return self.complete_with_schema(root, text, offset)

    def complete_with_schema(
        self, root: SchemaNode, text: str, offset: int
    ) -> list[CompletionItem]:
        """Same as ``complete`` with the schema tree supplied directly."""
        context = get_json_context(text, offset, self._config)
        _LOG.debug("Completion triggered at path: %s", ".".join(context.path))

        if context.is_root:
            return self._root_items(root, context)

        if context.in_object and not context.after_colon:
            node = navigate(root, context.path)
            return self._property_items(node, context) if node is not None else []

        value_path = context.value_path()
        if value_path is not None:
            node = navigate(root, value_path)
            return self._value_items(node, context) if node is not None else []

        return []

    def inline_suggestion(
        self, uri: str, text: str, offset: int, language_id: str = "json"
    ) -> str | None:
        """Return ghost text for the value right after a property colon.

        Offered only when nothing has been typed after the colon on the
        cursor line.  The suggested value is the recommended value, else the
        default, else ``false`` for booleans.

        Returns:
            Compact JSON text, or None when there is nothing short enough
            to show.
        """
        root = self.schema_for(uri, language_id)
        if root is None:
            return None
        return self.inline_with_schema(root, text, offset)

    def inline_with_schema(self, root: SchemaNode, text: str, offset: int) -> str | None:
        """Same as ``inline_suggestion`` with the schema tree supplied directly."""
        index = to_index(text, offset, self._config.position_encoding)
        line_start = text.rfind("\n", 0, index) + 1
        line_prefix = text[line_start:index]
        if not is_after_property_colon(line_prefix):
            return None
        if line_prefix[line_prefix.rfind(":") + 1 :].strip():
            return None

        context = get_json_context(text, offset, self._config)
        value_path = context.value_path()
        if value_path is None:
            return None
        node = navigate(root, value_path)
        if node is None:
            return None

        suggestion = self._ghost_text(node)
        if suggestion is not None:
            _LOG.debug(
                "Inline completion for %s: %s",
                ".".join(value_path),
                suggestion,
            )
        return suggestion

    # ------------------------------------------------------------------
    # Item builders
    # ------------------------------------------------------------------

    @property
    def _is_snippet(self) -> bool:
        return not isinstance(self._syntax, PlainSyntax)

    def _root_items(self, root: SchemaNode, context: JsonContext) -> list[CompletionItem]:
        indent = context.indent_string
        items = [
            CompletionItem(
                label=FULL_TEMPLATE_LABEL,
                kind=CompletionKind.SNIPPET,
                insert_text=self._templates.resource_template(root, indent),
                is_snippet=self._is_snippet,
                sort_text="0",
                detail="Complete resource template",
                documentation="Complete resource structure with metadata and spec",
            )
        ]
        if not isinstance(root, ObjectNode):
            return items

        for name, child in root.properties.items():
            if isinstance(child, ObjectNode):
                insert_text = self._templates.section_template(name, child, indent)
            else:
                insert_text = self._templates.property_insert_text(name, child, indent)
            items.append(
                CompletionItem(
                    label=f"{name} section",
                    kind=CompletionKind.SNIPPET,
                    insert_text=insert_text,
                    is_snippet=self._is_snippet,
                    sort_text=f"1-{name}",
                    detail=f"{name} section template",
                    documentation=child.description or "",
                )
            )
        return items

    def _property_items(
        self, node: SchemaNode, context: JsonContext
    ) -> list[CompletionItem]:
        if not isinstance(node, ObjectNode):
            return []

        items: list[CompletionItem] = []
        for name, child in node.properties.items():
            required = node.is_required(name)
            type_label = "|".join(child.type)
            items.append(
                CompletionItem(
                    label=name,
                    kind=CompletionKind.PROPERTY,
                    insert_text=self._templates.property_insert_text(
                        name, child, context.indent_string
                    ),
                    is_snippet=self._is_snippet,
                    sort_text=f"{_sort_prefix(child, required)}-{name}",
                    detail=f"required, {type_label}" if required else type_label,
                    documentation=_describe(child, required),
                )
            )
        return items

    def _value_items(self, node: SchemaNode, context: JsonContext) -> list[CompletionItem]:
        indent = context.indent_string
        items: list[CompletionItem] = []

        if isinstance(node, ObjectNode) and node.properties:
            full = self._templates.object_template(node, indent)
            items.append(
                CompletionItem(
                    label="Object template",
                    kind=CompletionKind.SNIPPET,
                    insert_text=full,
                    is_snippet=self._is_snippet,
                    sort_text="0",
                    detail="Insert object with required fields",
                    documentation=node.description or "",
                )
            )
            minimal = self._templates.object_template(
                node, indent, include_optional=False
            )
            if minimal != full:
                items.append(
                    CompletionItem(
                        label="Minimal template",
                        kind=CompletionKind.SNIPPET,
                        insert_text=minimal,
                        is_snippet=self._is_snippet,
                        sort_text="1",
                        detail="Insert object with only required fields",
                    )
                )

        if isinstance(node, ArrayNode) and node.items is not None:
            items.append(
                CompletionItem(
                    label="Array",
                    kind=CompletionKind.VALUE,
                    insert_text=self._templates.array_skeleton(indent),
                    is_snippet=self._is_snippet,
                    sort_text="0",
                    detail="Insert empty array",
                )
            )

        for position, member in enumerate(node.enum or ()):
            items.append(
                CompletionItem(
                    label=str(member) if isinstance(member, str) else compact_json(member),
                    kind=CompletionKind.ENUM_MEMBER,
                    insert_text=json.dumps(member, ensure_ascii=False),
                    is_snippet=False,
                    sort_text=f"{position:03d}",
                    detail="enum value",
                    documentation=node.description or "",
                )
            )
        return items

    # ------------------------------------------------------------------
    # Ghost text
    # ------------------------------------------------------------------

    def _ghost_value(self, node: SchemaNode) -> Any:
        value = node.suggested_value
        if value is MISSING and node.primary_type == "boolean":
            return False
        return value

    def _ghost_text(self, node: SchemaNode) -> str | None:
        value = self._ghost_value(node)
        if value is MISSING:
            return None
        if value is None:
            return "null"

        cfg = self._config
        tag = primary_tag(node.type)

        if tag == "string":
            text = value if isinstance(value, str) else compact_json(value)
            return None if "\n" in text else json.dumps(text, ensure_ascii=False)

        if tag in ("number", "integer", "boolean"):
            return format_value(value, tag)

        if tag == "array":
            if not isinstance(value, list | tuple):
                return None
            compact = compact_json(list(value))
            return compact if not value or len(compact) <= cfg.inline_max_array_length else None

        if tag == "object":
            if not isinstance(value, Mapping):
                return None
            compact = compact_json(dict(value))
            return compact if not value or len(compact) <= cfg.inline_max_object_length else None

        compact = compact_json(value)
        return compact if len(compact) <= cfg.inline_max_length else None
