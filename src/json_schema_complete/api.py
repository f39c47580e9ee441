"""Public API functions for json-schema-complete.

Each function creates its collaborators fresh per call (``TemplateBuilder``,
``CompletionProvider``) so that no state is shared between calls.  Schema
trees come from the caller-owned ``SchemaRegistry``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from json_schema_complete.config import CompletionConfig
from json_schema_complete.context.nodes import JsonContext
from json_schema_complete.context.resolver import get_json_context as _get_json_context
from json_schema_complete.protocols import SnippetSyntax
from json_schema_complete.provider import CompletionProvider
from json_schema_complete.result import CompletionItem
from json_schema_complete.schema.navigator import navigate as _navigate
from json_schema_complete.schema.nodes import SchemaNode
from json_schema_complete.schema.registry import SchemaRegistry
from json_schema_complete.snippet.formatter import format_value as _format_value
from json_schema_complete.snippet.template import build_object_template

__all__ = [
    "complete",
    "format_value",
    "generate_object_template",
    "get_json_context",
    "inline_suggestion",
    "navigate",
]


def get_json_context(
    text: str, offset: int, config: CompletionConfig | None = None
) -> JsonContext:
    """Return the structural location of the cursor at ``offset`` in ``text``.

    Args:
        text:   Document text; may be invalid or truncated JSON.
        offset: Cursor offset in ``config.position_encoding`` units
                (UTF-16 code units by default).
        config: Engine parameters.  Defaults to ``CompletionConfig()`` when None.

    Returns:
        A ``JsonContext`` with path, after_colon, in_object, in_array,
        property_name and indentation populated.
    """
    return _get_json_context(text, offset, config)


def navigate(root: SchemaNode, path: Iterable[str]) -> SchemaNode | None:
    """Return the schema node at ``path`` below ``root``, or None."""
    return _navigate(root, path)


def format_value(value: Any, type_tag: str | Sequence[str] | None = None) -> str:
    """Format ``value`` as JSON source text for the schema type ``type_tag``."""
    return _format_value(value, type_tag)


def generate_object_template(
    node: SchemaNode,
    indent: str = "",
    config: CompletionConfig | None = None,
    syntax: SnippetSyntax | None = None,
) -> str:
    """Render an object template with sequential placeholders for ``node``.

    Args:
        node:   Schema node whose required (and recommended) properties are
                templated.
        indent: Indentation of the line the object opens on.
        config: Engine parameters.  Defaults to ``CompletionConfig()`` when None.
        syntax: Placeholder serializer.  Defaults to ``TabstopSyntax()``.

    Returns:
        ``"{\\n<fields>\\n<indent>}"``, or ``"{}"`` when no property is selected.
    """
    return build_object_template(node, indent, config=config, syntax=syntax)


def complete(
    registry: SchemaRegistry,
    uri: str,
    text: str,
    offset: int,
    config: CompletionConfig | None = None,
    syntax: SnippetSyntax | None = None,
) -> list[CompletionItem]:
    """Return completion items for the cursor at ``offset``.

    Creates a fresh ``CompletionProvider`` per call.
    """
    return CompletionProvider(registry, config=config, syntax=syntax).complete(
        uri, text, offset
    )


def inline_suggestion(
    registry: SchemaRegistry,
    uri: str,
    text: str,
    offset: int,
    config: CompletionConfig | None = None,
) -> str | None:
    """Return ghost text for the value after a property colon, or None."""
    return CompletionProvider(registry, config=config).inline_suggestion(
        uri, text, offset
    )
