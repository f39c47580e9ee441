"""JSON schema complete - schema-aware completion for JSON resource documents."""

from __future__ import annotations

from json_schema_complete.api import (
    complete,
    format_value,
    generate_object_template,
    get_json_context,
    inline_suggestion,
    navigate,
)
from json_schema_complete.config import CompletionConfig, PositionEncoding
from json_schema_complete.context import JsonContext
from json_schema_complete.provider import CompletionProvider
from json_schema_complete.result import CompletionItem, CompletionKind
from json_schema_complete.schema import MISSING, SchemaRegistry

__version__: str = "0.1.0"
__all__: list[str] = [
    "MISSING",
    "CompletionConfig",
    "CompletionItem",
    "CompletionKind",
    "CompletionProvider",
    "JsonContext",
    "PositionEncoding",
    "SchemaRegistry",
    "complete",
    "format_value",
    "generate_object_template",
    "get_json_context",
    "inline_suggestion",
    "navigate",
]
