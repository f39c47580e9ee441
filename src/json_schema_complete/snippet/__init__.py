"""Snippet subpackage: value formatting and template generation.

Re-exports the public API for the snippet module:
- format_value / placeholder_for_type: typed values and blanks as JSON text
- TemplateBuilder / build_object_template: multi-field templates
- collect_properties: required-then-recommended property selection
- TabstopSyntax / PlainSyntax: placeholder serializers
"""

from json_schema_complete.snippet.formatter import (
    compact_json,
    format_value,
    placeholder_for_type,
)
from json_schema_complete.snippet.syntax import PlainSyntax, TabstopSyntax
from json_schema_complete.snippet.template import (
    TemplateBuilder,
    build_object_template,
    collect_properties,
)

__all__ = [
    "PlainSyntax",
    "TabstopSyntax",
    "TemplateBuilder",
    "build_object_template",
    "collect_properties",
    "compact_json",
    "format_value",
    "placeholder_for_type",
]
