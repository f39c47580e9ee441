"""Context subpackage: cursor location inference for incomplete JSON text.

Re-exports the public API for the context module:
- JsonContext: inferred path, container flags, property name and indentation
- ContainerState: net brace/bracket depth before the cursor
- ARRAY_PLACEHOLDER: the fixed path token used for every array element
- scan_containers: bracket/string scanner
- parse_json_path: bounded-lookahead path parser
- get_json_context: combines the above for a (text, offset) pair
"""

from json_schema_complete.context.nodes import (
    ARRAY_PLACEHOLDER,
    ContainerState,
    JsonContext,
)
from json_schema_complete.context.path_parser import parse_json_path
from json_schema_complete.context.resolver import (
    get_json_context,
    is_after_property_colon,
    property_name_before_colon,
)
from json_schema_complete.context.scanner import scan_containers

__all__ = [
    "ARRAY_PLACEHOLDER",
    "ContainerState",
    "JsonContext",
    "get_json_context",
    "is_after_property_colon",
    "parse_json_path",
    "property_name_before_colon",
    "scan_containers",
]
