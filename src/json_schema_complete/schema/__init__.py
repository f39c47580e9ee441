"""Schema subpackage: typed schema trees and their registry.

Re-exports the public API for the schema module:
- ScalarNode, ObjectNode, ArrayNode: the three schema node variants
- SchemaNode: union of the variants
- SchemaKind: StrEnum tag of the variants
- PropertyInfo: flattened property view used for templates
- MISSING: marker for absent default/recommended values
- SchemaTreeBuilder: converts JSON-Schema mappings into SchemaNode trees
- navigate: walks a tree along a context path
- SchemaRegistry: LRU-cached read-only access to trees by resource type
"""

from json_schema_complete.schema.builder import SchemaTreeBuilder
from json_schema_complete.schema.generator import FieldMetadata, ResourceTypeInfo
from json_schema_complete.schema.navigator import navigate
from json_schema_complete.schema.nodes import (
    MISSING,
    ArrayNode,
    ObjectNode,
    PropertyInfo,
    ScalarNode,
    SchemaKind,
    SchemaNode,
)
from json_schema_complete.schema.registry import CacheStats, SchemaRegistry

__all__ = [
    "MISSING",
    "ArrayNode",
    "CacheStats",
    "FieldMetadata",
    "ObjectNode",
    "PropertyInfo",
    "ResourceTypeInfo",
    "ScalarNode",
    "SchemaKind",
    "SchemaNode",
    "SchemaRegistry",
    "SchemaTreeBuilder",
    "navigate",
]
