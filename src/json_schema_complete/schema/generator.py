"""JSON-Schema generation for resource types from field metadata.

Each resource document has two sections:

- ``metadata``: identical for every resource type (name, namespace, labels, ...)
- ``spec``: built from the resource type's field metadata, where each field
  is addressed by a dotted path such as ``spec.routes.timeout``

Field metadata carries the authoring hints the completion engine relies on:
defaults, recommended values, server-provided defaults and required flags.
Types are inferred from the default or recommended value.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from json_schema_complete.schema.builder import RECOMMENDED_VALUE_KEY, SERVER_DEFAULT_KEY
from json_schema_complete.schema.nodes import MISSING

__all__ = [
    "FieldMetadata",
    "ResourceTypeInfo",
    "generate_generic_schema",
    "generate_schema",
    "infer_json_type",
]

SCHEMA_DRAFT = "http://json-schema.org/draft-07/schema#"
SCHEMA_URI_PREFIX = "f5xc-schema://schemas/"
REQUIRED_KEY = "x-f5xc-required"
SERVER_DEFAULT_NOTE = " (Server provides default value)"


@dataclass(frozen=True, slots=True)
class FieldMetadata:
    """Authoring hints for one ``spec`` field.

    Attributes:
        default:             Value used when the field is omitted, or MISSING.
        recommended_value:   Suggested value for new documents, or MISSING.
        server_default:      The server fills the value in when omitted.
        required_for_create: The field must be supplied on create.
    """

    default: Any = MISSING
    recommended_value: Any = MISSING
    server_default: bool = False
    required_for_create: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FieldMetadata:
        """Parse metadata written in snake_case or camelCase keys."""
        required_for = data.get("requiredFor") or {}
        return cls(
            default=data.get("default", MISSING),
            recommended_value=data.get(
                "recommended_value", data.get("recommendedValue", MISSING)
            ),
            server_default=bool(
                data.get("server_default", data.get("serverDefault", False))
            ),
            required_for_create=bool(
                data.get("required_for_create", required_for.get("create", False))
            ),
        )


@dataclass(frozen=True, slots=True)
class ResourceTypeInfo:
    """Description of one resource type.

    Attributes:
        display_name:         Human-readable name, e.g. "HTTP Load Balancer".
        description:          Optional longer description.
        fields:               Field metadata keyed by dotted path.
        user_required_fields: Dotted paths users must supply.
    """

    display_name: str
    description: str = ""
    fields: Mapping[str, FieldMetadata] = field(default_factory=dict)
    user_required_fields: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ResourceTypeInfo:
        """Parse a resource type record (snake_case or camelCase keys).

        ``fields`` may sit at the top level or under ``fieldMetadata``.
        """
        metadata = data.get("fieldMetadata") or data
        raw_fields = metadata.get("fields") or {}
        required = metadata.get(
            "user_required_fields", metadata.get("userRequiredFields", ())
        )
        return cls(
            display_name=str(data.get("display_name", data.get("displayName", ""))),
            description=str(data.get("description", "")),
            fields={
                path: FieldMetadata.from_dict(meta) for path, meta in raw_fields.items()
            },
            user_required_fields=tuple(required or ()),
        )


def infer_json_type(value: Any) -> str | list[str]:
    """Infer a JSON-Schema ``type`` from a sample value.

    ``None`` yields ``["null", "string"]``.  ``bool`` is checked before
    ``int`` because bool subclasses int.
    """
    if value is None:
        return ["null", "string"]
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, list | tuple):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "integer" if value.is_integer() else "number"
    return "string"


def _metadata_schema() -> dict[str, Any]:
    return {
        "type": "object",
        "description": (
            "Resource metadata containing identification and organizational information"
        ),
        "properties": {
            "name": {
                "type": "string",
                "description": (
                    "Resource name (required). Must be unique within the namespace."
                ),
                REQUIRED_KEY: True,
            },
            "namespace": {
                "type": "string",
                "description": "Namespace where the resource resides.",
                RECOMMENDED_VALUE_KEY: "default",
            },
            "labels": {
                "type": "object",
                "description": "Key-value labels for organizing and selecting resources.",
                "additionalProperties": {"type": "string"},
                RECOMMENDED_VALUE_KEY: {},
            },
            "annotations": {
                "type": "object",
                "description": "Key-value annotations for storing non-identifying metadata.",
                "additionalProperties": {"type": "string"},
                RECOMMENDED_VALUE_KEY: {},
            },
            "description": {
                "type": "string",
                "description": "Human-readable description of the resource.",
            },
            "disable": {
                "type": "boolean",
                "description": "Set to true to disable this resource.",
                "default": False,
            },
        },
        "required": ["name"],
    }


def _field_properties(meta: FieldMetadata) -> dict[str, Any]:
    """Translate field metadata into JSON-Schema keywords."""
    props: dict[str, Any] = {}

    if meta.default is not MISSING:
        props["default"] = meta.default
        props["type"] = infer_json_type(meta.default)

    if meta.server_default:
        props[SERVER_DEFAULT_KEY] = True
        props["description"] = props.get("description", "") + SERVER_DEFAULT_NOTE

    if meta.required_for_create:
        props[REQUIRED_KEY] = True

    if meta.recommended_value is not MISSING:
        props[RECOMMENDED_VALUE_KEY] = meta.recommended_value
        props.setdefault("default", meta.recommended_value)
        props.setdefault("type", infer_json_type(meta.recommended_value))

    return props


def _set_nested(
    properties: dict[str, Any], dotted_path: str, props: Mapping[str, Any]
) -> None:
    """Merge ``props`` into the leaf at ``dotted_path``, creating objects on the way."""
    *parents, leaf = dotted_path.split(".")
    current = properties
    for part in parents:
        node = current.setdefault(part, {"type": "object", "properties": {}})
        if node.get("type") != "object":
            node["type"] = "object"
        current = node.setdefault("properties", {})
    current.setdefault(leaf, {"type": "string"}).update(props)


def _spec_schema(info: ResourceTypeInfo) -> dict[str, Any]:
    spec: dict[str, Any] = {
        "type": "object",
        "description": f"{info.display_name} specification",
        "properties": {},
        "additionalProperties": True,
    }

    for dotted, meta in info.fields.items():
        if not dotted.startswith("spec."):
            continue
        _set_nested(spec["properties"], dotted.removeprefix("spec."), _field_properties(meta))

    required: list[str] = []
    for dotted in info.user_required_fields:
        if not dotted.startswith("spec."):
            continue
        top = dotted.removeprefix("spec.").split(".")[0]
        if top and top not in required:
            required.append(top)
    if required:
        spec["required"] = required

    return spec


def generate_schema(resource_type: str, info: ResourceTypeInfo) -> dict[str, Any]:
    """Generate the JSON-Schema document for one resource type.

    Args:
        resource_type: Resource type key, e.g. ``"http_loadbalancer"``.
        info:          The type's display data and field metadata.

    Returns:
        A draft-07 schema with ``metadata`` and ``spec`` sections, both required.
    """
    return {
        "$schema": SCHEMA_DRAFT,
        "$id": f"{SCHEMA_URI_PREFIX}{resource_type}.json",
        "title": f"F5 XC {info.display_name}",
        "description": info.description,
        "type": "object",
        "properties": {
            "metadata": _metadata_schema(),
            "spec": _spec_schema(info),
        },
        "required": ["metadata", "spec"],
    }


def generate_generic_schema() -> dict[str, Any]:
    """Generate the fallback schema that matches any resource type."""
    return {
        "$schema": SCHEMA_DRAFT,
        "$id": f"{SCHEMA_URI_PREFIX}generic.json",
        "title": "F5 XC Resource",
        "description": "Generic schema for F5 Distributed Cloud resources",
        "type": "object",
        "properties": {
            "metadata": _metadata_schema(),
            "spec": {
                "type": "object",
                "description": "Resource specification",
                "additionalProperties": True,
            },
        },
        "required": ["metadata", "spec"],
    }
