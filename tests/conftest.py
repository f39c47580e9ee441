"""Shared schema fixtures.

``ORIGIN_POOL_SCHEMA`` is a trimmed-down resource schema that exercises
every template rule: required fields without values, optional fields with
and without recommended values, server defaults, enums, arrays of scalars
and arrays of objects.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from json_schema_complete.provider import CompletionProvider
from json_schema_complete.schema import SchemaRegistry, SchemaTreeBuilder
from json_schema_complete.schema.nodes import SchemaNode

RESOURCE_URI = "f5xc://prod/shared/origin_pool/pool-a.json"

ORIGIN_POOL_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "F5 XC Origin Pool",
    "type": "object",
    "properties": {
        "metadata": {
            "type": "object",
            "description": "Resource metadata",
            "properties": {
                "name": {"type": "string", "description": "Resource name."},
                "namespace": {
                    "type": "string",
                    "x-f5xc-recommended-value": "default",
                },
                "labels": {"type": "object", "x-f5xc-recommended-value": {}},
                "description": {"type": "string"},
            },
            "required": ["name"],
        },
        "spec": {
            "type": "object",
            "description": "Origin pool specification",
            "properties": {
                "port": {"type": "integer"},
                "loadbalancer_algorithm": {
                    "type": "string",
                    "description": "How requests are spread over origins.",
                    "enum": ["ROUND_ROBIN", "LEAST_ACTIVE", "RANDOM"],
                    "x-f5xc-recommended-value": "ROUND_ROBIN",
                },
                "endpoint_selection": {
                    "type": "string",
                    "default": "DISTRIBUTED",
                    "x-f5xc-server-default": True,
                },
                "origin_servers": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "public_name": {
                                "type": "object",
                                "properties": {"dns_name": {"type": "string"}},
                                "required": ["dns_name"],
                            },
                            "labels": {"type": "object"},
                        },
                    },
                },
                "no_tls": {"type": "boolean"},
                "healthcheck": {
                    "type": "array",
                    "items": {"type": "string"},
                    "x-f5xc-recommended-value": [],
                },
                "connection_timeout": {
                    "type": "integer",
                    "x-f5xc-recommended-value": 2000,
                },
            },
            "required": ["port", "origin_servers"],
        },
    },
    "required": ["metadata", "spec"],
}


@pytest.fixture
def origin_pool_schema() -> dict[str, Any]:
    """A fresh deep copy of the origin pool schema document."""
    return copy.deepcopy(ORIGIN_POOL_SCHEMA)


@pytest.fixture
def origin_pool_root(origin_pool_schema: dict[str, Any]) -> SchemaNode:
    """The origin pool schema converted to a SchemaNode tree."""
    return SchemaTreeBuilder().build(origin_pool_schema)


@pytest.fixture
def registry(origin_pool_schema: dict[str, Any]) -> SchemaRegistry:
    """Registry serving only the origin_pool resource type."""
    return SchemaRegistry.from_schemas({"origin_pool": origin_pool_schema})


@pytest.fixture
def provider(registry: SchemaRegistry) -> CompletionProvider:
    """CompletionProvider with default configuration."""
    return CompletionProvider(registry)


@pytest.fixture
def resource_uri() -> str:
    """URI of an origin_pool document in the custom resource scheme."""
    return RESOURCE_URI
