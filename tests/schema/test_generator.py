"""Tests for schema generation from resource type field metadata."""

from __future__ import annotations

from typing import Any

import pytest

from json_schema_complete.schema import MISSING, FieldMetadata, ResourceTypeInfo
from json_schema_complete.schema.generator import (
    generate_generic_schema,
    generate_schema,
    infer_json_type,
)


@pytest.fixture
def http_lb_info() -> ResourceTypeInfo:
    return ResourceTypeInfo.from_dict(
        {
            "displayName": "HTTP Load Balancer",
            "description": "Layer 7 load balancer.",
            "fieldMetadata": {
                "fields": {
                    "spec.domains": {"recommendedValue": ["example.com"]},
                    "spec.routes.timeout": {"default": 30, "serverDefault": True},
                    "spec.add_location": {"default": False},
                    "spec.http.port": {
                        "recommendedValue": 80,
                        "requiredFor": {"create": True},
                    },
                    "metadata.name": {"default": "ignored"},
                },
                "userRequiredFields": ["spec.domains", "spec.http.port", "metadata.name"],
            },
        }
    )


class TestInferJsonType:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, "boolean"),
            (3, "integer"),
            (3.0, "integer"),
            (3.5, "number"),
            ("x", "string"),
            ([], "array"),
            ({}, "object"),
            (None, ["null", "string"]),
        ],
    )
    def test_inference(self, value: Any, expected: Any) -> None:
        assert infer_json_type(value) == expected


class TestMetadataParsing:
    def test_camel_and_snake_case(self) -> None:
        camel = FieldMetadata.from_dict(
            {"recommendedValue": 1, "serverDefault": True, "requiredFor": {"create": True}}
        )
        snake = FieldMetadata.from_dict(
            {"recommended_value": 1, "server_default": True, "required_for_create": True}
        )
        assert camel == snake

    def test_absent_values(self) -> None:
        meta = FieldMetadata.from_dict({})
        assert meta.default is MISSING
        assert meta.recommended_value is MISSING
        assert not meta.server_default

    def test_top_level_fields(self) -> None:
        info = ResourceTypeInfo.from_dict(
            {"display_name": "Pool", "fields": {"spec.port": {"default": 1}}}
        )
        assert info.display_name == "Pool"
        assert info.fields["spec.port"].default == 1


class TestGenerateSchema:
    def test_envelope(self, http_lb_info: ResourceTypeInfo) -> None:
        schema = generate_schema("http_loadbalancer", http_lb_info)
        assert schema["$id"] == "f5xc-schema://schemas/http_loadbalancer.json"
        assert schema["title"] == "F5 XC HTTP Load Balancer"
        assert schema["required"] == ["metadata", "spec"]
        assert schema["properties"]["metadata"]["required"] == ["name"]

    def test_nested_fields(self, http_lb_info: ResourceTypeInfo) -> None:
        spec = generate_schema("http_loadbalancer", http_lb_info)["properties"]["spec"]
        routes = spec["properties"]["routes"]
        assert routes["type"] == "object"
        timeout = routes["properties"]["timeout"]
        assert timeout["default"] == 30
        assert timeout["type"] == "integer"
        assert timeout["x-f5xc-server-default"] is True
        assert timeout["description"].endswith("(Server provides default value)")

    def test_recommended_value(self, http_lb_info: ResourceTypeInfo) -> None:
        spec = generate_schema("http_loadbalancer", http_lb_info)["properties"]["spec"]
        domains = spec["properties"]["domains"]
        assert domains["x-f5xc-recommended-value"] == ["example.com"]
        assert domains["default"] == ["example.com"]
        assert domains["type"] == "array"

    def test_required_for_create(self, http_lb_info: ResourceTypeInfo) -> None:
        spec = generate_schema("http_loadbalancer", http_lb_info)["properties"]["spec"]
        assert spec["properties"]["http"]["properties"]["port"]["x-f5xc-required"] is True

    def test_spec_required_uses_top_level_names(
        self, http_lb_info: ResourceTypeInfo
    ) -> None:
        spec = generate_schema("http_loadbalancer", http_lb_info)["properties"]["spec"]
        assert spec["required"] == ["domains", "http"]

    def test_non_spec_fields_ignored(self, http_lb_info: ResourceTypeInfo) -> None:
        spec = generate_schema("http_loadbalancer", http_lb_info)["properties"]["spec"]
        assert "name" not in spec["properties"]

    def test_no_fields(self) -> None:
        spec = generate_schema("thing", ResourceTypeInfo("Thing"))["properties"]["spec"]
        assert spec["properties"] == {}
        assert "required" not in spec


class TestGenericSchema:
    def test_generic(self) -> None:
        schema = generate_generic_schema()
        assert schema["$id"] == "f5xc-schema://schemas/generic.json"
        assert schema["properties"]["spec"]["additionalProperties"] is True
        metadata = schema["properties"]["metadata"]["properties"]
        assert metadata["namespace"]["x-f5xc-recommended-value"] == "default"
