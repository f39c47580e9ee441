"""Integration tests for the public API surface.

All imports are from the top-level ``json_schema_complete`` package.  Walks
through an editing session on a resource document generated from field
metadata: each step types a little more text and checks what the engine
offers at the cursor.
"""

from __future__ import annotations

import json

import pytest

from json_schema_complete import (
    CompletionKind,
    CompletionProvider,
    SchemaRegistry,
)
from json_schema_complete.schema import ResourceTypeInfo

URI = "f5xc://staging/team-a/http_loadbalancer/frontend.json"


@pytest.fixture
def provider() -> CompletionProvider:
    info = ResourceTypeInfo.from_dict(
        {
            "displayName": "HTTP Load Balancer",
            "fieldMetadata": {
                "fields": {
                    "spec.domains": {"recommendedValue": ["example.com"]},
                    "spec.http.port": {"recommendedValue": 80},
                    "spec.http.dns_volterra_managed": {"default": False},
                    "spec.advertise_on_public_default_vip": {"recommendedValue": {}},
                    "spec.disable_waf": {"default": True, "serverDefault": True},
                },
                "userRequiredFields": ["spec.domains"],
            },
        }
    )
    return CompletionProvider(SchemaRegistry.from_resource_types({"http_loadbalancer": info}))


class TestEditingSession:
    """Completion at successive cursor positions of one document."""

    def test_empty_document_offers_full_template(self, provider: CompletionProvider) -> None:
        items = provider.complete(URI, "", 0)
        full = items[0]
        assert full.label == "Full resource template"
        assert '"domains": ${' in full.insert_text
        assert '"advertise_on_public_default_vip": ${' in full.insert_text

    def test_spec_member_completion(self, provider: CompletionProvider) -> None:
        text = '{\n  "metadata": {"name": "fe"},\n  "spec": {\n    '
        items = {i.label: i for i in provider.complete(URI, text, len(text))}
        assert set(items) == {
            "domains",
            "http",
            "advertise_on_public_default_vip",
            "disable_waf",
        }
        assert items["domains"].sort_text == "0-domains"
        assert items["domains"].detail == "required, array"
        assert "*Server provides default*" in items["disable_waf"].documentation
        assert items["http"].kind == CompletionKind.PROPERTY

    def test_nested_object_value(self, provider: CompletionProvider) -> None:
        text = '{\n  "spec": {\n    "http": '
        items = provider.complete(URI, text, len(text))
        assert [i.label for i in items] == ["Object template", "Minimal template"]
        assert items[0].insert_text == '{\n      "port": ${1:80}\n    }'
        assert items[1].insert_text == "{}"

    def test_ghost_text(self, provider: CompletionProvider) -> None:
        text = '{\n  "spec": {\n    "http": {\n      "port": '
        assert provider.inline_suggestion(URI, text, len(text)) == "80"

    def test_ghost_text_for_array(self, provider: CompletionProvider) -> None:
        text = '{\n  "spec": {\n    "domains": '
        assert provider.inline_suggestion(URI, text, len(text)) == '["example.com"]'

    def test_completed_document_stays_parseable(self, provider: CompletionProvider) -> None:
        text = '{"metadata": {"name": "fe"}, "spec": {"domains": ["a.com"]}}'
        json.loads(text)
        cursor = text.index('"domains"')
        items = provider.complete(URI, text, cursor)
        assert "domains" in [i.label for i in items]

    def test_next_line_after_value_offers_siblings(
        self, provider: CompletionProvider
    ) -> None:
        text = '{\n  "spec": {\n    "http": {\n      "port": 80\n      '
        labels = [i.label for i in provider.complete(URI, text, len(text))]
        assert labels == ["port", "dns_volterra_managed"]


class TestPackage:
    """Top-level package metadata and exports."""

    def test_version(self) -> None:
        import json_schema_complete

        assert json_schema_complete.__version__ == "0.1.0"

    def test_exports_resolve(self) -> None:
        import json_schema_complete

        for name in json_schema_complete.__all__:
            assert getattr(json_schema_complete, name) is not None
