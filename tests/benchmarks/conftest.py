"""Deterministic document and schema generators for performance benchmarks.

All generators produce fixed, reproducible text. No random values.
Three tiers: 10-property flat, 100-property nested, 1000-property nested
documents, each paired with a schema describing it and a cursor at the end.
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from json_schema_complete.schema import SchemaNode, SchemaTreeBuilder


def _flat_schema(num_props: int) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            f"field_{i}": {"type": "string", "x-f5xc-recommended-value": f"v{i}"}
            for i in range(num_props)
        },
        "required": [f"field_{i}" for i in range(0, num_props, 2)],
    }


def _nested_schema(sections: int, per_section: int) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            f"section_{i}": {
                "type": "array",
                "items": _flat_schema(per_section),
            }
            for i in range(sections)
        },
    }


def _nested_document(sections: int, per_section: int) -> dict[str, Any]:
    return {
        f"section_{i}": [{f"field_{j}": f"value_{j}" for j in range(per_section)}]
        for i in range(sections)
    }


def _open_document(document: dict[str, Any]) -> str:
    """Pretty-print ``document`` and reopen its last section for typing."""
    text = json.dumps(document, indent=2)
    # Drop the closing "]\n}" and the last element's "}" to leave the
    # cursor inside the last array element, after a trailing comma.
    cut = text.rstrip("}\n ]")
    return cut + ',\n      "'


@pytest.fixture
def case_10() -> tuple[SchemaNode, str]:
    """10-property flat root object; cursor after the last member."""
    root = SchemaTreeBuilder().build(_flat_schema(10))
    text = json.dumps({f"field_{i}": f"value_{i}" for i in range(10)}, indent=2)
    return root, text[:-2] + ",\n  "


@pytest.fixture
def case_100() -> tuple[SchemaNode, str]:
    """10 sections x 10 properties; cursor inside the last array element."""
    root = SchemaTreeBuilder().build(_nested_schema(10, 10))
    return root, _open_document(_nested_document(10, 10))


@pytest.fixture
def case_1000() -> tuple[SchemaNode, str]:
    """20 sections x 50 properties; cursor inside the last array element."""
    root = SchemaTreeBuilder().build(_nested_schema(20, 50))
    return root, _open_document(_nested_document(20, 50))
