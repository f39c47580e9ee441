"""Performance benchmark suite for json-schema-complete.

Completion runs on every keystroke, so each tier measures a full
``complete_with_schema`` call (context resolution, navigation and item
building) on a document with the cursor at its end.

Run with: pytest tests/benchmarks/ --benchmark-enable -v
"""

from __future__ import annotations

from json_schema_complete import CompletionProvider, SchemaRegistry, get_json_context


def _provider() -> CompletionProvider:
    return CompletionProvider(SchemaRegistry.from_schemas({}))


class TestPerformance10Props:
    """Benchmark suite for a 10-property flat document."""

    def test_10_complete(self, benchmark, case_10):  # type: ignore[no-untyped-def]
        root, text = case_10
        items = benchmark(_provider().complete_with_schema, root, text, len(text))
        # Root level: full template plus one section item per member.
        assert len(items) == 11


class TestPerformance100Props:
    """Benchmark suite for a 100-property nested document."""

    def test_100_complete(self, benchmark, case_100):  # type: ignore[no-untyped-def]
        root, text = case_100
        items = benchmark(_provider().complete_with_schema, root, text, len(text))
        assert len(items) == 10

    def test_100_context(self, benchmark, case_100):  # type: ignore[no-untyped-def]
        _, text = case_100
        ctx = benchmark(get_json_context, text, len(text))
        assert ctx.path == ("section_9", "0")


class TestPerformance1000Props:
    """Benchmark suite for a 1000-property nested document."""

    def test_1000_complete(self, benchmark, case_1000):  # type: ignore[no-untyped-def]
        root, text = case_1000
        items = benchmark(_provider().complete_with_schema, root, text, len(text))
        assert len(items) == 50

    def test_1000_context(self, benchmark, case_1000):  # type: ignore[no-untyped-def]
        _, text = case_1000
        ctx = benchmark(get_json_context, text, len(text))
        assert ctx.path == ("section_19", "0")
