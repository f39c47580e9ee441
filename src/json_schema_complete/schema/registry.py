"""SchemaRegistry: LRU-cached, read-only access to resource schema trees.

The registry is an explicitly constructed handle, not a process-wide
singleton.  It owns a loader (resource type -> JSON-Schema document) and
the set of known resource types, and lazily builds and caches a
``SchemaNode`` tree per resource type.  Completion code receives the tree
returned by ``get()`` as an immutable snapshot for the duration of one call.

Each ``SchemaRegistry`` instance maintains its own ``LRUCache``; eviction
is silent.  ``refresh()`` swaps the loader and/or known types and clears
the cache.

Cache reads and writes are guarded by a per-instance lock, so one registry
can serve concurrent completion requests.  Loading and tree building run
outside the lock.

Example::

    from json_schema_complete.schema import SchemaRegistry

    registry = SchemaRegistry.from_schemas({"origin_pool": origin_pool_schema})
    root = registry.get("origin_pool")        # built and cached
    registry.get("origin_pool") is root       # True, served from cache
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from cachetools import LRUCache

from json_schema_complete.schema.builder import SchemaTreeBuilder
from json_schema_complete.schema.generator import (
    SCHEMA_URI_PREFIX,
    ResourceTypeInfo,
    generate_generic_schema,
    generate_schema,
)
from json_schema_complete.schema.nodes import SchemaNode

_LOG = logging.getLogger(__name__)

SchemaLoader = Callable[[str], Mapping[str, Any] | None]

GENERIC_SCHEMA_ID = "generic"


@dataclass(frozen=True, slots=True)
class CacheStats:
    """Registry cache counters.

    Attributes:
        cached_count:    Resource types currently held in the cache.
        available_count: Resource types the registry can serve.
    """

    cached_count: int
    available_count: int


@dataclass(frozen=True, slots=True)
class _Entry:
    document: Mapping[str, Any]
    root: SchemaNode


class SchemaRegistry:
    """Lazily builds and caches schema trees keyed by resource type.

    Args:
        loader: Returns the JSON-Schema document for a resource type, or
            None when it has none.
        resource_types: Every resource type the loader can serve.  Used by
            ``has_schema`` and ``available_resource_types``.
        max_size: Maximum number of schema trees held in memory.  Defaults
            to 128.  When exceeded, the least-recently-used entry is
            silently evicted.
    """

    def __init__(
        self,
        loader: SchemaLoader,
        resource_types: Iterable[str],
        max_size: int = 128,
    ) -> None:
        self._loader = loader
        self._resource_types: tuple[str, ...] = tuple(resource_types)
        self._cache: LRUCache[str, _Entry] = LRUCache(maxsize=max_size)
        self._generic: _Entry | None = None
        self._lock = threading.Lock()
        self._builder = SchemaTreeBuilder()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_schemas(
        cls, schemas: Mapping[str, Mapping[str, Any]], max_size: int = 128
    ) -> SchemaRegistry:
        """Registry over ready-made JSON-Schema documents."""
        snapshot = dict(schemas)
        return cls(snapshot.get, snapshot.keys(), max_size=max_size)

    @classmethod
    def from_resource_types(
        cls, resource_types: Mapping[str, ResourceTypeInfo], max_size: int = 128
    ) -> SchemaRegistry:
        """Registry that generates schemas from resource type field metadata."""
        snapshot = dict(resource_types)

        def _load(resource_type: str) -> Mapping[str, Any] | None:
            info = snapshot.get(resource_type)
            return generate_schema(resource_type, info) if info is not None else None

        return cls(_load, snapshot.keys(), max_size=max_size)

    @classmethod
    def from_directory(cls, directory: str | Path, max_size: int = 128) -> SchemaRegistry:
        """Registry over ``<resource_type>.json`` files in ``directory``.

        Files are read on first access, so ``refresh()`` picks up edits.
        """
        root = Path(directory)
        names = sorted(p.stem for p in root.glob("*.json") if p.stem != GENERIC_SCHEMA_ID)

        def _load(resource_type: str) -> Mapping[str, Any] | None:
            path = root / f"{resource_type}.json"
            if not path.is_file():
                return None
            with path.open(encoding="utf-8") as fh:
                return json.load(fh)

        return cls(_load, names, max_size=max_size)

    def refresh(
        self,
        loader: SchemaLoader | None = None,
        resource_types: Iterable[str] | None = None,
    ) -> None:
        """Replace the loader and/or known resource types, then clear the cache."""
        with self._lock:
            if loader is not None:
                self._loader = loader
            if resource_types is not None:
                self._resource_types = tuple(resource_types)
            self._cache.clear()
            self._generic = None
        _LOG.debug("Schema cache cleared")

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, resource_type: str) -> SchemaNode | None:
        """Return the schema tree for ``resource_type``, or None if unknown."""
        entry = self._entry(resource_type)
        return entry.root if entry is not None else None

    def document(self, resource_type: str) -> Mapping[str, Any] | None:
        """Return the JSON-Schema document for ``resource_type``, or None."""
        entry = self._entry(resource_type)
        return entry.document if entry is not None else None

    def generic_schema(self) -> SchemaNode:
        """Return the tree of the schema that matches any resource."""
        return self._generic_entry().root

    def schema_content(self, resource_type: str) -> str:
        """Return the pretty-printed JSON-Schema text for ``resource_type``.

        ``"generic"`` and unknown resource types yield the generic schema.
        """
        entry = None
        if resource_type != GENERIC_SCHEMA_ID:
            entry = self._entry(resource_type)
            if entry is None:
                _LOG.warning(
                    "Unknown resource type: %s, using generic schema", resource_type
                )
        if entry is None:
            entry = self._generic_entry()
        return json.dumps(entry.document, indent=2)

    @staticmethod
    def schema_uri(resource_type: str) -> str:
        return f"{SCHEMA_URI_PREFIX}{resource_type}.json"

    def has_schema(self, resource_type: str) -> bool:
        if resource_type in self._resource_types:
            return True
        with self._lock:
            return resource_type in self._cache

    def available_resource_types(self) -> list[str]:
        return list(self._resource_types)

    # ------------------------------------------------------------------
    # Cache management
    # ------------------------------------------------------------------

    def prewarm(self, resource_types: Iterable[str]) -> None:
        """Build and cache the trees for ``resource_types`` ahead of use."""
        warmed = 0
        for resource_type in resource_types:
            if self._entry(resource_type) is not None:
                warmed += 1
        _LOG.debug("Pre-warmed schema cache for %d resource types", warmed)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
            self._generic = None
        _LOG.debug("Schema cache cleared")

    def cache_stats(self) -> CacheStats:
        with self._lock:
            cached_count = int(self._cache.currsize)
        return CacheStats(
            cached_count=cached_count,
            available_count=len(self._resource_types),
        )

    @property
    def max_size(self) -> int:
        return int(self._cache.maxsize)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _entry(self, resource_type: str) -> _Entry | None:
        with self._lock:
            entry = self._cache.get(resource_type)
            loader = self._loader
        if entry is not None:
            return entry

        # Load and build outside the lock; a concurrent build of the same
        # type keeps whichever entry reached the cache first.
        document = loader(resource_type)
        if document is None:
            return None

        entry = _Entry(document=document, root=self._builder.build(document))
        with self._lock:
            entry = self._cache.setdefault(resource_type, entry)
        _LOG.debug("Built schema for resource type: %s", resource_type)
        return entry

    def _generic_entry(self) -> _Entry:
        with self._lock:
            generic = self._generic
        if generic is not None:
            return generic

        document = generate_generic_schema()
        generic = _Entry(document=document, root=self._builder.build(document))
        with self._lock:
            if self._generic is None:
                self._generic = generic
            return self._generic
