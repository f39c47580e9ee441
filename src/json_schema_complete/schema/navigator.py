"""Schema navigation along a path produced by the path parser."""

from __future__ import annotations

from collections.abc import Iterable

from json_schema_complete.schema.nodes import ArrayNode, ObjectNode, SchemaNode


def navigate(root: SchemaNode, path: Iterable[str]) -> SchemaNode | None:
    """Walk ``root`` along ``path`` and return the node found there.

    Object nodes are traversed by property name.  Array nodes descend into
    ``items`` whatever the segment says, since every element shares one
    schema.  Scalars end navigation.

    Args:
        root: Schema tree to walk.
        path: Segments from the document root, e.g. ``("spec", "domains", "0")``.

    Returns:
        The node at ``path``, or None when any segment has no match.  An
        empty path returns ``root``.
    """
    current: SchemaNode | None = root
    for segment in path:
        if isinstance(current, ObjectNode):
            current = current.properties.get(segment)
        elif isinstance(current, ArrayNode) and current.items is not None:
            current = current.items
        else:
            return None
        if current is None:
            return None
    return current
