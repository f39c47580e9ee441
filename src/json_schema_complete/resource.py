"""Resource-type resolution from document URIs and file names.

Two naming conventions map a document to the schema that applies to it:

- ``f5xc://{profile}/{namespace}/{resourceType}/{name}.json``: the third
  segment of the authority-plus-path names the resource type.
- A local file named ``{name}.{resourceType}.json``, or a bare
  ``{resourceType}.json`` whose stem is a known resource type.

Anything else resolves to None, which callers treat as "no schema-driven
completions".
"""

from __future__ import annotations

import re
from collections.abc import Container
from pathlib import PurePosixPath
from urllib.parse import unquote, urlsplit

__all__ = [
    "RESOURCE_SCHEME",
    "detect_resource_type",
    "is_resource_document",
    "resource_type_from_filename",
]

RESOURCE_SCHEME = "f5xc"

_DOTTED_NAME = re.compile(r"\.([a-z_]+)\.json$")
_BARE_NAME = re.compile(r"^([a-z_]+)\.json$")


def _segments(uri: str) -> list[str]:
    parts = urlsplit(uri)
    joined = f"{parts.netloc}/{parts.path}"
    return [unquote(p) for p in joined.split("/") if p]


def resource_type_from_filename(
    filename: str, known_types: Container[str] = ()
) -> str | None:
    """Extract the resource type from a file name or path.

    Examples::

        resource_type_from_filename("my-lb.http_loadbalancer.json")  # "http_loadbalancer"
        resource_type_from_filename("origin_pool.json", {"origin_pool"})  # "origin_pool"
        resource_type_from_filename("origin_pool.json")  # None: not a known type
    """
    basename = PurePosixPath(filename.replace("\\", "/")).name

    dotted = _DOTTED_NAME.search(basename)
    if dotted:
        return dotted.group(1)

    bare = _BARE_NAME.match(basename)
    if bare and bare.group(1) in known_types:
        return bare.group(1)

    return None


def detect_resource_type(uri: str, known_types: Container[str] = ()) -> str | None:
    """Resolve the resource type of the document at ``uri``.

    Args:
        uri:         Document URI (``f5xc://...`` or ``file://...``) or a
                     plain filesystem path.
        known_types: Resource types with a schema; validates bare
                     ``{resourceType}.json`` file names.

    Returns:
        The resource type, or None when no convention matches.
    """
    scheme = urlsplit(uri).scheme
    if scheme == RESOURCE_SCHEME:
        segments = _segments(uri)
        return segments[2] if len(segments) >= 4 else None

    if scheme == "file":
        return resource_type_from_filename(unquote(urlsplit(uri).path), known_types)

    # Plain path; a one-letter scheme is a Windows drive letter.
    if not scheme or len(scheme) == 1:
        return resource_type_from_filename(uri, known_types)

    return None


def is_resource_document(
    uri: str, language_id: str = "json", known_types: Container[str] = ()
) -> bool:
    """True when ``uri`` is a JSON document that completion should handle."""
    if language_id != "json":
        return False
    scheme = urlsplit(uri).scheme
    if scheme == RESOURCE_SCHEME:
        return True
    if not uri.endswith(".json"):
        return False
    return detect_resource_type(uri, known_types) is not None
