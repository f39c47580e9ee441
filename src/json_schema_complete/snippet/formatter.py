"""Value formatter: serializes typed values as JSON source text for insertion.

Dispatch is on the schema type tag (the first tag of a tag sequence), not
on the value's Python type, and every tag/value combination produces text:

- ``string``             -> quoted and escaped
- ``number`` / ``integer`` -> numeric literal
- ``boolean``            -> ``true`` / ``false``
- ``array``              -> pretty-printed list, or ``[]`` for non-lists
- ``object``             -> pretty-printed mapping, or ``{}`` for non-mappings
- anything else          -> compact JSON serialization

``None`` is always ``null``.  Mapping keys JSON cannot represent (tuples,
objects) are skipped.  ``MISSING`` (no value at all) becomes the
blank for the tag: ``""``, ``0``, ``false``, ``[]`` or ``{}``.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping, Sequence
from typing import Any

from json_schema_complete.schema.nodes import MISSING

_BLANKS = {
    "string": '""',
    "number": "0",
    "integer": "0",
    "boolean": "false",
    "array": "[]",
    "object": "{}",
}


def primary_tag(type_tag: str | Sequence[str] | None) -> str | None:
    """Return the first tag of a tag sequence, or the tag itself."""
    if type_tag is None or isinstance(type_tag, str):
        return type_tag
    return next(iter(type_tag), None)


def placeholder_for_type(type_tag: str | Sequence[str] | None) -> str:
    """Return the blank literal inserted for a property without a value."""
    return _BLANKS.get(primary_tag(type_tag) or "", '""')


def _infer_tag(value: Any) -> str:
    # bool before int/float: bool subclasses int.
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list | tuple):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return "unknown"


def compact_json(value: Any) -> str:
    return json.dumps(
        value,
        ensure_ascii=False,
        separators=(",", ":"),
        default=str,
        skipkeys=True,
    )


def _pretty(value: Any) -> str:
    return json.dumps(
        value, ensure_ascii=False, indent=2, default=str, skipkeys=True
    )


def _text(value: Any) -> str:
    """Textual form of a value as a JSON literal reader would expect it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    if isinstance(value, int | float | str):
        return str(value)
    return compact_json(value)


def format_value(value: Any, type_tag: str | Sequence[str] | None = None) -> str:
    """Format ``value`` as JSON source text according to ``type_tag``.

    Args:
        value:    The value to insert.  ``None`` is JSON null; ``MISSING``
                  means there is no value.
        type_tag: Schema type tag or tag sequence.  When None, the tag is
                  inferred from the value's Python type.

    Returns:
        Literal JSON text.  Never raises.

    Example::

        format_value(True, "boolean")    # "true"
        format_value("hi", "string")     # '"hi"'
        format_value(MISSING, "number")  # "0"
    """
    if value is None:
        return "null"

    tag = primary_tag(type_tag)
    if value is MISSING:
        return placeholder_for_type(tag)
    if tag is None:
        tag = _infer_tag(value)

    if tag == "string":
        text = value if isinstance(value, str) else _text(value)
        return json.dumps(text, ensure_ascii=False)
    if tag in ("number", "integer", "boolean"):
        return _text(value)
    if tag == "array":
        return _pretty(list(value)) if isinstance(value, list | tuple) else "[]"
    if tag == "object":
        return _pretty(dict(value)) if isinstance(value, Mapping) else "{}"
    return compact_json(value)
