"""Context resolver: derives a JsonContext for a cursor in JSON source text.

Each helper is a pure function of the text and can be called on its own.
``get_json_context`` combines them with the bracket scanner and the path
parser.  None of them requires the document to parse.
"""

from __future__ import annotations

import logging
import re

from json_schema_complete.config import CompletionConfig
from json_schema_complete.context.nodes import JsonContext
from json_schema_complete.context.path_parser import decode_key, parse_json_path
from json_schema_complete.context.positions import to_index
from json_schema_complete.context.scanner import scan_containers

_LOG = logging.getLogger(__name__)

# A string literal that is still open at the end of the text.
_OPEN_STRING = r'"(?:[^"\\\n]|\\.)*'

# A bare literal being typed: number, true/false/null prefix.
_BARE_TOKEN = r"[-+.\w]+"

# Colon, blanks, then a partially typed value.
_PARTIAL_VALUE_SUFFIX = re.compile(rf":[ \t]*(?:{_OPEN_STRING}|{_BARE_TOKEN})\Z")

# Closed key string immediately before the colon of the value being typed.
_KEY_BEFORE_COLON = re.compile(
    rf'"((?:[^"\\\n]|\\.)+)"\s*:[ \t\r\n]*(?:{_OPEN_STRING}|{_BARE_TOKEN})?\Z'
)

_LEADING_WS = re.compile(r"[ \t]*")


def is_after_property_colon(prefix: str) -> bool:
    """Return True when the cursor is in the value position of a property.

    True for ``'"key":'``, ``'"key":   '`` and a value still being typed,
    e.g. ``'"key": "partial'`` or ``'"port": 80'``.  A completed string value
    (``'"key": "done"'``) is no longer in the value position.
    """
    if prefix.rstrip().endswith(":"):
        return True
    return _PARTIAL_VALUE_SUFFIX.search(prefix) is not None


def property_name_before_colon(prefix: str) -> str | None:
    """Return the key whose value the cursor is about to fill in, if any."""
    match = _KEY_BEFORE_COLON.search(prefix)
    return decode_key(match.group(1)) if match else None


def leading_indent(line: str) -> str:
    """Return the spaces and tabs at the start of ``line``."""
    match = _LEADING_WS.match(line)
    return match.group(0) if match else ""


def indent_level(indent: str, unit: int = 2) -> int:
    """Return how many indentation units ``indent`` spans."""
    return len(indent) // unit


def current_line(text: str, index: int) -> str:
    """Return the full line of ``text`` that contains ``index``."""
    start = text.rfind("\n", 0, index) + 1
    end = text.find("\n", index)
    line = text[start:] if end == -1 else text[start:end]
    return line.rstrip("\r")


def get_json_context(
    text: str, offset: int, config: CompletionConfig | None = None
) -> JsonContext:
    """Infer the structural location of a cursor inside ``text``.

    Args:
        text:   Full document text; may be invalid or truncated JSON.
        offset: Cursor position, counted in ``config.position_encoding``
                units.  Clamped to the document bounds.
        config: Engine parameters.  Defaults to ``CompletionConfig()``.

    Returns:
        A fresh ``JsonContext``.  Calling twice with the same arguments yields
        equal results.
    """
    cfg = config if config is not None else CompletionConfig()
    index = to_index(text, offset, cfg.position_encoding)
    prefix = text[:index]

    indent = leading_indent(current_line(text, index))
    after_colon = is_after_property_colon(prefix)
    containers = scan_containers(prefix)
    path = parse_json_path(
        prefix,
        lookahead=cfg.key_lookahead,
        member_position=containers.in_object and not after_colon,
    )
    name = property_name_before_colon(prefix) if after_colon else None

    _LOG.debug("json context at %d: path=%s after_colon=%s", index, path, after_colon)

    return JsonContext(
        path=path,
        after_colon=after_colon,
        in_object=containers.in_object,
        in_array=containers.in_array,
        property_name=name,
        indent_level=indent_level(indent, cfg.indent_unit),
        indent_string=indent,
    )
