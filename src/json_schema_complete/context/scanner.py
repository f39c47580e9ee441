"""Bracket/string scanner: net container depth of a JSON prefix.

A single left-to-right pass over the text before the cursor.  String
literal and escape state are tracked so that braces and brackets inside
string content are ignored.  The scan never looks past the cursor, so
malformed trailing syntax cannot affect the result.
"""

from __future__ import annotations

from json_schema_complete.context.nodes import ContainerState

_DEPTH_DELTAS = {"{": (1, 0), "}": (-1, 0), "[": (0, 1), "]": (0, -1)}


def scan_containers(prefix: str) -> ContainerState:
    """Count unclosed braces and brackets in ``prefix``.

    Args:
        prefix: Document text from the start up to the cursor.

    Returns:
        A ``ContainerState``; ``in_object`` / ``in_array`` are true when the
        respective counter is positive.  Counters may go negative on
        unbalanced input, which simply reads as "not inside".
    """
    braces = 0
    brackets = 0
    in_string = False
    escape_next = False

    for char in prefix:
        if escape_next:
            escape_next = False
            continue
        if char == "\\" and in_string:
            escape_next = True
            continue
        if char == '"':
            in_string = not in_string
            continue
        if in_string:
            continue
        delta = _DEPTH_DELTAS.get(char)
        if delta is not None:
            braces += delta[0]
            brackets += delta[1]

    return ContainerState(
        brace_depth=braces, bracket_depth=brackets, in_string=in_string
    )
