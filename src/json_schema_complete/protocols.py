"""SnippetSyntax Protocol for the placeholder grammar extension point.

Templates are built against a tiny output grammar: numbered placeholders
with default text, plus an optional final cursor position.  How that is
spelled is up to the host editor, so the spelling is pluggable.  Any class
with conformant ``placeholder`` and ``final_cursor`` methods passes
``isinstance`` checks; no inheritance required.

Example::

    from json_schema_complete.protocols import SnippetSyntax

    class AngleSyntax:
        def placeholder(self, index: int, text: str) -> str:
            return f"<{index}:{text}>"

        def final_cursor(self) -> str:
            return "<0>"

    assert isinstance(AngleSyntax(), SnippetSyntax)  # structural conformance
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SnippetSyntax(Protocol):
    """Structural protocol for placeholder serializers.

    ``placeholder`` must render a navigable insertion point numbered
    ``index`` (>= 1) that is pre-filled with ``text``.  ``final_cursor``
    renders where the cursor lands after the last placeholder.
    """

    def placeholder(self, index: int, text: str) -> str: ...

    def final_cursor(self) -> str: ...
