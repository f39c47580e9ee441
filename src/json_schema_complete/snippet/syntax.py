"""Placeholder serializers satisfying the SnippetSyntax Protocol.

- TabstopSyntax: ``${1:text}`` / ``$0``, the TextMate-style snippet grammar
  understood by VS Code and LSP clients.
- PlainSyntax: emits only the default text, for hosts that insert
  templates verbatim.
"""

from __future__ import annotations


class TabstopSyntax:
    """TextMate-style tab stops.

    Default text is emitted verbatim, including braces, so that the
    inserted template reads exactly like the JSON literal it stands for.

    Example::

        TabstopSyntax().placeholder(1, '""')   # '${1:""}'
    """

    def placeholder(self, index: int, text: str) -> str:
        return f"${{{index}:{text}}}"

    def final_cursor(self) -> str:
        return "$0"


class PlainSyntax:
    """No placeholder markup; the template is plain JSON text."""

    def placeholder(self, index: int, text: str) -> str:
        return text

    def final_cursor(self) -> str:
        return ""
