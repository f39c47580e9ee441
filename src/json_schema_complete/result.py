"""CompletionItem dataclass and CompletionKind enum for completion output.

Items are host-neutral: the editor integration maps them onto its own
completion objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["CompletionItem", "CompletionKind"]


class CompletionKind(StrEnum):
    """What a completion item inserts.

    - SNIPPET:     A multi-field template with placeholders.
    - PROPERTY:    An object member (key and value).
    - VALUE:       A value skeleton such as an empty array.
    - ENUM_MEMBER: One allowed literal value.
    """

    SNIPPET = auto()
    PROPERTY = auto()
    VALUE = auto()
    ENUM_MEMBER = auto()


@dataclass(frozen=True, slots=True)
class CompletionItem:
    """One suggestion offered at the cursor.

    Attributes:
        label:         Text shown in the completion list.
        kind:          What the item inserts.
        insert_text:   Text to insert.
        is_snippet:    ``insert_text`` contains placeholder markup.
        sort_text:     Key the host sorts by; lower sorts first.
        detail:        Short annotation, e.g. ``"required, string"``.
        documentation: Markdown shown alongside the item.
    """

    label: str
    kind: CompletionKind
    insert_text: str
    is_snippet: bool = True
    sort_text: str = ""
    detail: str = ""
    documentation: str = ""
