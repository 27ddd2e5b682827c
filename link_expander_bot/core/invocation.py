"""Resolve the text a command should work on from its invocation shape."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class InvocationKind(Enum):
    DIRECT_TEXT = "direct_text"  # slash command string option
    REFERENCED_MESSAGE = "referenced_message"  # message context menu


@dataclass(frozen=True, slots=True)
class InvocationPayload:
    kind: InvocationKind
    text: str


def resolve_invocation(
    *,
    text: Optional[str] = None,
    message: Optional[Any] = None,
) -> Optional[InvocationPayload]:
    """Return the first resolvable payload; direct text wins over a message."""

    if text is not None:
        return InvocationPayload(kind=InvocationKind.DIRECT_TEXT, text=text)
    content = getattr(message, "content", None) if message is not None else None
    if content is not None:
        return InvocationPayload(kind=InvocationKind.REFERENCED_MESSAGE, text=content)
    return None


__all__ = ["InvocationKind", "InvocationPayload", "resolve_invocation"]
