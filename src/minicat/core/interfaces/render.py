from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from minicat.core.models import Document


@runtime_checkable
class RendererProtocol(Protocol):
    """Turns a minified document into its final text form."""

    def render(self, document: Document, *, token_note: Optional[str] = None) -> str:
        ...
