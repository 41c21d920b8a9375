from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class PreciseMinifierProtocol(Protocol):
    """Grammar-aware minifier offered by some language bindings.

    Implementations may raise ``SyntaxError`` when the source cannot be
    parsed; callers then fall back to the generic comment/whitespace pipeline.
    """

    def minify(self, source: str, *, strip_docs: bool = False) -> str:
        ...
