from __future__ import annotations

"""Public surface for minicat.core.

Value types and the error hierarchy shared by every layer:

    from minicat.core import DelimiterSet, LanguageSpec, MinicatError
"""

from minicat.core.errors import (
    ConfigurationError,
    MinicatError,
    SourceReadError,
    UnknownLanguageError,
)
from minicat.core.models import (
    DelimiterSet,
    Document,
    LanguageSpec,
    MinifiedFile,
    RunConfig,
    SourceFile,
)

__all__ = [
    "ConfigurationError",
    "MinicatError",
    "SourceReadError",
    "UnknownLanguageError",
    "DelimiterSet",
    "Document",
    "LanguageSpec",
    "MinifiedFile",
    "RunConfig",
    "SourceFile",
]
