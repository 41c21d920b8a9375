from __future__ import annotations

"""Exception hierarchy for minicat.

The text transforms themselves never raise; these errors belong to the I/O
and configuration layers around them.
"""

from pathlib import Path
from typing import Iterable


class MinicatError(Exception):
    """Base class for all errors raised by minicat."""


class ConfigurationError(MinicatError):
    """Invalid combination of flags or environment values."""


class UnknownLanguageError(ConfigurationError):
    """A language name that is not present in the registry."""

    def __init__(self, names: Iterable[str]) -> None:
        self.names = sorted(names)
        super().__init__(f"unknown language(s): {', '.join(self.names)}")


class SourceReadError(MinicatError):
    """A source file could not be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f'{path}: {reason}')
