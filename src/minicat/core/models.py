from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from minicat.core.interfaces.minifier import PreciseMinifierProtocol


@dataclass(frozen=True)
class DelimiterSet:
    """Comment markers of one language. An empty string means "absent"."""
    line_comment: str = ''
    block_comment_open: str = ''
    block_comment_close: str = ''

    @property
    def has_line(self) -> bool:
        return bool(self.line_comment)

    @property
    def has_block(self) -> bool:
        # A block comment needs both ends to be usable.
        return bool(self.block_comment_open and self.block_comment_close)


@dataclass(frozen=True)
class LanguageSpec:
    """Binding between a language name, its suffixes and how to minify it."""
    name: str
    extensions: Tuple[str, ...]
    delimiters: DelimiterSet
    fence: str
    precise: Optional[PreciseMinifierProtocol] = None


@dataclass(frozen=True)
class RunConfig:
    """Lightweight carrier of everything a single run needs."""
    paths: Sequence[Path] = (Path('.'),)
    remove_docs: bool = False
    languages: Sequence[str] = ()
    exclude_paths: Sequence[Path] = ()
    use_gitignore: bool = True
    use_precise: bool = True
    absolute_path: bool = False
    output: Optional[Path] = None
    jobs: int = 1
    token_model: Optional[str] = None


@dataclass(frozen=True)
class SourceFile:
    path: Path
    display: str
    language: LanguageSpec


@dataclass(frozen=True)
class MinifiedFile:
    source: SourceFile
    body: str
    bytes_in: int
    bytes_out: int
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class Document:
    project: str
    files: Tuple[MinifiedFile, ...] = field(default_factory=tuple)
