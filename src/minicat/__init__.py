from __future__ import annotations

__version__ = '0.1.0'

from minicat.core.errors import MinicatError, UnknownLanguageError, SourceReadError
from minicat.core.models import DelimiterSet, LanguageSpec, RunConfig
from minicat.cli import MiniCat
from minicat.parsing.parser import _build_parser
from minicat.processing.comment_stripper import strip_comments
from minicat.processing.whitespace import collapse_whitespace
from minicat.processing.languages import LANGUAGES
from minicat.processing.minifier_registry import MinifierRegistry, minify_source
from minicat.runtime.engine import MinifyEngine


def minify(content: str, delims: DelimiterSet, *, strip_docs: bool = False) -> str:
    """Generic pipeline on one text: optional comment stripping, then whitespace collapsing."""
    if strip_docs:
        content = strip_comments(content, delims)
    return collapse_whitespace(content)


__all__ = [
    '__version__',
    'MiniCat',
    'MinifyEngine',
    'MinifierRegistry',
    'MinicatError',
    'UnknownLanguageError',
    'SourceReadError',
    'DelimiterSet',
    'LanguageSpec',
    'RunConfig',
    'LANGUAGES',
    '_build_parser',
    'strip_comments',
    'collapse_whitespace',
    'minify',
    'minify_source',
]
