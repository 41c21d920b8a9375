"""Public API surface for minicat.processing."""
from .comment_stripper import strip_comments
from .docstrip.py_minify import PythonMinifier, minify_python
from .languages import LANGUAGES, describe_languages
from .minifier_registry import MinifierRegistry, minify_source
from .scan_state import Mode, ScanState
from .whitespace import collapse_whitespace

__all__ = [
    "LANGUAGES",
    "MinifierRegistry",
    "Mode",
    "PythonMinifier",
    "ScanState",
    "collapse_whitespace",
    "describe_languages",
    "minify_python",
    "minify_source",
    "strip_comments",
]
