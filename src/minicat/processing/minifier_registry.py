from __future__ import annotations
"""
MinifierRegistry

Map file suffixes to LanguageSpec bindings so the walker and the engine never
branch on language names. The default registry is built once from the
declarative LANGUAGES table.

minify_source() is the single entry point that turns one file's text into
its minified form:

    - When the binding offers a precise minifier (and it is enabled), use it.
      If it cannot parse the text, log and fall through.
    - Otherwise run the generic pipeline: comment stripper (only when
      documentation removal is requested) followed by the whitespace
      collapser.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from minicat.core.errors import UnknownLanguageError
from minicat.core.interfaces import LoggerLikeProtocol
from minicat.core.models import LanguageSpec
from minicat.logging.helpers import get_logger
from minicat.processing.comment_stripper import strip_comments
from minicat.processing.languages import LANGUAGES
from minicat.processing.whitespace import collapse_whitespace

_log = get_logger('processing.registry')


def _normalize_suffix(suffix: str) -> str:
    sufx = suffix if suffix.startswith('.') else f'.{suffix}'
    return sufx.lower()


@dataclass(frozen=True)
class _RegItem:
    spec: LanguageSpec
    priority: int = 0


class MinifierRegistry:
    def __init__(self) -> None:
        self._by_suffix: Dict[str, _RegItem] = {}
        self._by_name: Dict[str, LanguageSpec] = {}

    @classmethod
    def default(cls) -> 'MinifierRegistry':
        """Build a registry holding every language of the built-in table."""
        reg = cls()
        for spec in LANGUAGES.values():
            reg.register(spec)
        return reg

    def register(self, spec: LanguageSpec, *, priority: int = 0) -> None:
        """Bind every extension of *spec*; higher or equal priority wins."""
        self._by_name[spec.name] = spec
        for suffix in spec.extensions:
            key = _normalize_suffix(suffix)
            prev = self._by_suffix.get(key)
            if prev is None or priority >= prev.priority:
                self._by_suffix[key] = _RegItem(spec=spec, priority=priority)

    def for_suffix(self, suffix: str) -> Optional[LanguageSpec]:
        if not suffix:
            return None
        item = self._by_suffix.get(_normalize_suffix(suffix))
        return item.spec if item else None

    def for_path(self, path: Path) -> Optional[LanguageSpec]:
        return self.for_suffix(path.suffix)

    def names(self) -> List[str]:
        return sorted(self._by_name)

    def restrict(self, names: Iterable[str]) -> 'MinifierRegistry':
        """Return a registry holding only the named languages.

        Raises:
            UnknownLanguageError: If any name is not registered.
        """
        wanted = {n.strip().lower() for n in names if n and n.strip()}
        unknown = wanted - set(self._by_name)
        if unknown:
            raise UnknownLanguageError(unknown)
        reg = MinifierRegistry()
        for key, item in self._by_suffix.items():
            if item.spec.name in wanted:
                reg._by_suffix[key] = item
                reg._by_name[item.spec.name] = item.spec
        return reg


def minify_source(
    text: str,
    spec: LanguageSpec,
    *,
    strip_docs: bool = False,
    use_precise: bool = True,
    logger: Optional[LoggerLikeProtocol] = None,
) -> str:
    """Minify one file's *text* according to its language binding."""
    log = logger or _log
    if use_precise and spec.precise is not None:
        try:
            return spec.precise.minify(text, strip_docs=strip_docs)
        except (SyntaxError, ValueError) as exc:
            log.debug('precise %s minifier rejected input (%s); using generic pipeline', spec.name, exc)

    if strip_docs:
        text = strip_comments(text, spec.delimiters)
    return collapse_whitespace(text)
