from __future__ import annotations
import os
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pathspec

from minicat.core.interfaces import LoggerLikeProtocol, WalkerProtocol
from minicat.core.models import SourceFile
from minicat.logging.helpers import get_logger, trace_io
from minicat.processing.minifier_registry import MinifierRegistry
from minicat.utils.paths import display_path, is_hidden_path, is_within_dir

GITIGNORE = '.gitignore'


def load_gitignore(root: Path) -> Optional[pathspec.PathSpec]:
    """Return the ignore spec of *root*/.gitignore, or None when absent."""
    path = root / GITIGNORE
    if not path.is_file():
        return None
    with path.open('r', encoding='utf-8', errors='replace') as fh:
        return pathspec.GitIgnoreSpec.from_lines(fh)


class FileWalker(WalkerProtocol):
    """Collect files whose suffix maps to a registered language.

    Explicit file arguments bypass hidden-path and ignore-file filtering but
    still need a known language. Directories are walked recursively, skipping
    hidden segments, excluded directories and .gitignore matches.
    """

    def __init__(
        self,
        *,
        registry: MinifierRegistry,
        use_gitignore: bool = True,
        absolute_path: bool = False,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._registry = registry
        self._use_gitignore = use_gitignore
        self._absolute = absolute_path
        self._log = logger or get_logger('io.walker')

    def _make(self, path: Path, header_root: Path) -> Optional[SourceFile]:
        spec = self._registry.for_path(path)
        if spec is None:
            return None
        shown = display_path(path, header_root, absolute=self._absolute)
        return SourceFile(path=path.resolve(), display=shown, language=spec)

    def gather_files(self, roots: Sequence[Path], exclude_dirs: Sequence[Path] = ()) -> List[SourceFile]:
        collected: Dict[Path, SourceFile] = {}
        ex_dirs = [d.resolve() for d in exclude_dirs]

        def _dir_excluded(path: Path) -> bool:
            return any(is_within_dir(path, ex) for ex in ex_dirs)

        for root in roots:
            if root.is_file():
                item = self._make(root, root.parent)
                if item is None:
                    self._log.warning('⚠  %s has no supported language – skipped', root)
                    continue
                collected.setdefault(item.path, item)
                continue
            if not root.is_dir():
                self._log.error('⚠  %s does not exist – skipped', root)
                continue

            ignore = load_gitignore(root) if self._use_gitignore else None
            for dirpath, dirnames, filenames in os.walk(root):
                base = Path(dirpath)
                rel_base = base.relative_to(root)
                kept = []
                for d in sorted(dirnames):
                    rel = (rel_base / d).as_posix()
                    if d.startswith('.') or _dir_excluded(base / d):
                        continue
                    if ignore is not None and ignore.match_file(rel + '/'):
                        trace_io(self._log, 'gitignore prunes directory', path=rel)
                        continue
                    kept.append(d)
                dirnames[:] = kept

                for fn in filenames:
                    fp = base / fn
                    rel = (rel_base / fn).as_posix()
                    if is_hidden_path(fp.relative_to(root)) or _dir_excluded(fp):
                        continue
                    if ignore is not None and ignore.match_file(rel):
                        continue
                    item = self._make(fp, root)
                    if item is not None:
                        collected.setdefault(item.path, item)

        return sorted(collected.values(), key=lambda f: str(f.path))
