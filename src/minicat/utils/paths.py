# src/minicat/utils/paths.py
"""
paths – Small, centralized path helpers for minicat.

Provides:
  • is_hidden_path(Path)         – dot-segment detection
  • is_within_dir(path, parent)  – containment check
  • display_path(path, root)     – header text for a file
"""

from __future__ import annotations

import os
from pathlib import Path


def is_hidden_path(p: Path) -> bool:
    """Return True if *p* has any hidden segment (leading-dot component).

    '.' and '..' are navigation, not hidden names.
    """
    return any(part.startswith(".") and part not in (".", "..") for part in p.parts)


def is_within_dir(path: Path, parent: Path) -> bool:
    """Return True if *path* is contained inside *parent*."""
    try:
        path.resolve().relative_to(Path(parent).resolve())
        return True
    except ValueError:
        return False


def display_path(path: Path, root: Path, *, absolute: bool = False) -> str:
    """Return the header form of *path*: POSIX, relative to *root* unless *absolute*."""
    resolved = path.resolve()
    if absolute:
        return resolved.as_posix()
    try:
        return resolved.relative_to(root.resolve()).as_posix()
    except ValueError:
        return Path(os.path.relpath(resolved, root.resolve())).as_posix()
