from __future__ import annotations
"""Project name discovery from build manifests.

Manifests are probed in a fixed order; the first one that yields a name wins.
Unreadable or malformed manifests are logged and skipped, never fatal.
"""

import json
import tomllib
from pathlib import Path
from typing import Callable, Optional, Tuple

from minicat.logging.helpers import get_logger

_log = get_logger('discovery.project')


def _from_cargo(text: str) -> Optional[str]:
    return tomllib.loads(text).get('package', {}).get('name')


def _from_pyproject(text: str) -> Optional[str]:
    data = tomllib.loads(text)
    name = data.get('project', {}).get('name')
    if name:
        return name
    return data.get('tool', {}).get('poetry', {}).get('name')


def _from_package_json(text: str) -> Optional[str]:
    data = json.loads(text)
    return data.get('name') if isinstance(data, dict) else None


def _from_go_mod(text: str) -> Optional[str]:
    for line in text.splitlines():
        parts = line.split()
        if len(parts) >= 2 and parts[0] == 'module':
            return parts[1].rstrip('/').rsplit('/', 1)[-1]
    return None


MANIFESTS: Tuple[Tuple[str, Callable[[str], Optional[str]]], ...] = (
    ('Cargo.toml', _from_cargo),
    ('pyproject.toml', _from_pyproject),
    ('package.json', _from_package_json),
    ('go.mod', _from_go_mod),
)


def discover_project_name(root: Path) -> str:
    """Return the project name declared under *root*, or the directory name."""
    base = root if root.is_dir() else root.parent
    base = base.resolve()
    for filename, parse in MANIFESTS:
        manifest = base / filename
        if not manifest.is_file():
            continue
        try:
            name = parse(manifest.read_text(encoding='utf-8'))
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            # tomllib.TOMLDecodeError and json.JSONDecodeError are ValueErrors.
            _log.warning('⚠  could not read project name from %s: %s', manifest, exc)
            continue
        if isinstance(name, str) and name.strip():
            return name.strip()
    return base.name or 'Project'
