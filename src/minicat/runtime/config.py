from __future__ import annotations
"""Mapping layer from parsed CLI flags (plus environment) to RunConfig."""

import argparse
import os
from pathlib import Path
from typing import Mapping, Optional

from minicat.constants import DEFAULT_TOKEN_MODEL, ENV_JOBS, ENV_TOKEN_MODEL
from minicat.core.errors import ConfigurationError
from minicat.core.models import RunConfig


def _resolve_jobs(value: Optional[int], env: Mapping[str, str]) -> int:
    if value is None:
        raw = (env.get(ENV_JOBS) or '').strip()
        if not raw:
            return 1
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f'{ENV_JOBS} must be an integer, got {raw!r}') from None
    if value < 1:
        raise ConfigurationError(f'--jobs must be at least 1, got {value}')
    return value


def _resolve_token_model(value: Optional[str], env: Mapping[str, str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or env.get(ENV_TOKEN_MODEL) or DEFAULT_TOKEN_MODEL


def namespace_to_config(ns: argparse.Namespace, env: Optional[Mapping[str, str]] = None) -> RunConfig:
    """Build a RunConfig from parsed flags.

    Raises:
        ConfigurationError: On invalid worker counts.
    """
    env = os.environ if env is None else env
    paths = tuple(Path(p) for p in (ns.paths or ['.']))
    return RunConfig(
        paths=paths,
        remove_docs=bool(ns.remove_docs),
        languages=tuple(ns.languages or ()),
        exclude_paths=tuple(Path(p) for p in (ns.exclude_paths or ())),
        use_gitignore=bool(ns.use_gitignore),
        use_precise=bool(ns.use_precise),
        absolute_path=bool(ns.absolute_path),
        output=Path(ns.output) if ns.output else None,
        jobs=_resolve_jobs(ns.jobs, env),
        token_model=_resolve_token_model(ns.token_model, env),
    )
