from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, TextIO

from minicat.constants import ENV_JSON_LOGS
from minicat.logging.helpers import get_logger, setup_base_logger


class DefaultLoggerFactory:
    """LoggerFactoryProtocol implementation used by the CLI.

    Output format and verbosity are fixed at construction; the base
    'minicat' logger is (re)configured lazily on the first get_logger call.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream = stream
        self._configured = False

    @classmethod
    def from_flags(
        cls,
        *,
        json_logs: bool = False,
        verbose: bool = False,
        env: Optional[Mapping[str, str]] = None,
        stream: Optional[TextIO] = None,
    ) -> 'DefaultLoggerFactory':
        """Resolve --json-logs / MINICAT_JSON_LOGS and --verbose into a factory."""
        env = os.environ if env is None else env
        use_json = bool(json_logs) or env.get(ENV_JSON_LOGS) == '1'
        return cls(json_logs=use_json, level=logging.DEBUG if verbose else logging.INFO, stream=stream)

    @property
    def json_logs(self) -> bool:
        return self._json

    @property
    def level(self) -> int:
        return self._level

    @property
    def mode(self) -> tuple[bool, int]:
        return (self._json, self._level)

    def get_logger(self, name: str) -> logging.Logger:
        if not self._configured:
            setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
            self._configured = True
        return get_logger(name)
