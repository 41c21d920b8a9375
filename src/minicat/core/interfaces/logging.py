from __future__ import annotations
"""Logging seams.

Components accept any object with the LoggerLikeProtocol surface through
their ``logger=`` parameter; production code passes ``logging.Logger``
instances obtained from a LoggerFactoryProtocol.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """The four levels minicat components write to."""

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Configures the 'minicat' logger tree and hands out named loggers."""

    @property
    def json_logs(self) -> bool: ...

    @property
    def level(self) -> int: ...

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        """Return the logger for `name`, configuring the base logger on first use."""
        ...
