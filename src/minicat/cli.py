from __future__ import annotations

import os
import sys
from typing import NoReturn, Optional, Sequence, TextIO

from minicat.core.errors import MinicatError
from minicat.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from minicat.logging.factory import DefaultLoggerFactory
from minicat.logging.helpers import get_logger
from minicat.parsing.parser import _build_parser
from minicat.processing.languages import describe_languages
from minicat.runtime.config import namespace_to_config
from minicat.runtime.engine import MinifyEngine


logger: LoggerLikeProtocol = get_logger('minicat')


def _configure_logging(factory: LoggerFactoryProtocol) -> None:
    """Apply *factory* process-wide unless the same mode is already active."""
    mode = (factory.json_logs, factory.level)
    if getattr(_configure_logging, '_configured_mode', None) == mode:
        return
    global logger
    logger = factory.get_logger('minicat')
    setattr(_configure_logging, '_configured_mode', mode)


class MiniCat:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, stdout: Optional[TextIO] = None) -> str:
        """Run the tool with an argv-like sequence and return the document.

        When *stdout* is given and no ``-o`` was requested, the document is
        also written to it.

        Raises:
            MinicatError: On configuration problems (unknown language, bad jobs).
        """
        ns = _build_parser().parse_args(list(argv))
        factory = DefaultLoggerFactory.from_flags(json_logs=ns.json_logs, verbose=ns.verbose)
        _configure_logging(factory)

        if ns.list_languages:
            text = describe_languages()
            if stdout is not None:
                stdout.write(text)
            return text

        cfg = namespace_to_config(ns)
        engine = MinifyEngine(cfg, logger=get_logger('engine'))
        text = engine.run()

        if ns.report:
            sys.stderr.write(engine.report.to_json() + '\n')
        if stdout is not None and cfg.output is None:
            stdout.write(text)
        return text


def main() -> NoReturn:
    """Entry point for `minicat` and `python -m minicat`."""
    try:
        MiniCat.run(sys.argv[1:], stdout=sys.stdout)
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except MinicatError as exc:
        logger.error('%s', exc)
        raise SystemExit(2)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
