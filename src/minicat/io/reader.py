from __future__ import annotations
"""Source reading.

Files are decoded as UTF-8 (a leading BOM is dropped). Failures are raised as
SourceReadError so the engine can report the file and move on; they are
never silently turned into empty content.
"""

from pathlib import Path

from minicat.core.errors import SourceReadError
from minicat.logging.helpers import get_logger, trace_io

_log = get_logger('io.reader')


def read_source(path: Path) -> str:
    """Return the text content of *path*.

    Raises:
        SourceReadError: If the file cannot be opened or is not valid UTF-8.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise SourceReadError(path, exc.strerror or str(exc)) from exc
    try:
        text = data.decode('utf-8-sig')
    except UnicodeDecodeError as exc:
        raise SourceReadError(path, f'not valid UTF-8 ({exc.reason} at byte {exc.start})') from exc
    trace_io(_log, 'read source', path=str(path), bytes=len(data))
    return text
