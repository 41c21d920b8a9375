from __future__ import annotations

"""Markdown rendering of a minified document.

Layout:

    # Minified <project> Files

    ## <path>

    ```<fence>
    <minified body>
    ```

The fence grows past the longest backtick run of a body so it cannot close early.
Files that failed to read are listed in a trailing "Skipped" section so the
document never silently omits them.
"""

import re
from typing import List, Optional

from minicat.constants import CODE_FENCE
from minicat.core.interfaces import LoggerLikeProtocol, RendererProtocol
from minicat.core.models import Document
from minicat.logging.helpers import get_logger

_BACKTICK_RUN = re.compile(r'`+')


def fence_for(body: str) -> str:
    """Return a backtick fence longer than any backtick run inside *body*."""
    longest = max((len(m) for m in _BACKTICK_RUN.findall(body)), default=0)
    return CODE_FENCE if longest < len(CODE_FENCE) else '`' * (longest + 1)


class MarkdownRenderer(RendererProtocol):
    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger('render')

    def render(self, document: Document, *, token_note: Optional[str] = None) -> str:
        parts: List[str] = [f'# Minified {document.project} Files\n\n']
        skipped: List[str] = []
        for item in document.files:
            if not item.ok:
                skipped.append(f'- {item.source.display}: {item.error}\n')
                continue
            fence = fence_for(item.body)
            parts.append(
                f'## {item.source.display}\n\n'
                f'{fence}{item.source.language.fence}\n{item.body}\n{fence}\n\n'
            )
        if skipped:
            parts.append('## Skipped\n\n')
            parts.extend(skipped)
            parts.append('\n')
        if token_note:
            parts.append(f'<!-- {token_note} -->\n')
        self._log.debug('rendered %d file(s), %d skipped', len(document.files) - len(skipped), len(skipped))
        return ''.join(parts)
