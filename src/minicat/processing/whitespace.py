from __future__ import annotations
"""Whitespace collapser.

Drops every space, tab, CR and LF that sits outside a string or char literal.
Inside literals spaces and tabs are kept as-is and raw line breaks are
rewritten as the two characters ``\\n``.

This is lossy for languages where whitespace separates tokens or carries
indentation (``return x`` becomes ``returnx``, Python blocks collapse). Such
languages either accept the loss or provide a precise minifier.

Literal boundaries are tracked independently of the comment stripper, so the
two passes can run in either order.
"""

from typing import FrozenSet, List

from minicat.processing.scan_state import BACKSLASH, ScanState

WHITESPACE: FrozenSet[str] = frozenset(' \t\r\n')
LINE_BREAKS: FrozenSet[str] = frozenset('\r\n')
# Characters that form an atomic escape pair with a preceding backslash.
ESCAPABLE: FrozenSet[str] = frozenset('nrt\\"\'')
ESCAPED_NEWLINE = '\\n'


def collapse_whitespace(content: str) -> str:
    """Return *content* with insignificant whitespace removed.

    Applying it twice gives the same result as applying it once.
    """
    out: List[str] = []
    state = ScanState()
    i = 0
    n = len(content)

    while i < n:
        ch = content[i]

        if state.in_literal:
            if ch == BACKSLASH:
                out.append(ch)
                nxt = content[i + 1] if i + 1 < n else ''
                if nxt and nxt in ESCAPABLE:
                    out.append(nxt)
                    # The pair is consumed whole; it cannot escape what follows.
                    state.previous_char = None
                    i += 2
                    continue
                state.previous_char = ch
                i += 1
                continue
            if ch in LINE_BREAKS:
                out.append(ESCAPED_NEWLINE)
                state.previous_char = ESCAPED_NEWLINE[-1]
                i += 1
                continue
            state.toggle_quote(ch)
            out.append(ch)
            state.previous_char = ch
            i += 1
            continue

        if ch in WHITESPACE:
            i += 1
            continue

        state.toggle_quote(ch)
        out.append(ch)
        state.previous_char = ch
        i += 1

    return ''.join(out)
