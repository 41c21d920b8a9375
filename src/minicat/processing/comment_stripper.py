from __future__ import annotations
"""Delimiter-driven comment stripper.

Removes line and block comments from any language described by a
DelimiterSet while leaving string ("...") and char ('...') literals intact,
including comment markers that appear inside them.

Notes:
    - Newlines that terminate line comments are kept, so the line count of
      the output matches the input when only line comments are removed.
    - Block comments do not nest. An unterminated block comment swallows the
      rest of the input.
    - A quote counts as escaped when the previously copied character is a
      backslash. Raw strings, heredocs and interpolation are not recognised.
"""

from typing import List

from minicat.core.models import DelimiterSet
from minicat.processing.scan_state import Mode, ScanState


def strip_comments(content: str, delims: DelimiterSet) -> str:
    """Return *content* with every comment span described by *delims* removed.

    Args:
        content: Full text of one source file.
        delims: Comment markers of the file's language.

    Returns:
        The text without comments. Never raises.
    """
    out: List[str] = []
    state = ScanState()
    i = 0
    n = len(content)
    line = delims.line_comment if delims.has_line else ''
    block_open = delims.block_comment_open if delims.has_block else ''
    block_close = delims.block_comment_close

    def emit(ch: str) -> None:
        out.append(ch)
        state.previous_char = ch

    while i < n:
        ch = content[i]

        if state.mode is Mode.LINE_COMMENT:
            if ch == '\n':
                emit(ch)
                state.mode = Mode.CODE
            i += 1
            continue

        if state.mode is Mode.BLOCK_COMMENT:
            if content.startswith(block_close, i):
                state.mode = Mode.CODE
                i += len(block_close)
            else:
                i += 1
            continue

        if state.in_literal:
            # Evaluate the quote against the character copied before this one.
            state.toggle_quote(ch)
            emit(ch)
            i += 1
            continue

        if state.toggle_quote(ch):
            emit(ch)
            i += 1
            continue

        # Line markers win over block markers that share a prefix.
        if line and content.startswith(line, i):
            state.mode = Mode.LINE_COMMENT
            i += len(line)
            continue
        if block_open and content.startswith(block_open, i):
            state.mode = Mode.BLOCK_COMMENT
            i += len(block_open)
            continue

        emit(ch)
        i += 1

    return ''.join(out)
