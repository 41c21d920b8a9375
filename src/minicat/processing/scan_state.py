from __future__ import annotations
"""Transient scanner state shared by the comment and whitespace passes.

A single `mode` value replaces four independent booleans, so at most one of
string / char literal / line comment / block comment can be active. Each pass
creates its own ScanState per call; nothing here is shared across calls.
"""

import enum
from dataclasses import dataclass
from typing import Optional

BACKSLASH = '\\'
DOUBLE_QUOTE = '"'
SINGLE_QUOTE = "'"


class Mode(enum.Enum):
    CODE = 'code'
    STRING = 'string'
    CHAR_LITERAL = 'char'
    LINE_COMMENT = 'line_comment'
    BLOCK_COMMENT = 'block_comment'


@dataclass
class ScanState:
    mode: Mode = Mode.CODE
    previous_char: Optional[str] = None

    @property
    def in_string(self) -> bool:
        return self.mode is Mode.STRING

    @property
    def in_char_literal(self) -> bool:
        return self.mode is Mode.CHAR_LITERAL

    @property
    def in_line_comment(self) -> bool:
        return self.mode is Mode.LINE_COMMENT

    @property
    def in_block_comment(self) -> bool:
        return self.mode is Mode.BLOCK_COMMENT

    @property
    def in_literal(self) -> bool:
        return self.mode is Mode.STRING or self.mode is Mode.CHAR_LITERAL

    def escaped(self) -> bool:
        """True when the last emitted character was a backslash."""
        return self.previous_char == BACKSLASH

    def toggle_quote(self, ch: str) -> bool:
        """Enter or leave a literal on an unescaped quote.

        A double quote is only significant outside char literals and a single
        quote only outside strings. Returns True when the mode changed.
        """
        if self.escaped():
            return False
        if ch == DOUBLE_QUOTE:
            if self.mode is Mode.CODE:
                self.mode = Mode.STRING
                return True
            if self.mode is Mode.STRING:
                self.mode = Mode.CODE
                return True
        elif ch == SINGLE_QUOTE:
            if self.mode is Mode.CODE:
                self.mode = Mode.CHAR_LITERAL
                return True
            if self.mode is Mode.CHAR_LITERAL:
                self.mode = Mode.CODE
                return True
        return False
