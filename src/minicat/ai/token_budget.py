from __future__ import annotations
"""
Token budget estimator utilities.

Counts how many model tokens a minified document costs, which is the number
that matters when the output is pasted into a limited context window.
"""

from dataclasses import dataclass
from typing import Optional

import tiktoken

from minicat.constants import DEFAULT_TOKEN_MODEL
from minicat.core.interfaces import LoggerLikeProtocol
from minicat.logging.helpers import get_logger

FALLBACK_ENCODING = 'cl100k_base'


@dataclass(frozen=True)
class TokenEstimation:
    tokens: int
    model: str
    exact: bool = True

    def describe(self) -> str:
        prefix = '' if self.exact else '~'
        return f'tokens: {prefix}{self.tokens} ({self.model})'


class TokenBudgetEstimator:
    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger('ai.tokens')

    def _encoding(self, model: str) -> Optional[tiktoken.Encoding]:
        try:
            return tiktoken.encoding_for_model(model)
        except KeyError:
            pass
        except Exception as exc:
            # Encodings are downloaded on first use; offline runs end up here.
            self._log.warning('⚠  cannot load tokenizer for %r: %s', model, exc)
            return None
        try:
            return tiktoken.get_encoding(FALLBACK_ENCODING)
        except Exception as exc:
            self._log.warning('⚠  cannot load tokenizer %r: %s', FALLBACK_ENCODING, exc)
            return None

    def estimate(self, text: str, *, model: str = DEFAULT_TOKEN_MODEL) -> TokenEstimation:
        enc = self._encoding(model)
        if enc is None:
            # Rough fallback: ~4 chars per token.
            return TokenEstimation(tokens=max(1, (len(text) + 3) // 4) if text else 0, model=model, exact=False)
        return TokenEstimation(tokens=len(enc.encode(text, disallowed_special=())), model=model)

    def estimate_text_tokens(self, text: str, *, model: str = DEFAULT_TOKEN_MODEL) -> int:
        """Return the token count of plain text (approximate when offline)."""
        return self.estimate(text, model=model).tokens
