from __future__ import annotations

import unittest
from unittest.mock import patch

import tiktoken

from minicat.ai.token_budget import TokenBudgetEstimator


class _FakeEncoding:
    def encode(self, text: str, **kwargs) -> list:
        return text.split()


class TokenBudgetTests(unittest.TestCase):
    def test_known_model(self) -> None:
        with patch.object(tiktoken, "encoding_for_model", return_value=_FakeEncoding()):
            est = TokenBudgetEstimator().estimate("a b c", model="gpt-4o")
        self.assertEqual(est.tokens, 3)
        self.assertTrue(est.exact)
        self.assertEqual(est.describe(), "tokens: 3 (gpt-4o)")

    def test_unknown_model_uses_fallback_encoding(self) -> None:
        with patch.object(tiktoken, "encoding_for_model", side_effect=KeyError("x")), \
                patch.object(tiktoken, "get_encoding", return_value=_FakeEncoding()) as get_enc:
            tokens = TokenBudgetEstimator().estimate_text_tokens("a b", model="mystery")
        self.assertEqual(tokens, 2)
        get_enc.assert_called_once_with("cl100k_base")

    def test_offline_falls_back_to_char_estimate(self) -> None:
        with patch.object(tiktoken, "encoding_for_model", side_effect=OSError("offline")):
            with self.assertLogs("minicat.ai.tokens", level="WARNING"):
                est = TokenBudgetEstimator().estimate("x" * 10, model="gpt-4o")
        self.assertFalse(est.exact)
        self.assertEqual(est.tokens, 3)
        self.assertEqual(est.describe(), "tokens: ~3 (gpt-4o)")

    def test_empty_text_offline(self) -> None:
        with patch.object(TokenBudgetEstimator, "_encoding", return_value=None):
            self.assertEqual(TokenBudgetEstimator().estimate_text_tokens(""), 0)


if __name__ == "__main__":
    unittest.main()
