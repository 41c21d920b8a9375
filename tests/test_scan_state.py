from __future__ import annotations

import unittest

import minicat
from minicat.processing.languages import C_STYLE
from minicat.processing.scan_state import Mode, ScanState


class ScanStateTests(unittest.TestCase):
    def _flags(self, state: ScanState) -> list:
        return [state.in_string, state.in_char_literal, state.in_line_comment, state.in_block_comment]

    def test_at_most_one_mode_active(self) -> None:
        state = ScanState()
        for mode in Mode:
            state.mode = mode
            with self.subTest(mode=mode):
                self.assertLessEqual(sum(self._flags(state)), 1)

    def test_quotes_are_mutually_exclusive(self) -> None:
        state = ScanState()
        self.assertTrue(state.toggle_quote('"'))
        self.assertFalse(state.toggle_quote("'"))
        self.assertTrue(state.in_string)
        self.assertTrue(state.toggle_quote('"'))
        self.assertEqual(state.mode, Mode.CODE)

    def test_escaped_quote_does_not_toggle(self) -> None:
        state = ScanState(previous_char="\\")
        self.assertFalse(state.toggle_quote('"'))
        self.assertEqual(state.mode, Mode.CODE)


class MinifyHelperTests(unittest.TestCase):
    def test_minify_runs_both_passes(self) -> None:
        self.assertEqual(minicat.minify("a // b\n c", C_STYLE, strip_docs=True), "ac")
        self.assertEqual(minicat.minify("a // b\n c", C_STYLE), "a//bc")


if __name__ == "__main__":
    unittest.main()
