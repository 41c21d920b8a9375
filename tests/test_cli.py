#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Functional tests for the minicat command line and engine.

A small multi-language project is built in a temporary directory for every
test; no fixtures are kept on disk.
"""
from __future__ import annotations

import io
import json
import os
import sys
import tempfile
import textwrap
import unittest
from pathlib import Path
from unittest.mock import patch

from minicat import MiniCat, MinifyEngine, RunConfig, UnknownLanguageError
from minicat.ai.token_budget import TokenBudgetEstimator
from minicat.cli import main
from minicat.core.errors import ConfigurationError
from minicat.parsing.parser import _build_parser
from minicat.runtime.config import namespace_to_config


def _write(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")


class MiniCatBaseTest(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name) / "proj"
        _write(self.root / "Cargo.toml", """
            [package]
            name = "demo"
        """)
        _write(self.root / "src/main.rs", """
            fn main() {
                // entry
                println!("hi there");
            }
        """)
        _write(self.root / "tools/gen.py", '''
            def f():
                """Doc."""
                return 1  # one
        ''')

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def run_cli(self, *args: str) -> str:
        return MiniCat.run([str(self.root), *args])


class DocumentShapeTests(MiniCatBaseTest):
    def test_title_uses_manifest_name(self) -> None:
        self.assertTrue(self.run_cli().startswith("# Minified demo Files\n\n"))

    def test_sections_and_fences(self) -> None:
        dump = self.run_cli()
        self.assertIn(
            '## src/main.rs\n\n```rust\nfnmain(){//entryprintln!("hi there");}\n```\n\n',
            dump,
        )
        self.assertIn('## Cargo.toml\n\n```toml\n[package]name="demo"\n```\n', dump)
        self.assertIn('```python\ndef f():\n    """Doc."""\n    return 1\n```', dump)

    def test_files_in_path_order(self) -> None:
        dump = self.run_cli()
        self.assertLess(dump.index("Cargo.toml"), dump.index("src/main.rs"))
        self.assertLess(dump.index("src/main.rs"), dump.index("tools/gen.py"))


class FlagTests(MiniCatBaseTest):
    def test_remove_docs(self) -> None:
        dump = self.run_cli("-r")
        self.assertIn('fnmain(){println!("hi there");}', dump)
        self.assertIn("```python\ndef f():\n    return 1\n```", dump)
        self.assertNotIn("entry", dump)

    def test_no_precise_collapses_python_too(self) -> None:
        dump = self.run_cli("-r", "--no-precise")
        self.assertIn('deff():"""Doc."""return1', dump)

    def test_language_filter(self) -> None:
        dump = self.run_cli("--lang", "python")
        self.assertIn("## tools/gen.py", dump)
        self.assertNotIn("main.rs", dump)
        self.assertNotIn("## Cargo.toml", dump)

    def test_unknown_language(self) -> None:
        with self.assertRaises(UnknownLanguageError):
            self.run_cli("--lang", "cobol")

    def test_exclude_path(self) -> None:
        dump = self.run_cli("-A", str(self.root / "tools"))
        self.assertNotIn("gen.py", dump)

    def test_parallel_output_matches_serial(self) -> None:
        self.assertEqual(self.run_cli("-j", "4"), self.run_cli("-j", "1"))

    def test_output_file(self) -> None:
        out = Path(self._tmp.name) / "out" / "doc.md"
        sink = io.StringIO()
        dump = MiniCat.run([str(self.root), "-o", str(out)], stdout=sink)
        self.assertEqual(out.read_text(encoding="utf-8"), dump)
        self.assertEqual(sink.getvalue(), "")

    def test_stdout_when_no_output_file(self) -> None:
        sink = io.StringIO()
        dump = MiniCat.run([str(self.root)], stdout=sink)
        self.assertEqual(sink.getvalue(), dump)

    def test_verbose_selects_debug_level(self) -> None:
        import logging

        with patch("sys.stderr", new_callable=io.StringIO):
            MiniCat.run([str(self.root), "--verbose"])
            self.assertEqual(logging.getLogger("minicat").level, logging.DEBUG)
            MiniCat.run([str(self.root)])
            self.assertEqual(logging.getLogger("minicat").level, logging.INFO)

    def test_list_languages(self) -> None:
        text = MiniCat.run(["--list-languages"])
        self.assertIn("rust", text)
        self.assertRegex(text, r"(?m)^python .*\[precise\]$")

    def test_report_to_stderr(self) -> None:
        err = io.StringIO()
        with patch.object(sys, "stderr", err):
            self.run_cli("--report")
        # Log lines may precede the report on the same stream.
        raw = err.getvalue()
        data = json.loads(raw[raw.index("{"):])
        self.assertEqual(data["files_total"], 3)
        self.assertEqual(data["project"], "demo")
        self.assertEqual(data["errors"], [])


class TokenTests(MiniCatBaseTest):
    def test_token_note_offline(self) -> None:
        with patch.object(TokenBudgetEstimator, "_encoding", return_value=None):
            dump = self.run_cli("--tokens", "gpt-4o")
        self.assertRegex(dump, r"<!-- tokens: ~\d+ \(gpt-4o\) -->\n$")

    def test_token_model_from_environment(self) -> None:
        with patch.object(TokenBudgetEstimator, "_encoding", return_value=None), \
                patch.dict(os.environ, {"MINICAT_TOKEN_MODEL": "my-model"}):
            dump = self.run_cli("--tokens")
        self.assertIn("(my-model)", dump)


class ErrorHandlingTests(MiniCatBaseTest):
    def test_undecodable_file_is_reported_not_fatal(self) -> None:
        (self.root / "src/latin.rs").write_bytes(b'fn x() { let s = "\xe9"; }\n')
        engine = MinifyEngine(RunConfig(paths=(self.root,)))
        with self.assertLogs("minicat.engine", level="ERROR"):
            dump = engine.run()
        self.assertIn("## Skipped\n\n- src/latin.rs: not valid UTF-8", dump)
        self.assertIn("## src/main.rs", dump)
        self.assertEqual(len(engine.report.errors), 1)
        self.assertEqual(engine.report.files_total, 3)

    def test_main_exit_code_for_configuration_error(self) -> None:
        with patch.object(sys, "argv", ["minicat", str(self.root), "--lang", "cobol"]):
            with self.assertRaises(SystemExit) as cm:
                main()
        self.assertEqual(cm.exception.code, 2)

    def test_main_exit_code_on_success(self) -> None:
        with patch.object(sys, "argv", ["minicat", str(self.root)]), \
                patch.object(sys, "stdout", io.StringIO()) as out:
            with self.assertRaises(SystemExit) as cm:
                main()
        self.assertEqual(cm.exception.code, 0)
        self.assertIn("# Minified demo Files", out.getvalue())


class ConfigTests(unittest.TestCase):
    def _ns(self, *argv: str):
        return _build_parser().parse_args(list(argv))

    def test_defaults(self) -> None:
        cfg = namespace_to_config(self._ns(), env={})
        self.assertEqual(cfg.paths, (Path("."),))
        self.assertEqual(cfg.jobs, 1)
        self.assertIsNone(cfg.token_model)
        self.assertTrue(cfg.use_gitignore)
        self.assertTrue(cfg.use_precise)

    def test_jobs_from_environment(self) -> None:
        self.assertEqual(namespace_to_config(self._ns(), env={"MINICAT_JOBS": "3"}).jobs, 3)

    def test_bad_jobs(self) -> None:
        with self.assertRaises(ConfigurationError):
            namespace_to_config(self._ns(), env={"MINICAT_JOBS": "many"})
        with self.assertRaises(ConfigurationError):
            namespace_to_config(self._ns("-j", "0"), env={})

    def test_default_token_model(self) -> None:
        cfg = namespace_to_config(self._ns("--tokens"), env={})
        self.assertEqual(cfg.token_model, "gpt-4o")


if __name__ == "__main__":
    unittest.main()
