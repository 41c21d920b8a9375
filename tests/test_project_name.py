from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from minicat.discovery.project_name import discover_project_name


class ProjectNameTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name) / "fallback-dir"
        self.root.mkdir()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _put(self, name: str, text: str) -> None:
        (self.root / name).write_text(text, encoding="utf-8")

    def test_cargo(self) -> None:
        self._put("Cargo.toml", '[package]\nname = "crab"\nversion = "0.1.0"\n')
        self.assertEqual(discover_project_name(self.root), "crab")

    def test_pyproject(self) -> None:
        self._put("pyproject.toml", '[project]\nname = "snake"\n')
        self.assertEqual(discover_project_name(self.root), "snake")

    def test_poetry(self) -> None:
        self._put("pyproject.toml", '[tool.poetry]\nname = "verse"\n')
        self.assertEqual(discover_project_name(self.root), "verse")

    def test_package_json(self) -> None:
        self._put("package.json", '{"name": "node-thing"}')
        self.assertEqual(discover_project_name(self.root), "node-thing")

    def test_go_mod(self) -> None:
        self._put("go.mod", "module github.com/acme/gopher\n\ngo 1.22\n")
        self.assertEqual(discover_project_name(self.root), "gopher")

    def test_cargo_wins_over_package_json(self) -> None:
        self._put("Cargo.toml", '[package]\nname = "crab"\n')
        self._put("package.json", '{"name": "node-thing"}')
        self.assertEqual(discover_project_name(self.root), "crab")

    def test_malformed_manifest_is_skipped(self) -> None:
        self._put("Cargo.toml", "[package\nname = ")
        self._put("package.json", '{"name": "node-thing"}')
        with self.assertLogs("minicat.discovery.project", level="WARNING"):
            self.assertEqual(discover_project_name(self.root), "node-thing")

    def test_fallback_to_directory_name(self) -> None:
        self.assertEqual(discover_project_name(self.root), "fallback-dir")

    def test_file_root_uses_parent(self) -> None:
        self._put("main.rs", "fn main() {}\n")
        self.assertEqual(discover_project_name(self.root / "main.rs"), "fallback-dir")


if __name__ == "__main__":
    unittest.main()
