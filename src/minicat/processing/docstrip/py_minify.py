"""
py_minify – Python minification via AST.

Python cannot go through the generic whitespace collapser because its
indentation is syntax. This module parses the source, optionally drops
docstrings, and unparses it again, which normalises formatting and removes
every '#' comment.

Notes
-----
• Requires Python ≥ 3.9 for `ast.unparse`.
• Triple-quoted strings used as *values* (e.g., assigned to variables) are
  preserved. Only leading docstrings of module/class/function are removed.
• Blank lines are dropped unless they belong to a multi-line string.
"""

from __future__ import annotations

import ast
import io
import tokenize
from typing import List, Set


def _strip_head(body: list[ast.stmt], need_stub: bool) -> list[ast.stmt]:
    """Drop a leading string literal (docstring) from a statement list.

    If `need_stub` is True and the resulting body becomes empty, a single
    `ast.Pass()` is inserted to keep the construct syntactically valid.
    """
    if body and isinstance(body[0], ast.Expr):
        v = body[0].value
        if isinstance(v, ast.Constant) and isinstance(v.value, str):
            body = body[1:]
    if need_stub and not body:
        return [ast.Pass()]
    return body


class _DocStrip(ast.NodeTransformer):
    """AST transformer that removes leading docstrings in module/class/func."""

    def visit_Module(self, node: ast.Module) -> ast.AST:  # type: ignore[override]
        self.generic_visit(node)
        node.body = _strip_head(node.body, need_stub=False)
        return node

    def visit_FunctionDef(self, node: ast.FunctionDef) -> ast.AST:  # type: ignore[override]
        self.generic_visit(node)
        node.body = _strip_head(node.body, need_stub=True)
        return node

    def visit_AsyncFunctionDef(self, node: ast.AsyncFunctionDef) -> ast.AST:  # type: ignore[override]
        self.generic_visit(node)
        node.body = _strip_head(node.body, need_stub=True)
        return node

    def visit_ClassDef(self, node: ast.ClassDef) -> ast.AST:  # type: ignore[override]
        self.generic_visit(node)
        node.body = _strip_head(node.body, need_stub=True)
        return node


def _string_interior_lines(source: str) -> Set[int]:
    """Return 1-based line numbers that lie inside multi-line string tokens."""
    inside: Set[int] = set()
    for tok in tokenize.generate_tokens(io.StringIO(source).readline):
        if tok.type == tokenize.STRING and tok.end[0] > tok.start[0]:
            inside.update(range(tok.start[0] + 1, tok.end[0] + 1))
    return inside


def _drop_blank_lines(source: str) -> str:
    keep = _string_interior_lines(source)
    lines: List[str] = []
    for lineno, line in enumerate(source.splitlines(), start=1):
        if line.strip() or lineno in keep:
            lines.append(line)
    return '\n'.join(lines)


def minify_python(source: str, *, strip_docs: bool = False) -> str:
    """Return a compact, comment-free rendering of Python *source*.

    Parameters
    ----------
    source : str
        Original Python code (a full module).
    strip_docs : bool
        Also remove module/class/function docstrings.

    Raises
    ------
    SyntaxError
        When *source* is not a parseable module; callers fall back to the
        generic pipeline.
    """
    tree = ast.parse(source)
    if strip_docs:
        tree = _DocStrip().visit(tree)  # type: ignore[arg-type]
        ast.fix_missing_locations(tree)
    return _drop_blank_lines(ast.unparse(tree))


class PythonMinifier:
    """PreciseMinifierProtocol implementation backed by `ast`."""

    def minify(self, source: str, *, strip_docs: bool = False) -> str:
        return minify_python(source, strip_docs=strip_docs)
