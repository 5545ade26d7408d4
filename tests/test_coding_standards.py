"""
Tests that enforce coding standards.

Checks run over the parsed source, so docstrings and strings that merely
mention an import never count:

- no ``from X import Y`` outside ``__init__.py`` (re-exports live there)
- no bare ``except:`` clauses
- no ``print()`` in library code; modules log through ``_logger``
"""

import ast as _ast
import pathlib as _pathlib

import pytest as _pytest

SRC_DIR = _pathlib.Path(__file__).parent.parent / "src" / "steroids"
TESTS_DIR = _pathlib.Path(__file__).parent.parent / "tests"


def _python_files(directory: _pathlib.Path) -> list[_pathlib.Path]:
    return sorted(directory.rglob("*.py"))


def _is_type_checking_block(node: _ast.AST) -> bool:
    if not isinstance(node, _ast.If):
        return False
    test = node.test
    if isinstance(test, _ast.Name):
        return test.id == "TYPE_CHECKING"
    return isinstance(test, _ast.Attribute) and test.attr == "TYPE_CHECKING"


def _from_imports(tree: _ast.AST) -> list[_ast.ImportFrom]:
    """
    Collect 'from X import Y' nodes.

    Excludes ``from __future__`` and anything under ``if TYPE_CHECKING:``.
    """
    found: list[_ast.ImportFrom] = []

    def visit(node: _ast.AST) -> None:
        if _is_type_checking_block(node):
            return
        if isinstance(node, _ast.ImportFrom) and node.module != "__future__":
            found.append(node)
        for child in _ast.iter_child_nodes(node):
            visit(child)

    visit(tree)
    return found


def _parse(path: _pathlib.Path) -> _ast.AST:
    return _ast.parse(path.read_text(encoding="utf-8"), filename=str(path))


def _import_violations(paths: list[_pathlib.Path]) -> list[str]:
    violations: list[str] = []
    for path in paths:
        if path.name == "__init__.py":
            continue
        for node in _from_imports(_parse(path)):
            names = ", ".join(alias.name for alias in node.names)
            violations.append(f"{path}:{node.lineno}: from {node.module} import {names}")
    return violations


class TestImportStyle:
    """Tests for import style compliance."""

    def test_src_no_from_imports(self) -> None:
        """Source files should not use 'from X import Y' pattern."""
        violations = _import_violations(_python_files(SRC_DIR))

        if violations:
            _pytest.fail(
                "Found forbidden 'from X import Y' imports:\n"
                + "\n".join(f"  {v}" for v in violations)
                + "\n\nUse 'import X as _x' (external) or 'import X as x' (internal) instead."
            )

    def test_tests_no_from_imports(self) -> None:
        """Test files follow the same rule."""
        violations = _import_violations(_python_files(TESTS_DIR))

        assert violations == []


class TestErrorHandling:
    """Exceptions are never swallowed wholesale."""

    @_pytest.mark.parametrize("path", _python_files(SRC_DIR), ids=lambda p: p.name)
    def test_no_bare_except(self, path: _pathlib.Path) -> None:
        bare = [
            node.lineno
            for node in _ast.walk(_parse(path))
            if isinstance(node, _ast.ExceptHandler) and node.type is None
        ]

        assert bare == [], f"{path}: bare except at lines {bare}"


class TestLogging:
    """Library code logs, it does not print."""

    @_pytest.mark.parametrize("path", _python_files(SRC_DIR), ids=lambda p: p.name)
    def test_no_print(self, path: _pathlib.Path) -> None:
        calls = [
            node.lineno
            for node in _ast.walk(_parse(path))
            if isinstance(node, _ast.Call)
            and isinstance(node.func, _ast.Name)
            and node.func.id == "print"
        ]

        assert calls == [], f"{path}: print() at lines {calls}"

    @_pytest.mark.parametrize("path", _python_files(SRC_DIR), ids=lambda p: p.name)
    def test_loggers_are_module_named(self, path: _pathlib.Path) -> None:
        """Every getLogger() call uses __name__."""
        for node in _ast.walk(_parse(path)):
            if (
                isinstance(node, _ast.Call)
                and isinstance(node.func, _ast.Attribute)
                and node.func.attr == "getLogger"
            ):
                args = node.args
                assert len(args) == 1 and isinstance(args[0], _ast.Name), path
                assert args[0].id == "__name__", path


class TestExtraction:
    """Tests for the import collection logic itself."""

    def test_detects_from_import(self) -> None:
        imports = _from_imports(_ast.parse("from pathlib import Path"))

        assert [node.module for node in imports] == ["pathlib"]

    def test_allows_future_imports(self) -> None:
        assert _from_imports(_ast.parse("from __future__ import annotations")) == []

    def test_ignores_type_checking_block(self) -> None:
        content = """
import typing as _typing

if _typing.TYPE_CHECKING:
    from some_module import SomeType

from forbidden import Other
"""
        imports = _from_imports(_ast.parse(content))

        assert [node.module for node in imports] == ["forbidden"]

    def test_ignores_docstring_mentions(self) -> None:
        content = '"""\nfrom pathlib import Path\n"""\n'

        assert _from_imports(_ast.parse(content)) == []
