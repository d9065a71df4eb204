"""Shared pytest fixtures for the Astra test suite."""

import textwrap

import pytest

from astra.transpiler import Transpiler, TranspilerOptions


@pytest.fixture
def transpile():
    """Translate dedented source and return the result."""

    def _transpile(source: str, **options):
        transpiler = Transpiler(TranspilerOptions(**options))
        return transpiler.transpile(textwrap.dedent(source))

    return _transpile


@pytest.fixture
def body(transpile):
    """Translate dedented source and return only the body lines."""

    def _body(source: str, **options):
        return transpile(source, **options).body

    return _body


@pytest.fixture
def astra_file(tmp_path):
    """Write an .astra file into tmp_path and return its path."""

    def _write(source: str, name: str = "hello.astra"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return _write
