"""Shared pytest fixtures for VECALC tests."""

import pytest

from vecalc.core.expression_lang.bindings import Bindings
from vecalc.core.interpreter import Interpreter


@pytest.fixture
def bindings() -> Bindings:
    """Return an empty binding environment."""
    return Bindings()


@pytest.fixture
def interpreter() -> Interpreter:
    """Return a fresh interpreter session with default config."""
    return Interpreter()


@pytest.fixture(autouse=True)
def _isolated_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep VECALC_* variables from the host out of the tests."""
    monkeypatch.delenv("VECALC_CONFIG", raising=False)
    monkeypatch.delenv("VECALC_LOG_LEVEL", raising=False)
