import pytest

from dotlisp.interpreter import Interpreter
from dotlisp.types.environment import Environment
from dotlisp.types.definitions import DefinitionsTable

# Shared fixtures. Every test gets a fresh session so definitions made in one
# test never leak into another.


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def env():
    return Environment()


@pytest.fixture
def defs():
    return DefinitionsTable()


@pytest.fixture(autouse=True)
def _clean_dotlisp_env(monkeypatch):
    # Settings are read from the process environment; keep tests hermetic.
    for var in (
        "DOTLISP_PROMPT",
        "DOTLISP_ERROR_PREFIX",
        "DOTLISP_NOTATION",
        "DOTLISP_RECURSION_LIMIT",
        "DOTLISP_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
