"""Shared fixtures for unit tests."""

import pytest

from minass import Recorder
from minass.assertions import _base
from minass.config import MinassConfig, set_config

FILE = "/full/path/to/test/file_test.py"
LINE = 123


@pytest.fixture(autouse=True)
def fixed_caller(monkeypatch):
    """Replace location capture with a deterministic one."""
    monkeypatch.setattr(_base, "runtime_caller", lambda skip: (FILE, LINE, True))


@pytest.fixture(autouse=True)
def default_config():
    """Use default rendering options regardless of the surrounding project."""
    set_config(MinassConfig())
    yield
    set_config(None)


@pytest.fixture
def prefix() -> str:
    return f"[{FILE}:{LINE}]"


@pytest.fixture
def rec() -> Recorder:
    """Provide an in-memory failure sink."""
    return Recorder()
