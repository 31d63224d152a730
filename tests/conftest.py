"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from time_tiny.config import runtime

_CONFIG_VARIABLES = (
    "TIME_TINY_LOG_LEVEL",
    "TIME_TINY_LOG_QUIET",
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep host environment and .env files out of every test."""
    for name in _CONFIG_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", ())
    monkeypatch.setattr(runtime, "_DEFAULT_VALUES", None)
    yield
