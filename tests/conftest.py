"""Shared test fixtures."""

import pytest

from fxtx.config import get_settings
from fxtx.logging.context import clear_context


@pytest.fixture(autouse=True)
def _clear_environment(monkeypatch):
    """Clear environment variables that affect settings."""
    env_vars_to_clear = [
        "CONFIG",
        "DEBUG",
        "DEST",
        "TIMEOUT",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "SERVICE_NAME",
        "INCLUDE_TIMESTAMP",
        "INCLUDE_LOCATION",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    clear_context()
    yield
    get_settings.cache_clear()
