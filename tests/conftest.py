"""Test configuration and fixtures."""

import pytest

from equatable.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Give every test freshly loaded settings with the default comparison mode."""
    monkeypatch.setenv("EQUATABLE_ENVIRONMENT", "test")
    monkeypatch.delenv("EQUATABLE_COMPARISON__MODE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
