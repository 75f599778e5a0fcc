"""Shared test fixtures and helpers to reduce duplication."""

import pytest

from reaper.config import get_settings


@pytest.fixture
def fresh_settings(monkeypatch):
    """Drop segment overrides from the environment and the settings cache.

    Tests that set REAPER_* variables afterwards must call
    ``get_settings.cache_clear()`` again before reading settings.
    """
    monkeypatch.delenv("REAPER_SEGMENT_COUNT", raising=False)
    monkeypatch.delenv("REAPER_SEGMENT_PARTITIONER", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
