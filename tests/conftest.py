"""Test configuration and fixtures."""

import pytest

from dcp_model.config import get_settings


@pytest.fixture
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
