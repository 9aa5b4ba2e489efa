"""
Shared fixtures.
"""

import pytest
import structlog

from jancode.config import get_settings


@pytest.fixture(autouse=True)
def reset_state():
    """Drop cached settings and structlog configuration between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
