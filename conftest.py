"""Root-level pytest configuration."""

import pytest

from algokit.config import get_settings


def pytest_configure(config):
    """Add custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; start every test from a clean read."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
