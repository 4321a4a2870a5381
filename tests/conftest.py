"""Pytest configuration and shared fixtures."""

import pytest

from daycal.config import reset_calendar_config


@pytest.fixture(autouse=True)
def reset_calendar_config_for_all_tests():
    """Reset the calendar configuration before and after each test for isolation.

    The configuration is a module-level singleton that persists across tests.
    This fixture ensures each test starts with the default convention.
    """
    reset_calendar_config()
    yield
    reset_calendar_config()
