"""Fixtures for emitter.logging tests."""

import pytest
from unittest.mock import Mock

from emitter.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.APP_NAME = "event-registry"
    settings.LOG_MAX_VALUE_LENGTH = 500
    settings.is_production = False
    return settings
