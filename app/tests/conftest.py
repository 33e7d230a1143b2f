"""Shared fixtures for the event registry test suite."""

import pytest

from emitter.events import EventRegistry
from emitter.logging import configure_logging
from emitter.services import get_registry, get_settings, reset_registry


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Configure logging once, the way a host application would at startup."""
    configure_logging()


@pytest.fixture
def registry():
    """Create a fresh, isolated registry for each test."""
    reg = EventRegistry()
    yield reg
    reg.clear_all()


@pytest.fixture
def default_registry():
    """Provide a fresh default shared registry and drop it afterwards."""
    get_settings.cache_clear()
    reset_registry()
    yield get_registry()
    reset_registry()
    get_settings.cache_clear()


@pytest.fixture
def calls():
    """Ordered record of (callback name, data) for every invocation."""
    return []


@pytest.fixture
def callback_factory(calls):
    """Factory for named callbacks that record their invocations into `calls`."""

    def _factory(name: str):
        def _callback(data=None):
            calls.append((name, data))

        _callback.__name__ = name
        _callback.__qualname__ = name
        return _callback

    return _factory
