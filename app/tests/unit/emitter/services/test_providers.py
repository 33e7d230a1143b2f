"""Unit tests for application-scoped providers."""

import pytest

from emitter.configuration import Settings
from emitter.events import EventRegistry
from emitter.services.providers import get_registry, get_settings, reset_registry


@pytest.fixture
def clean_providers():
    """Clear cached providers before and after test."""
    get_settings.cache_clear()
    reset_registry()
    yield
    get_settings.cache_clear()
    reset_registry()


@pytest.mark.unit
@pytest.mark.usefixtures("clean_providers")
class TestProviders:
    """Test settings and registry providers."""

    def test_get_settings_singleton(self):
        """get_settings returns one cached instance."""
        settings = get_settings()

        assert isinstance(settings, Settings)
        assert get_settings() is settings

    def test_get_registry_singleton(self):
        """get_registry returns one shared registry."""
        registry = get_registry()

        assert isinstance(registry, EventRegistry)
        assert get_registry() is registry

    def test_get_registry_uses_settings(self, monkeypatch):
        """The shared registry is configured from the environment."""
        monkeypatch.setenv("EMITTER_DEFAULT_TAG", "app")
        monkeypatch.setenv("EMITTER_ISOLATE_CALLBACK_ERRORS", "true")
        monkeypatch.setenv("EMITTER_LOG_PAYLOADS", "true")

        registry = get_registry()

        assert registry.default_tag == "app"
        assert registry.isolate_callback_errors is True
        assert registry.log_payloads is True

    def test_reset_registry(self):
        """reset_registry makes the next call build a fresh, empty registry."""
        registry = get_registry()
        registry.subscribe("login", print)

        reset_registry()
        fresh = get_registry()

        assert fresh is not registry
        assert fresh.count() == 0
