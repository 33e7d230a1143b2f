"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for the settings and the
default shared event registry.
"""

from functools import lru_cache

from emitter.configuration import Settings
from emitter.events.registry import EventRegistry
from emitter.logging import get_module_logger

logger = get_module_logger(__name__)


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_registry() -> EventRegistry:
    """
    Get the default shared event registry.

    Components that do not receive a registry explicitly share this one.
    Code that needs isolation (tests, embedded use) should construct its
    own EventRegistry instead.

    Returns:
        EventRegistry: Cached registry configured from settings.registry.
    """
    registry_settings = get_settings().registry
    registry = EventRegistry(
        default_tag=registry_settings.DEFAULT_TAG,
        default_callback_id=registry_settings.DEFAULT_CALLBACK_ID,
        isolate_callback_errors=registry_settings.ISOLATE_CALLBACK_ERRORS,
        log_payloads=registry_settings.LOG_PAYLOADS,
    )
    logger.debug(
        "default_registry_initialized",
        default_tag=registry.default_tag,
        isolate_callback_errors=registry.isolate_callback_errors,
    )
    return registry


def reset_registry() -> None:
    """Drop the default shared registry.

    The next get_registry() call builds a fresh, empty one. Subscriptions
    held by the old registry are not carried over.
    """
    get_registry.cache_clear()
    logger.debug("default_registry_reset")
