"""
Application-scoped services.

Provides provider functions for the settings and the default shared
event registry.
"""

from emitter.services.providers import (
    get_registry,
    get_settings,
    reset_registry,
)

__all__ = [
    "get_registry",
    "get_settings",
    "reset_registry",
]
