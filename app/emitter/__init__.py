"""In-process publish/subscribe registry with tagged grouping.

Public API:
    - EventRegistry: explicitly constructed registry instances
    - subscribe(), unsubscribe(), emit(), clear_tag(), clear_all(), on():
      the same operations on the default shared registry
    - get_registry(), reset_registry(): access to the default shared registry
"""

from emitter.events import (
    EventRegistry,
    Subscription,
    clear_all,
    clear_tag,
    emit,
    get_event_names,
    get_subscriptions,
    get_tags,
    on,
    subscribe,
    unsubscribe,
)
from emitter.services import get_registry, get_settings, reset_registry

__all__ = [
    "EventRegistry",
    "Subscription",
    "subscribe",
    "unsubscribe",
    "emit",
    "clear_tag",
    "clear_all",
    "on",
    "get_tags",
    "get_event_names",
    "get_subscriptions",
    "get_registry",
    "get_settings",
    "reset_registry",
]
