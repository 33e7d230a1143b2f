"""Tagged in-process event registry.

Components exchange named events through a registry without holding
references to each other. Subscriptions are grouped by tag so an owner
can drop all of its subscriptions at once.

Usage:

    from emitter.events import EventRegistry

    registry = EventRegistry()

    def on_login(user):
        ...

    registry.subscribe("login", on_login, tag="auth", callback_id="greeter")
    registry.emit("login", {"user": "bob"}, tag="auth")

    # Remove only the greeter, or the whole tag
    registry.unsubscribe("login", tag="auth", callback_id="greeter")
    registry.clear_tag("auth")

    # Or use the default shared registry
    from emitter.events import subscribe, emit

    subscribe("login", on_login)
    emit("login", {"user": "bob"})
"""

from emitter.events.models import (
    DEFAULT_CALLBACK_ID,
    DEFAULT_TAG,
    Callback,
    Subscription,
)
from emitter.events.registry import EventRegistry
from emitter.events.dispatcher import (
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

__all__ = [
    "Callback",
    "DEFAULT_CALLBACK_ID",
    "DEFAULT_TAG",
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
]
