"""Module-level event API bound to the default shared registry.

Each function resolves the registry on every call, so reset_registry()
takes effect immediately.
"""

from typing import Any, Callable, List, Optional

from emitter.events.models import Callback, Subscription
from emitter.services.providers import get_registry


def subscribe(
    event_name: str,
    callback: Callback,
    tag: Optional[str] = None,
    callback_id: Optional[str] = None,
) -> None:
    """Register a callback on the default registry. See EventRegistry.subscribe."""
    get_registry().subscribe(event_name, callback, tag=tag, callback_id=callback_id)


def on(
    event_name: str,
    tag: Optional[str] = None,
    callback_id: Optional[str] = None,
) -> Callable[[Callback], Callback]:
    """Decorator to subscribe a function on the default registry.

    Args:
        event_name: Name of the event to listen for.
        tag: Group the subscription belongs to.
        callback_id: Identifier for targeted removal/emission.

    Returns:
        Decorator function that registers the callback.

    Example:
        @on("user.login", tag="auth")
        def greet(user):
            ...
    """

    def decorator(callback: Callback) -> Callback:
        subscribe(event_name, callback, tag=tag, callback_id=callback_id)
        return callback

    return decorator


def unsubscribe(
    event_name: str,
    tag: Optional[str] = None,
    callback_id: Optional[str] = None,
) -> None:
    """Remove subscriptions from the default registry. See EventRegistry.unsubscribe."""
    get_registry().unsubscribe(event_name, tag=tag, callback_id=callback_id)


def emit(
    event_name: str,
    data: Any = None,
    tag: Optional[str] = None,
    callback_id: Optional[str] = None,
) -> None:
    """Emit an event on the default registry. See EventRegistry.emit."""
    get_registry().emit(event_name, data, tag=tag, callback_id=callback_id)


def clear_tag(tag: str) -> None:
    """Remove every subscription under a tag in the default registry."""
    get_registry().clear_tag(tag)


def clear_all() -> None:
    """Remove every subscription from the default registry.

    Typically used at test teardown or on a full application reset.
    """
    get_registry().clear_all()


def get_tags() -> List[str]:
    """Get all tags holding subscriptions in the default registry."""
    return get_registry().get_tags()


def get_event_names(tag: Optional[str] = None) -> List[str]:
    """Get event names with subscriptions in the default registry."""
    return get_registry().get_event_names(tag)


def get_subscriptions(
    event_name: str,
    tag: Optional[str] = None,
    callback_id: Optional[str] = None,
) -> List[Subscription]:
    """Get the subscriptions an emit() on the default registry would invoke."""
    return get_registry().get_subscriptions(event_name, tag, callback_id)
