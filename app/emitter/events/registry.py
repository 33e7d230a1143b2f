"""Tagged event registry.

Holds subscriptions grouped by tag and event name and dispatches emitted
events to them synchronously, in registration order.

State layout::

    {
        "auth": {
            "login": [Subscription(cb1, "x"), Subscription(cb2, "y")],
            "logout": [Subscription(cb3, "default")],
        },
        "general": {
            "login": [Subscription(cb4, "default")],
        },
    }
"""

import threading
from contextlib import contextmanager
from typing import Any, Callable, Dict, Generator, List, Optional

from emitter.events.models import (
    DEFAULT_CALLBACK_ID,
    DEFAULT_TAG,
    Callback,
    Subscription,
)
from emitter.logging import bind_emit_context, get_module_logger, redact_sensitive

logger = get_module_logger(__name__)


class EventRegistry:
    """Thread-safe publish/subscribe registry with tagged grouping.

    Subscriptions stay registered until they are explicitly removed with
    unsubscribe(), clear_tag() or clear_all(). Owners that forget to
    remove theirs keep receiving events for as long as the registry lives.

    Attributes:
        default_tag: Tag used by subscribe() when none is given.
        default_callback_id: Callback id used by subscribe() when none is given.
        isolate_callback_errors: If True, a failing callback is logged and the
            remaining callbacks still run. If False, the exception propagates
            out of emit() and later callbacks are skipped.
        log_payloads: If True, emit() logs the payload at debug level, with
            values under sensitive keys (password, token, ...) redacted.
        _listeners: Dict mapping tag -> event name -> ordered subscriptions.
        _lock: Threading lock guarding _listeners.
    """

    def __init__(
        self,
        default_tag: str = DEFAULT_TAG,
        default_callback_id: str = DEFAULT_CALLBACK_ID,
        isolate_callback_errors: bool = False,
        log_payloads: bool = False,
    ):
        self.default_tag = default_tag
        self.default_callback_id = default_callback_id
        self.isolate_callback_errors = isolate_callback_errors
        self.log_payloads = log_payloads
        self._listeners: Dict[str, Dict[str, List[Subscription]]] = {}
        self._lock = threading.Lock()

    def subscribe(
        self,
        event_name: str,
        callback: Callback,
        tag: Optional[str] = None,
        callback_id: Optional[str] = None,
    ) -> None:
        """Register a callback for an event.

        Subscribing the same callback twice registers it twice; it is then
        invoked twice per emission.

        Args:
            event_name: Name of the event to listen for.
            callback: Invoked with the emitted data as its single argument.
            tag: Group the subscription belongs to. Defaults to default_tag.
            callback_id: Identifier for targeted removal/emission. Defaults to
                default_callback_id.
        """
        tag = self.default_tag if tag is None else tag
        callback_id = self.default_callback_id if callback_id is None else callback_id
        subscription = Subscription(callback=callback, callback_id=callback_id)

        with self._lock:
            bucket = self._listeners.setdefault(tag, {}).setdefault(event_name, [])
            bucket.append(subscription)
            bucket_size = len(bucket)

        logger.debug(
            "subscription_added",
            event_name=event_name,
            tag=tag,
            callback_id=callback_id,
            callback=subscription.callback_name,
            bucket_size=bucket_size,
        )

    def on(
        self,
        event_name: str,
        tag: Optional[str] = None,
        callback_id: Optional[str] = None,
    ) -> Callable[[Callback], Callback]:
        """Decorator to subscribe a function to an event.

        Args:
            event_name: Name of the event to listen for.
            tag: Group the subscription belongs to.
            callback_id: Identifier for targeted removal/emission.

        Returns:
            Decorator function that registers the callback and returns it unchanged.
        """

        def decorator(callback: Callback) -> Callback:
            self.subscribe(event_name, callback, tag=tag, callback_id=callback_id)
            return callback

        return decorator

    def unsubscribe(
        self,
        event_name: str,
        tag: Optional[str] = None,
        callback_id: Optional[str] = None,
    ) -> None:
        """Remove subscriptions for an event.

        With no tag, subscriptions for event_name are removed under every
        tag. With no callback_id, every subscription in the matching
        buckets is removed; otherwise only those with that callback id.
        Nothing matching is not an error.

        Args:
            event_name: Name of the event to remove subscriptions for.
            tag: Only remove subscriptions under this tag.
            callback_id: Only remove subscriptions with this callback id.
        """
        with self._lock:
            if tag is not None and tag not in self._listeners:
                logger.debug(
                    "tag_not_found",
                    operation="unsubscribe",
                    event_name=event_name,
                    tag=tag,
                )
                return

            tags = [tag] if tag is not None else list(self._listeners)
            removed = 0
            for key in tags:
                group = self._listeners[key]
                bucket = group.get(event_name)
                if bucket is None:
                    continue

                kept = (
                    []
                    if callback_id is None
                    else [s for s in bucket if s.callback_id != callback_id]
                )
                removed += len(bucket) - len(kept)

                # Empty buckets and tag groups are pruned
                if kept:
                    group[event_name] = kept
                else:
                    del group[event_name]
                if not group:
                    del self._listeners[key]

        logger.debug(
            "subscriptions_removed",
            event_name=event_name,
            tag=tag,
            callback_id=callback_id,
            removed=removed,
        )

    def emit(
        self,
        event_name: str,
        data: Any = None,
        tag: Optional[str] = None,
        callback_id: Optional[str] = None,
    ) -> None:
        """Invoke every callback subscribed to an event.

        Callbacks are collected in tag order, then registration order, and
        invoked synchronously with data as their single argument. The set of
        callbacks is fixed when emit() starts: subscriptions added or removed
        by a callback only affect later emissions.

        Args:
            event_name: Name of the event to emit.
            data: Value passed to every callback.
            tag: Only invoke subscriptions under this tag.
            callback_id: Only invoke subscriptions with this callback id.

        Raises:
            Exception: Whatever a callback raises, unless
                isolate_callback_errors is enabled.
        """
        with self._lock:
            if tag is not None and tag not in self._listeners:
                logger.debug(
                    "tag_not_found",
                    operation="emit",
                    event_name=event_name,
                    tag=tag,
                )
                return
            subscriptions = self._collect(event_name, tag, callback_id)

        with bind_emit_context(event_name, tag=tag, callback_id=callback_id):
            payload = {"data": redact_sensitive(data)} if self.log_payloads else {}
            logger.debug(
                "event_emitted",
                callback_count=len(subscriptions),
                **payload,
            )

            for subscription in subscriptions:
                if not self.isolate_callback_errors:
                    subscription.callback(data)
                    continue

                try:
                    subscription.callback(data)
                except Exception as e:
                    logger.exception(
                        "event_callback_failed",
                        callback=subscription.callback_name,
                        subscription_id=subscription.callback_id,
                        error=str(e),
                    )

    def clear_tag(self, tag: str) -> None:
        """Remove every subscription under a tag.

        Args:
            tag: The tag to clear.
        """
        with self._lock:
            group = self._listeners.pop(tag, None)

        if group is None:
            logger.debug("tag_not_found", operation="clear_tag", tag=tag)
            return

        logger.debug(
            "tag_cleared",
            tag=tag,
            removed=sum(len(bucket) for bucket in group.values()),
        )

    def clear_all(self) -> None:
        """Remove every subscription from the registry."""
        with self._lock:
            self._listeners = {}
        logger.debug("registry_cleared")

    @contextmanager
    def tag_scope(self, tag: str) -> Generator[str, None, None]:
        """Clear a tag when the block exits.

        Args:
            tag: The tag owned by the block.

        Yields:
            The tag, to subscribe under.

        Example:
            with registry.tag_scope("settings-page") as tag:
                registry.subscribe("theme.changed", redraw, tag=tag)
                run_page()
            # every "settings-page" subscription is gone here
        """
        try:
            yield tag
        finally:
            self.clear_tag(tag)

    def get_tags(self) -> List[str]:
        """Get all tags holding at least one subscription.

        Returns:
            List of tags in the order they were first used.
        """
        with self._lock:
            return list(self._listeners)

    def get_event_names(self, tag: Optional[str] = None) -> List[str]:
        """Get event names with at least one subscription.

        Args:
            tag: Only report event names under this tag.

        Returns:
            List of distinct event names.
        """
        with self._lock:
            names: Dict[str, None] = {}
            for key, group in self._listeners.items():
                if tag is not None and key != tag:
                    continue
                names.update(dict.fromkeys(group))
            return list(names)

    def get_subscriptions(
        self,
        event_name: str,
        tag: Optional[str] = None,
        callback_id: Optional[str] = None,
    ) -> List[Subscription]:
        """Get the subscriptions an emit() with the same arguments would invoke.

        Args:
            event_name: Name of the event.
            tag: Only include subscriptions under this tag.
            callback_id: Only include subscriptions with this callback id.

        Returns:
            List of subscriptions in dispatch order.
        """
        with self._lock:
            return self._collect(event_name, tag, callback_id)

    def has_subscriptions(
        self,
        event_name: str,
        tag: Optional[str] = None,
        callback_id: Optional[str] = None,
    ) -> bool:
        """Check if an emit() with the same arguments would invoke anything."""
        return bool(self.get_subscriptions(event_name, tag, callback_id))

    def count(self, tag: Optional[str] = None) -> int:
        """Get the number of registered subscriptions.

        Args:
            tag: Only count subscriptions under this tag.

        Returns:
            Count of subscriptions.
        """
        with self._lock:
            return sum(
                len(bucket)
                for key, group in self._listeners.items()
                if tag is None or key == tag
                for bucket in group.values()
            )

    def _collect(
        self,
        event_name: str,
        tag: Optional[str],
        callback_id: Optional[str],
    ) -> List[Subscription]:
        # Caller holds self._lock
        collected = []
        for key, group in self._listeners.items():
            if tag is not None and key != tag:
                continue
            for subscription in group.get(event_name, []):
                if subscription.matches(callback_id):
                    collected.append(subscription)
        return collected
