"""Subscription model for the event registry."""

from dataclasses import dataclass
from typing import Any, Callable

Callback = Callable[[Any], Any]

DEFAULT_TAG = "general"
DEFAULT_CALLBACK_ID = "default"


@dataclass(frozen=True)
class Subscription:
    """A callback registered for one (tag, event name) pair.

    Subscriptions are immutable; removing one means dropping it from its
    bucket. ``callback_id`` is not required to be unique and only serves
    targeted removal and targeted emission.
    """

    callback: Callback
    """Invoked with the emitted data as its single argument."""

    callback_id: str = DEFAULT_CALLBACK_ID
    """Identifier used to target this subscription."""

    @property
    def callback_name(self) -> str:
        """Readable name of the callback for logs."""
        return getattr(
            self.callback, "__qualname__", getattr(self.callback, "__name__", repr(self.callback))
        )

    def matches(self, callback_id: str | None) -> bool:
        """Check whether this subscription is selected by a callback id filter.

        Args:
            callback_id: The id to match, or None to match any subscription.

        Returns:
            True if callback_id is None or equal to this subscription's id.
        """
        return callback_id is None or self.callback_id == callback_id
