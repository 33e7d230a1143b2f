"""Unit tests for the module-level event API."""

import pytest
from unittest.mock import MagicMock

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
from emitter.services import get_registry, reset_registry

pytestmark = pytest.mark.unit


class TestModuleLevelApi:
    """Test functions acting on the default shared registry."""

    def test_subscribe_and_emit_use_default_registry(self, default_registry):
        """subscribe() registers on the shared registry that emit() reads."""
        callback = MagicMock()

        subscribe("login", callback, tag="auth", callback_id="x")
        emit("login", {"user": "bob"}, tag="auth")

        callback.assert_called_once_with({"user": "bob"})
        assert default_registry.count() == 1

    def test_on_decorator(self, default_registry, calls):
        """on() registers the decorated function on the shared registry."""

        @on("login")
        def handle_login(data):
            calls.append(data)

        emit("login", "bob")

        assert calls == ["bob"]
        assert get_subscriptions("login")[0].callback is handle_login

    def test_unsubscribe(self, default_registry):
        """unsubscribe() removes from the shared registry."""
        keep = MagicMock()
        drop = MagicMock()
        subscribe("login", keep, callback_id="keep")
        subscribe("login", drop, callback_id="drop")

        unsubscribe("login", callback_id="drop")
        emit("login")

        keep.assert_called_once_with(None)
        drop.assert_not_called()

    def test_clear_tag_and_introspection(self, default_registry):
        """clear_tag() and the query helpers act on the shared registry."""
        subscribe("login", MagicMock(), tag="auth")
        subscribe("logout", MagicMock())

        assert get_tags() == ["auth", "general"]
        assert get_event_names() == ["login", "logout"]

        clear_tag("auth")

        assert get_tags() == ["general"]
        assert get_event_names("auth") == []

    def test_clear_all(self, default_registry):
        """clear_all() empties the shared registry."""
        callback = MagicMock()
        subscribe("login", callback, tag="auth")
        subscribe("logout", callback)

        clear_all()
        emit("login")
        emit("logout")

        callback.assert_not_called()

    def test_reset_registry_takes_effect_immediately(self, default_registry):
        """Functions resolve the registry per call, so a reset drops old subscriptions."""
        callback = MagicMock()
        subscribe("login", callback)

        reset_registry()
        emit("login")

        callback.assert_not_called()
        assert get_registry() is not default_registry
