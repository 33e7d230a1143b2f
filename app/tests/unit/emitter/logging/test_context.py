"""Unit tests for emitter.logging.context module.

Tests cover:
- bind_emit_context() context manager
- get_emission_id()
- Nested emissions restoring the outer context
"""

import uuid

import pytest
import structlog

from emitter.logging.context import bind_emit_context, get_emission_id


@pytest.mark.unit
class TestBindEmitContext:
    """Test suite for bind_emit_context context manager."""

    def test_auto_generates_emission_id(self):
        """Emission id is a generated UUID if not provided."""
        with bind_emit_context("login") as emission_id:
            assert get_emission_id() == emission_id
            uuid.UUID(emission_id)

    def test_uses_provided_emission_id(self):
        """Provided emission id is used instead of generating one."""
        with bind_emit_context("login", emission_id="emit-123") as emission_id:
            assert emission_id == "emit-123"
            assert get_emission_id() == "emit-123"

    def test_binds_event_metadata(self):
        """Event name, tag and callback id are bound to context."""
        with bind_emit_context("login", tag="auth", callback_id="x", source="test"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx.get("event_name") == "login"
            assert ctx.get("event_tag") == "auth"
            assert ctx.get("callback_id") == "x"
            assert ctx.get("source") == "test"

    def test_omits_unset_filters(self):
        """Tag and callback id are not bound when not given."""
        with bind_emit_context("login"):
            ctx = structlog.contextvars.get_contextvars()
            assert "event_tag" not in ctx
            assert "callback_id" not in ctx

    def test_clears_after_exit(self):
        """Context is removed after the block."""
        with bind_emit_context("login", tag="auth"):
            pass

        assert get_emission_id() is None
        ctx = structlog.contextvars.get_contextvars()
        assert "event_name" not in ctx
        assert "event_tag" not in ctx

    def test_clears_after_exception(self):
        """Context is removed even if the block raises."""
        with pytest.raises(RuntimeError):
            with bind_emit_context("login"):
                raise RuntimeError("callback failed")

        assert get_emission_id() is None

    def test_nested_restores_outer(self):
        """Nested emissions restore the outer emission's context on exit."""
        with bind_emit_context("outer", emission_id="outer-1", tag="a"):
            with bind_emit_context("inner", emission_id="inner-1"):
                assert get_emission_id() == "inner-1"
                ctx = structlog.contextvars.get_contextvars()
                assert ctx.get("event_name") == "inner"
                assert ctx.get("event_tag") == "a"

            assert get_emission_id() == "outer-1"
            assert structlog.contextvars.get_contextvars()["event_name"] == "outer"

    def test_get_emission_id_outside_dispatch(self):
        """No emission id is set outside of an emission."""
        assert get_emission_id() is None
