"""Emission context binding for structured logging.

Every emit() runs its callbacks inside an emission context, so log
entries written by the registry and by the callbacks themselves share an
``emission_id``. Nested emissions (a callback that emits) bind their own
id and restore the outer one when they finish.

Usage:
    from emitter.logging import bind_emit_context

    with bind_emit_context("user.login", tag="auth"):
        logger.info("handling_login")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_emit_context(
    event_name: str,
    tag: Optional[str] = None,
    callback_id: Optional[str] = None,
    emission_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind emission-scoped context to all logs within the context manager.

    Args:
        event_name: Name of the event being emitted.
        tag: Tag filter of the emission, if any.
        callback_id: Callback id filter of the emission, if any.
        emission_id: Identifier for this emission. Auto-generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        The emission id bound for the duration of the block.
    """
    context: dict[str, Any] = {
        "emission_id": emission_id or str(uuid.uuid4()),
        "event_name": event_name,
    }

    if tag is not None:
        context["event_tag"] = tag

    if callback_id is not None:
        context["callback_id"] = callback_id

    context.update(extra_context)

    tokens = structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["emission_id"]
    finally:
        # Restores whatever an enclosing emission had bound
        structlog.contextvars.reset_contextvars(**tokens)


def get_emission_id() -> Optional[str]:
    """Get the id of the emission currently being dispatched.

    Returns:
        The emission id if called during dispatch, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("emission_id")
