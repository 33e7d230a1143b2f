"""Structured logging for the event registry.

Public API:
    - configure_logging(): Initialize logging for the host application
    - get_module_logger(): Get a logger bound to a module name
    - bind_emit_context(): Context manager for emission-scoped logging
    - get_emission_id(): Get the id of the emission being dispatched
    - redact_sensitive(): Copy a payload with secrets masked

Formatters:
    - add_app_name(): Processor to add the application name
    - mask_sensitive_data(): Processor to redact secrets, including nested payloads
    - render_payload(): Processor to render payloads as text
    - truncate_long_values(): Processor to limit string lengths
"""

from emitter.logging.setup import (
    build_processors,
    configure_logging,
    get_module_logger,
)

from emitter.logging.context import (
    bind_emit_context,
    get_emission_id,
)

from emitter.logging.formatters import (
    REDACTED,
    SENSITIVE_KEYS,
    add_app_name,
    mask_sensitive_data,
    redact_sensitive,
    render_payload,
    truncate_long_values,
)

__all__ = [
    # Setup
    "build_processors",
    "configure_logging",
    "get_module_logger",
    # Context
    "bind_emit_context",
    "get_emission_id",
    # Formatters
    "REDACTED",
    "SENSITIVE_KEYS",
    "add_app_name",
    "mask_sensitive_data",
    "redact_sensitive",
    "render_payload",
    "truncate_long_values",
]
