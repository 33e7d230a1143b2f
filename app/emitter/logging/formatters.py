"""Log processors and payload redaction for registry output.

Emitted payloads are arbitrary caller data. When payload logging is
enabled the registry passes them through redact_sensitive() before they
reach a log entry, and configure_logging() installs the processors below
so entries written by callbacks get the same treatment.

Pipeline order matters: mask first, then render payloads to text, then
trim the text.
"""

from collections.abc import Mapping
from typing import Any, Iterable, Optional

SENSITIVE_KEYS = frozenset(
    {
        "password",
        "passwd",
        "secret",
        "token",
        "api_key",
        "apikey",
        "authorization",
        "credential",
        "private_key",
        "cookie",
        "session_id",
    }
)

REDACTED = "***REDACTED***"

# Payloads nested deeper than this are logged unredacted below that level
MAX_REDACT_DEPTH = 16


def is_sensitive_key(key: Any, patterns: Iterable[str] = SENSITIVE_KEYS) -> bool:
    """Check whether a mapping key names a secret (case-insensitive substring match)."""
    if not isinstance(key, str):
        return False
    lowered = key.lower()
    return any(pattern in lowered for pattern in patterns)


def redact_sensitive(
    value: Any,
    patterns: Iterable[str] = SENSITIVE_KEYS,
    mask_value: str = REDACTED,
    _depth: int = 0,
) -> Any:
    """Return a copy of value with secrets under sensitive keys masked.

    Nested mappings, lists and tuples are walked. The caller's value is
    never modified, since the same object is handed to the callbacks.
    None values are kept so "no password given" stays visible.

    Args:
        value: Payload to redact.
        patterns: Key fragments considered sensitive.
        mask_value: Replacement for sensitive values.

    Returns:
        The redacted copy, or value itself if nothing could hold a secret.
    """
    if _depth > MAX_REDACT_DEPTH:
        return value

    if isinstance(value, Mapping):
        redacted = {}
        for key, item in value.items():
            if item is not None and is_sensitive_key(key, patterns):
                redacted[key] = mask_value
            else:
                redacted[key] = redact_sensitive(item, patterns, mask_value, _depth + 1)
        return redacted

    if isinstance(value, list):
        return [redact_sensitive(item, patterns, mask_value, _depth + 1) for item in value]

    if isinstance(value, tuple):
        return tuple(redact_sensitive(item, patterns, mask_value, _depth + 1) for item in value)

    return value


def add_app_name(app_name: str):
    """Create a processor that tags every entry with the application name."""

    def processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict["app_name"] = app_name
        return event_dict

    return processor


def mask_sensitive_data(additional_patterns: Optional[Iterable[str]] = None):
    """Create a processor that redacts secrets anywhere in a log entry.

    Top-level keys and keys inside logged payloads are both checked, so
    ``data={"user": {"password": ...}}`` is masked as well as ``password=...``.

    Args:
        additional_patterns: Extra key fragments to treat as sensitive.

    Returns:
        A structlog processor function.
    """
    patterns = SENSITIVE_KEYS | frozenset(additional_patterns or ())

    def processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        return redact_sensitive(event_dict, patterns)

    return processor


def render_payload(keys: Iterable[str] = ("data",)):
    """Create a processor that renders structured payloads as their repr.

    Runs after masking so the text never contains a secret, and before
    truncation so large payloads are bounded like any other string.

    Args:
        keys: Entry keys holding payloads.

    Returns:
        A structlog processor function.
    """
    keys = tuple(keys)

    def processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        for key in keys:
            if key in event_dict and not isinstance(event_dict[key], str):
                event_dict[key] = repr(event_dict[key])
        return event_dict

    return processor


def truncate_long_values(max_length: int = 500):
    """Create a processor that cuts string values longer than max_length.

    Args:
        max_length: Longest string kept intact.

    Returns:
        A structlog processor function.
    """

    def processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = f"{value[:max_length]}...[truncated, {len(value)} chars total]"
        return event_dict

    return processor
