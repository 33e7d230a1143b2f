"""Structlog configuration and logger setup.

This module provides the logging configuration for applications that
embed the event registry. Importing the package never configures
logging; the host application calls configure_logging() once at
startup. Until then, registry loggers fall back to structlog's defaults.

Usage:
    from emitter.logging import configure_logging, get_module_logger

    # Configure logging at app startup
    configure_logging()

    # Get a logger for your module
    logger = get_module_logger(__name__)
    logger.info("event_name", key="value")

Dependencies:
    - emitter.configuration.Settings
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from emitter.configuration import Settings
from emitter.logging.formatters import (
    add_app_name,
    mask_sensitive_data,
    render_payload,
    truncate_long_values,
)


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def build_processors(settings: Settings, is_production: bool) -> list:
    """Build the structlog processor chain for the given settings.

    Secrets are masked before payloads are rendered to text, and text is
    truncated last so the truncated form never contains a secret.
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_name(settings.APP_NAME),
        mask_sensitive_data(),
        render_payload(),
        truncate_long_values(max_length=settings.LOG_MAX_VALUE_LENGTH),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # Pretty printing for development, JSON for production
    if is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    return processors


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging.

    Args:
        settings: Settings to read defaults from. A fresh Settings() is
            loaded from the environment if not provided.
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production if not provided. Controls JSON vs console output.

    Returns:
        Configured logger instance
    """
    # Suppress all logging during tests
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)

        # Basic processors are still needed to avoid errors, but nothing is
        # emitted because the root logger level is set to CRITICAL + 1
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    settings = settings or Settings()
    prod_mode = is_production if is_production is not None else settings.is_production

    structlog.configure(
        processors=build_processors(settings, prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_module_logger(name: str) -> BoundLogger:
    """Get a logger for a module with component and module_path context.

    The returned logger resolves the structlog configuration on every
    call, so module-level loggers created at import time pick up whatever
    configure_logging() installs later.

    Args:
        name: Module name, normally ``__name__``.

    Returns:
        Logger bound with ``component`` and ``module_path``.

    Example:
        # In emitter/events/registry.py
        logger = get_module_logger(__name__)
        # context: {"component": "registry", "module_path": "emitter.events.registry"}
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
        component=name.rsplit(".", 1)[-1],
        module_path=name,
    )
