"""Logging and observability configuration using Pydantic Logfire.

This module provides standardized logging utilities and configuration.
All modules should use Python's standard logging library (logging.getLogger(__name__)),
and Logfire will automatically capture and enrich these logs.

Standard usage:
    import logging
    logger = logging.getLogger(__name__)
    logger.info("Message", extra={"key": "value"})
"""

import logging

import logfire

from ventureboard.core.config import settings


def configure_logfire() -> None:
    """Configure Pydantic Logfire with token from environment.

    Nothing is exported unless LOGFIRE_TOKEN is set.
    """
    logfire.configure(
        token=settings.logfire_token,
        service_name="ventureboard",
        service_version="0.1.0",
        send_to_logfire="if-token-present",
    )

    logger = logging.getLogger(__name__)
    logger.info("Logfire configured successfully")


def configure_logging(level: str | None = None) -> None:
    """Configure stdlib logging for command-line use and wire up Logfire."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    configure_logfire()


def span(name: str, /, **attributes: object) -> logfire.LogfireSpan:
    """Create a custom span for engine and facade operations.

    Usage:
        with span("checklist_engine.add_task", business_id=business_id):
            ...
    """
    return logfire.span(name, **attributes)
