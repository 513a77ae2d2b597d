"""
Module: logger.py
Description: Structured logging configuration for the SQS sender.

The sender is embedded in host applications, so importing it leaves the
host's structlog setup alone. Applications that want the sender's JSON
output call configure_logging() once at startup.

Key Components:
- configure_logging(): JSON output for CloudWatch, filtered by log level
- Timestamp and log level processors
- get_logger() helper function

Dependencies: structlog, logging, datetime
"""

import logging
from datetime import datetime, timezone
from typing import Optional

import structlog

from sqs_sender.config.settings import Settings, settings as default_settings


def _add_timestamp(logger, method_name, event_dict):
    """
    Add ISO 8601 timestamp to log entries.

    Args:
        logger: Logger instance
        method_name: Log method name (info, error, etc.)
        event_dict: Current log event dictionary

    Returns:
        Updated event dictionary with timestamp
    """
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _add_log_level(logger, method_name, event_dict):
    """Add upper-cased log level to the event dictionary."""
    event_dict["level"] = method_name.upper()
    return event_dict


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure structlog for JSON output at settings.log_level.

    Replaces any existing structlog configuration, so only the process
    owner should call it.

    Args:
        settings: Sender settings; the module-level settings when omitted
    """
    settings = settings or default_settings

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            _add_timestamp,
            _add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.WriteLoggerFactory(),
        # Drop records below the configured level before any processor runs
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level)
        ),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a structlog logger instance.

    The logger is resolved lazily, so it follows whatever configuration
    is active when it first logs.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Lazy structlog logger carrying the logger name and app name

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Message sent to SQS", message_id="5fea7756-...")
    """
    return structlog.get_logger(name, logger=name, app=default_settings.app_name)
