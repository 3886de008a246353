"""
Logging configuration helpers.
Every entry point calls `configure_logging` before serving so module loggers share one format.
"""

from __future__ import annotations

import logging

from customer_service.common.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGING_CONFIGURED = False


def configure_logging(level_name: str | None = None) -> None:
    """Configure process-wide logging from environment settings."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    resolved_name = (level_name or get_settings().LOG_LEVEL).upper()
    level = getattr(logging, resolved_name, logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)
    _LOGGING_CONFIGURED = True
