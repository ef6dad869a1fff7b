# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Centralized logging configuration for vt100ish.

This module provides structured logging using structlog, configured to:
- Write all logs to stderr (stdout carries the rendered console text)
- Respect VT100ISH_LOG_LEVEL environment variable (default: WARNING)
- Use ISO timestamps and console rendering, coloured only when stderr is a terminal
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from vt100ish.settings import Settings

__all__ = ["get_logger", "configure_logging"]


def _stderr_is_tty() -> bool:
    isatty = getattr(sys.stderr, "isatty", None)
    return bool(isatty and isatty())


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog for vt100ish.

    This should be called once at application startup.
    Respects VT100ISH_LOG_LEVEL environment variable via Settings (default: WARNING).

    Args:
        settings: Settings instance (will be created if None)
    """
    if settings is None:
        from vt100ish.settings import Settings

        settings = Settings()

    log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)

    # stdout is reserved for the rendered console
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=_stderr_is_tty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__ of calling module)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
