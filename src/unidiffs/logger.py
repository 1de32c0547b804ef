"""Logging setup for unidiffs.

Modules log through structlog.get_logger(__name__); nothing is configured on
import. Hosts call configure_logging() once at startup.

Usage:
    from unidiffs.logger import configure_logging

    configure_logging("DEBUG")
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def configure_logging(level: str | int = logging.INFO, stream: TextIO | None = None) -> None:
    """Route structlog output through stdlib logging with a console renderer.

    Args:
        level: Minimum level name or number.
        stream: Output stream (defaults to stderr).
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=stream or sys.stderr,
        force=True,
    )

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
            structlog.dev.ConsoleRenderer(),
        ],
    )
