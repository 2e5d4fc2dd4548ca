"""
Structured logging configuration for Auxa.

The engine modules log through plain ``logging.getLogger(__name__)``.
setup_logging() routes those records, and any structlog loggers, through
one structlog ProcessorFormatter on a single root handler:

- AUXA_DEV_MODE=1 renders colored console lines for local runs
- otherwise every record is one JSON object (logger, level, timestamp)
- LOG_LEVEL picks the root level (unknown names mean INFO)

Keyword arguments override the environment.

Usage:
    from src.lib.logging import setup_logging

    setup_logging()  # Call once at application startup
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

import structlog

DEV_MODE_ENV = "AUXA_DEV_MODE"
LOG_LEVEL_ENV = "LOG_LEVEL"

# Added to every record, whether it came from structlog or stdlib
_SHARED_PROCESSORS: tuple[structlog.types.Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
)


def resolve_log_level(name: str | None) -> int:
    """Map a level name such as "debug" to its logging constant."""
    level = logging.getLevelName((name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _renderer(dev_mode: bool) -> structlog.types.Processor:
    if dev_mode:
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def setup_logging(
    dev_mode: bool | None = None,
    level: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        dev_mode: Console output instead of JSON. Defaults to AUXA_DEV_MODE=1
        level: Root level name. Defaults to LOG_LEVEL, then INFO
        stream: Where records are written. Defaults to stderr
    """
    if dev_mode is None:
        dev_mode = os.environ.get(DEV_MODE_ENV) == "1"
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV)

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=list(_SHARED_PROCESSORS),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(dev_mode),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(resolve_log_level(level))


__all__ = ["setup_logging", "resolve_log_level"]
