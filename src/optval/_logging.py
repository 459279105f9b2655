"""Structured logging for optval.

Events are emitted through structlog on stdlib loggers under the ``optval``
namespace. configure_logging() attaches a single handler to that namespace
only, so the host application's root logger is left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = [
    'LOGGER_NAME',
    'configure_logging',
    'get_logger',
]

LOGGER_NAME = 'optval'


def _pre_chain() -> list[Any]:
    """Processors applied before rendering, to structlog and stdlib records alike."""
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def _renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Route optval log events to stderr at the given level.

    Calling it again replaces the previous handler rather than adding one.

    Args:
        level: Logging level ("DEBUG", "INFO", ...). Unknown names fall back to INFO.
        json_output: Render events as JSON lines; otherwise use the console renderer.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_pre_chain(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_output),
            ],
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger, defaulting to the ``optval`` namespace."""
    return structlog.get_logger(name or LOGGER_NAME)
