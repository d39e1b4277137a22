"""Structured logging configuration using structlog.

Provides JSON logs in production and colored console output in development.
The extractor only ever logs through stdlib ``logging.getLogger(__name__)``;
this module routes those records through structlog processors.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from report_extractor.core.config import ObservabilityConfig

PACKAGE_LOGGER = "report_extractor"
_HANDLER_NAME = "report_extractor.structlog"


def setup_logging(config: ObservabilityConfig) -> None:
    """Route the package's log records through structlog at the configured level."""
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if config.json_logs or not sys.stderr.isatty():
        # Production: JSON lines
        renderer = structlog.processors.JSONRenderer()
    else:
        # Dev mode: colored console
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.set_name(_HANDLER_NAME)

    # Only the package logger is touched; host handlers on the root stay put
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
