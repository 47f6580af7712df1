"""Structlog configuration for proctop.

The dashboard owns the terminal, so log output never goes to the console.
When a log file is configured, events are written there as JSON Lines;
otherwise they are dropped.
"""

from __future__ import annotations

import logging
import logging.handlers
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from proctop.config import Config

LOGGER_NAME = "proctop"
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 2


def configure(config: Config) -> None:
    """Configure structlog to write JSON Lines to ``config.log_path``.

    Args:
        config: Application config; a ``log_path`` of None silences logging.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for old_handler in logger.handlers:
        old_handler.close()
    logger.handlers.clear()
    logger.propagate = False

    if config.log_path is None:
        logger.addHandler(logging.NullHandler())
    else:
        config.log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            config.log_path,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
                foreign_pre_chain=[
                    structlog.processors.TimeStamper(fmt="iso", utc=False, key="ts"),
                    structlog.processors.add_log_level,
                ],
            )
        )
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if config.debug else logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso", utc=False, key="ts"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger under the ``proctop`` namespace."""
    return structlog.get_logger(name)


def ensure_configured(config: Config) -> None:
    """Configure logging from ``config`` unless something already has.

    structlog's defaults print to stdout, which is the terminal the
    dashboard draws on.
    """
    if not structlog.is_configured():
        configure(config)
