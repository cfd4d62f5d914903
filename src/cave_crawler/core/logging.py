"""Structured logging configuration for Cave Crawler.

Logging is configured with structlog and rendered through the standard
library, so one record reaches both stderr and the optional log file.
Output never goes to stdout, where the game screen lives, and the default
level is WARNING for the same reason.

Example:
    >>> from cave_crawler.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Cave generated", difficulty="hard", monsters=3)
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Tag every event with the application name."""
    event_dict["app"] = "cave_crawler"
    return event_dict


def configure_logging(
    *,
    level: str = "WARNING",
    json_format: bool = False,
    log_file: str | None = None,
) -> None:
    """Configure structlog and the root stdlib logger.

    Args:
        level: Level name; unknown names fall back to WARNING.
        json_format: Render one JSON object per event instead of key=value text.
        log_file: Also append every event to this file.

    Example:
        >>> configure_logging(level="DEBUG", log_file="run.log")
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty() and not log_file,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Events arrive already rendered; the handlers add nothing around them.
    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        stream=sys.stderr,
        force=True,
    )

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        logging.getLogger().addHandler(file_handler)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Return a structlog logger, usually named after the calling module."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Attach key/value pairs to every event logged from this context.

    Example:
        >>> bind_context(run=3, player="Unnamed")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
