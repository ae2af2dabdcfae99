"""
Planscope Structured Logging

Configures structlog for the API process or for code embedding the engine.
Without arguments the level and output format come from the settings; library
users pass them explicitly and never touch the environment.
"""

import logging
import sys
from typing import Optional, Union

import structlog

from planscope.platform.config import settings


def _resolve_level(level: Union[str, int, None]) -> int:
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def configure_logging(
    level: Union[str, int, None] = None,
    json_logs: Optional[bool] = None,
) -> None:
    """
    Configure structured logging.

    Args:
        level: Level name ("debug", "INFO", ...) or a ``logging`` constant.
            Defaults to ``settings.LOG_LEVEL``.
        json_logs: Render JSON lines instead of the colored console format.
            Defaults to True when ``settings.APP_ENV`` is "production".
    """
    log_level = _resolve_level(level)
    if json_logs is None:
        json_logs = settings.APP_ENV == "production"

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
