"""Structlog configuration for creatorscore."""

import logging
import sys
from typing import TextIO

import structlog

from creatorscore.config import ScoreConfig, LogFormat, load_config


def _renderer_processors(log_format: LogFormat) -> list:
    """Final processors for the chosen output format."""
    if log_format == LogFormat.JSON:
        return [structlog.processors.JSONRenderer()]
    return [
        structlog.dev.set_exc_info,
        structlog.dev.ConsoleRenderer(colors=True),
    ]


def configure_logging(config: ScoreConfig | None = None, stream: TextIO | None = None) -> None:
    """
    Configure structlog with appropriate processors and output format.

    Args:
        config: ScoreConfig instance, loaded from the environment if None
        stream: Output stream, defaults to stderr so stdout stays free
            for CLI output such as `score --json`

    Raises:
        ConfigError: If config is None and the environment is invalid
    """
    if config is None:
        config = load_config()
    if stream is None:
        stream = sys.stderr

    # Standard library logging for third-party libraries (uvicorn, fastapi)
    log_level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=log_level,
    )

    # Shared processors, then the format-specific renderer
    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        *_renderer_processors(config.log_format),
    ]

    # Loggers are not cached so a later call can swap the stream
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )


def bind_creator(creator_id: str | None) -> None:
    """
    Attach a creator id to every log event until cleared.

    Args:
        creator_id: Identifier of the creator being scored, None to clear
    """
    structlog.contextvars.unbind_contextvars("creator_id")
    if creator_id is not None:
        structlog.contextvars.bind_contextvars(creator_id=creator_id)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a configured structlog logger.

    Args:
        name: Optional logger name for context

    Returns:
        Configured structlog BoundLogger
    """
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger_name=name)
    return logger
