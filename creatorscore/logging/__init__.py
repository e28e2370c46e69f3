"""Logging helpers."""

from creatorscore.logging.setup import bind_creator, configure_logging, get_logger

__all__ = ["bind_creator", "configure_logging", "get_logger"]
