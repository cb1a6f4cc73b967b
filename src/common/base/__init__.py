"""Base functionality for fencat - logging."""

from .logging_config import LOG_LEVELS, configure_logging, get_logger

__all__ = [
    "LOG_LEVELS",
    "configure_logging",
    "get_logger",
]
