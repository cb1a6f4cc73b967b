"""
Centralized logging configuration for fencat.

The rendered board goes to stdout, so every handler configured here writes
either to stderr or to a rotating log file. This keeps diagnostics out of
piped output such as ``fencat game.fen > board.txt``.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import constants

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

def configure_logging(
    log_level: str = "WARNING",
    app_log_level: Optional[str] = None,
    log_filename: Optional[str] = None
) -> Optional[Path]:
    """
    Configure application-wide logging settings.

    Sets up a console handler on stderr and, when *log_filename* is given,
    a rotating file handler in ``constants.LOG_DIR``.

    Args:
        log_level: Root logger level (default: "WARNING")
        app_log_level: Level for the ``fencat`` logger tree (default: same as root)
        log_filename: Optional log filename; enables file logging

    Returns:
        Path of the log file, or None when file logging is disabled
    """
    formatter = logging.Formatter(
        fmt='%(asctime)s - %(levelname)s - %(name)s - %(filename)s:%(lineno)d:%(funcName)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Clear any existing handlers to avoid duplicates on reconfiguration
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # StreamHandler defaults to stderr
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file_path = None
    if log_filename:
        log_dir = Path(constants.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file_path = log_dir / log_filename

        file_handler = logging.handlers.RotatingFileHandler(
            log_file_path,
            maxBytes=1024 * 1024,  # 1MB per file
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    app_logger = logging.getLogger('fencat')
    app_logger.setLevel(getattr(logging, (app_log_level or log_level).upper()))

    logging.debug(f"Logging initialized: root_level={log_level}, app_level={app_log_level}, log_file={log_file_path}")
    return log_file_path

def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the standardized configuration.

    Args:
        name: Name for the logger, typically __name__ from the calling module

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)
