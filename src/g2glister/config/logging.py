"""Logging configuration for G2G Lister."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from g2glister.config.paths import get_data_dir, is_frozen

# Module-level logger
_logger: Optional[logging.Logger] = None

# Constants
LOGGER_NAME = "g2glister"
LOG_FILENAME = "g2glister.log"
MAX_BYTES = 5 * 1024 * 1024  # 5MB
BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_log_path(portable: bool = False) -> Path:
    """Get the path to the log file."""
    data_dir = get_data_dir(portable=portable)
    return data_dir / LOG_FILENAME


def setup_logging(
    portable: bool = False,
    console: bool = True,
    level: int = logging.INFO,
    log_path: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure and return the application logger.

    Module loggers (g2glister.parser.*, g2glister.core.*) propagate here, so
    DEBUG enables the step-by-step pipeline diagnostics.

    Args:
        portable: If True, use portable data directory for log file
        console: If True, also log to console (useful for debugging)
        level: Minimum level for the logger and its handlers
        log_path: Override the log file location

    Returns:
        Configured logger instance
    """
    global _logger

    if _logger is not None:
        _logger.setLevel(level)
        return _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Prevent duplicate handlers if called multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # File handler with rotation
    if log_path is None:
        log_path = get_log_path(portable=portable)
    try:
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except OSError as e:
        # Continue without file logging
        print(f"Warning: Could not create log file at {log_path}: {e}")

    if console and not is_frozen():
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """
    Get the application logger.

    If logging hasn't been set up yet, sets up with defaults.
    """
    global _logger
    if _logger is None:
        return setup_logging()
    return _logger
