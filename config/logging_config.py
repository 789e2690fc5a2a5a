"""
Centralized logging configuration.

stdout carries the filtered document, so console output goes to stderr.
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from .constants import (
    PROGRAM_NAME, LOG_LEVEL, LOG_FORMAT, LOG_FILE_FORMAT, LOG_FILE,
    LOG_MAX_SIZE_MB, LOG_BACKUP_COUNT
)


def setup_logger(name: str = None, level: Optional[str] = None,
                 log_file: Optional[str] = None) -> logging.Logger:
    """
    Get or create a configured logger.

    Usage:
        from config.logging_config import setup_logger
        logger = setup_logger('pandoc-quotes', level='DEBUG')
        logger.warning("Message here")

    Args:
        name: Logger name. If None, uses the program name.
        level: Level name (DEBUG, INFO, WARNING...). Defaults to LOG_LEVEL.
        log_file: Optional path of a rotating log file.

    Returns:
        Configured logging.Logger instance.
    """
    logger = logging.getLogger(name or PROGRAM_NAME)
    level_name = (level or LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    # Console handler - stderr
    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console)

    # File handler with rotation - DEBUG level
    log_file = log_file or LOG_FILE
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=LOG_MAX_SIZE_MB * 1024 * 1024,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Alias for setup_logger for convenience.

    Usage:
        from config.logging_config import get_logger
        logger = get_logger(__name__)
    """
    return setup_logger(name)
