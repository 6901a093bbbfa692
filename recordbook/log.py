"""
Logging setup for the record book.

Modules log through ``logging.getLogger(__name__)``; this module wires the
``recordbook`` logger to a rotating file and to stderr for warnings.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Union

from .config import LOG_FILE

ROOT_LOGGER = "recordbook"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    log_dir: Union[str, Path],
    level: Union[str, int] = logging.INFO,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        log_dir: Directory for the log file (created if missing)
        level: Level for the file handler
        max_bytes: Maximum log file size before rotation (default: 10MB)
        backup_count: Number of rotated files to keep (default: 5)

    Returns:
        The configured ``recordbook`` logger
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG)
    # Reset only this logger's handlers (not global logger state)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        log_dir / LOG_FILE,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(
        logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(console_handler)

    return logger
