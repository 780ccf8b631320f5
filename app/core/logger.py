"""
Logging configuration module.

This module provides centralized logging setup for applications using the
formatting helpers, configuring both file and console output with
appropriate formatting.
"""

import logging
from pathlib import Path
from typing import Optional, Union
from config.settings import Settings


def setup_logger(
    log_file: Optional[Union[str, Path]] = None,
    level: Optional[Union[str, int]] = None
) -> None:
    """
    Configure and initialize the root logger.

    Sets up dual logging output (file and console), creates the logs
    directory if needed and replaces any previously installed handlers.

    Args:
        log_file: Path of the log file (default: Settings.LOG_FILE)
        level: Logging level name or number (default: Settings.LOG_LEVEL)

    Returns:
        None

    Raises:
        OSError: If logs directory cannot be created (rare, usually permissions issue)

    Example:
        >>> setup_logger()
        >>> logging.info("Formatting started")
        2025-11-11 14:30:00 - root - INFO - Formatting started

    Note:
        - Existing handlers are cleared before setup to avoid duplicates
        - Both handlers share the root level
    """
    log_file = Path(log_file) if log_file else Settings.LOG_FILE
    level = level or Settings.LOG_LEVEL

    # Create logs directory if it doesn't exist
    log_file.parent.mkdir(parents=True, exist_ok=True)

    # Clear any existing handlers to prevent duplicates on re-initialization
    for handler in list(logging.root.handlers):
        logging.root.removeHandler(handler)
        handler.close()

    # Create formatter with timestamp, logger name, level, and message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Handler for file output (UTF-8 encoding for international characters)
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)

    # Handler for console output
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
