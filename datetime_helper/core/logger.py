"""
Logging configuration module.

This module provides centralized logging setup for host programs that
want the helper's debug output, configuring console and optional file
output with appropriate formatting.
"""

import logging
from datetime_helper.config.settings import Settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger() -> None:
    """
    Configure and initialize the root logger.

    Sets up console output and, when Settings.LOG_FILE is configured, file
    output. The level comes from Settings.LOG_LEVEL.

    The function configures:
        - Console logging to stderr (unless LOG_TO_CONSOLE is false)
        - File logging to Settings.LOG_FILE with UTF-8 encoding
        - A shared formatter with timestamp, logger name, level, and message

    Args:
        None

    Returns:
        None

    Raises:
        OSError: If the log file directory cannot be created

    Example:
        >>> setup_logger()
        >>> logging.getLogger("datetime_helper").info("Helper ready")
        2025-11-11 14:30:00 - datetime_helper - INFO - Helper ready

    Note:
        - The library never calls this on import; the host program does
        - Existing handlers are cleared before setup to avoid duplicates
        - Unknown level names fall back to INFO
    """
    level = logging.getLevelName(Settings.LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.INFO

    # Clear any existing handlers to prevent duplicates on re-initialization
    logging.root.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if Settings.LOG_TO_CONSOLE:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)

    if Settings.LOG_FILE is not None:
        Settings.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        # UTF-8 so month names and zone ids survive any platform default
        file_handler = logging.FileHandler(Settings.LOG_FILE, encoding='utf-8')
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)
