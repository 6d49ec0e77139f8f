"""
Logging helpers for puzsolve.

Library modules only ask for loggers; handlers are installed by the command
line front end through :func:`configure_logging`.
"""

import logging
import os
from typing import Optional, Union

ROOT_LOGGER_NAME = "puzsolve"

LOG_FORMAT = "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger inside the ``puzsolve`` namespace.

    Args:
        name: Logger name (typically ``__name__`` of the calling module)

    Returns:
        Logger instance that propagates to the ``puzsolve`` root logger
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(
    level: Union[int, str] = logging.WARNING, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure console (and optional file) output for every puzsolve logger.

    Args:
        level: Logging level, as a number or a name such as ``"DEBUG"``
        log_file: Optional file path to save logs to. If None, only console output.

    Returns:
        The configured ``puzsolve`` root logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    return logger
