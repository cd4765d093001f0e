"""
Logger configuration for the Pxshot client.
"""

import os
from typing import Optional

from loguru import logger

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"


def setup_logger(name: str):
    """Return the loguru logger bound to a module name.

    Sinks are left untouched so that importing the library never changes
    the application's logging setup. See configure_logging().

    Args:
        name: Name used to identify the emitting module

    Returns:
        Bound logger instance
    """
    return logger.bind(name=name)


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Replace loguru's sinks with a console sink and an optional file sink.

    Args:
        level: Log level. Defaults to the LOG_LEVEL environment variable, then INFO.
        log_file: Optional path of a rotated log file.
    """
    log_level = level or os.getenv("LOG_LEVEL", "INFO")

    # Remove default logger
    logger.remove()

    if log_file:
        # Add file handler with rotation and retention
        logger.add(
            log_file,
            rotation="100 MB",
            retention="5 days",
            compression="zip",
            level=log_level,
            enqueue=True,  # Thread-safe logger
            format=LOG_FORMAT,
        )

    # Add console handler
    logger.add(
        lambda msg: print(msg, end="", flush=True),
        level=log_level,
        format=LOG_FORMAT,
    )
