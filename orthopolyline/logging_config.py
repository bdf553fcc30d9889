"""
Logging configuration for command line runs.

Library code only creates module loggers; handlers are attached here.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "orthopolyline"

# Chatty third-party loggers, never below WARNING
QUIET_LOGGERS = ("ezdxf", "matplotlib", "PIL")

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DEBUG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.INFO, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure the 'orthopolyline' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write the log to

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Replace handlers from an earlier call
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        DEBUG_FORMAT if level <= logging.DEBUG else DEFAULT_FORMAT,
        datefmt="%H:%M:%S",
    )

    # Logs go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logger.debug(f"Logging initialized at level {logging.getLevelName(level)}")
    return logger
