"""Logging utilities for halldisplay."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

# Default log format
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LEVEL = logging.INFO

PACKAGE_LOGGER = "halldisplay"


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def setup_logger(
    name: str,
    level: Union[int, str] = DEFAULT_LEVEL,
    log_format: str = DEFAULT_FORMAT,
    log_file: Optional[str] = None,
    console: bool = True,
) -> logging.Logger:
    """Set up a logger with the specified configuration.

    Handlers already attached to the logger are replaced, so calling this
    twice does not duplicate output.

    Args:
        name: Name of the logger
        level: Logging level (default: INFO)
        log_format: Log message format
        log_file: Path to log file (optional)
        console: Whether to log to console

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(_coerce_level(level))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(log_format)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Name of the logger

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def set_log_level(logger: logging.Logger, level: Union[int, str]) -> None:
    """Set the log level for the specified logger.

    Args:
        logger: Logger to modify
        level: New log level
    """
    logger.setLevel(_coerce_level(level))


def configure_package_logging(
    level: Union[int, str] = DEFAULT_LEVEL,
    log_format: str = DEFAULT_FORMAT,
    log_file: Optional[str] = None,
    console: bool = True,
) -> logging.Logger:
    """Configure the ``halldisplay`` logger hierarchy.

    Child loggers (``halldisplay.rendering.graph`` and friends) propagate to
    this logger, so only the package root gets handlers.

    Args:
        level: Logging level (default: INFO)
        log_format: Log message format
        log_file: Path to log file (optional)
        console: Whether to log to console

    Returns:
        The configured package logger
    """
    return setup_logger(
        PACKAGE_LOGGER,
        level=level,
        log_format=log_format,
        log_file=log_file,
        console=console,
    )
