"""Utility helpers: logging setup and exception types."""

from .exceptions import (
    FontError,
    HallDisplayError,
    InconsistentStateError,
    InsufficientDataError,
    RenderError,
)
from .logging import configure_package_logging, get_logger, set_log_level, setup_logger

__all__ = [
    "FontError",
    "HallDisplayError",
    "InconsistentStateError",
    "InsufficientDataError",
    "RenderError",
    "configure_package_logging",
    "get_logger",
    "set_log_level",
    "setup_logger",
]
