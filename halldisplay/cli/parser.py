"""Command-line argument parsing for halldisplay."""

import argparse
from datetime import datetime

from .. import __version__


def parse_datetime(value: str) -> datetime:
    """Parse an ISO 8601 timestamp for ``--now``.

    Args:
        value: Timestamp such as ``2023-05-20T15:00:00-04:00``

    Returns:
        Parsed datetime; naive values are read in the display timezone

    Raises:
        argparse.ArgumentTypeError: If the value is not ISO 8601
    """
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid timestamp {value!r}: {e}") from e


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="halldisplay",
        description="Render the weather/task status screen to a frame buffer and PNG preview",
    )
    parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Frame buffer output path (default: settings output_path); a .png is written alongside",
    )
    parser.add_argument("--timezone", help="IANA timezone, e.g. America/New_York")
    parser.add_argument("--font", help="TrueType font file for all text")
    parser.add_argument("--config", help="YAML settings file")
    parser.add_argument(
        "--now",
        type=parse_datetime,
        help="Render as of this ISO 8601 timestamp instead of the current time",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level (default: settings log_level)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser
