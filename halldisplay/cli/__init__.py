"""Command-line interface: render the sample screen to disk."""

import logging
from datetime import datetime
from typing import Optional

from pydantic import ValidationError

from ..config.settings import HallDisplaySettings
from ..export import export_render
from ..rendering.layout import render, resolve_timezone
from ..rendering.text import FontFace
from ..sample_data import sample_display_data
from ..utils.exceptions import RenderError
from ..utils.logging import configure_package_logging
from .parser import create_parser

logger = logging.getLogger(__name__)


def main_entry(argv: Optional[list[str]] = None) -> int:
    """Parse arguments, render one frame and write it out.

    Args:
        argv: Argument list (defaults to ``sys.argv[1:]``)

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = create_parser().parse_args(argv)

    overrides = {}
    if args.config:
        overrides["config_file"] = args.config
    if args.timezone:
        overrides["local_timezone"] = args.timezone
    if args.font:
        overrides["font_path"] = args.font
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.output:
        overrides["output_path"] = args.output

    try:
        settings = HallDisplaySettings(**overrides)
    except ValidationError as e:
        configure_package_logging(level=args.log_level or "INFO")
        logger.error(f"Invalid configuration: {e}")
        return 1

    configure_package_logging(level=settings.log_level, log_file=settings.log_file)

    tz = resolve_timezone(settings.local_timezone)
    if args.now is None:
        now = datetime.now(tz)
    elif args.now.tzinfo is None:
        now = args.now.replace(tzinfo=tz)
    else:
        now = args.now.astimezone(tz)
    display_data = sample_display_data(now)

    try:
        buffer, image = render(
            tz,
            display_data,
            now=now,
            font=FontFace(settings.font_path),
            config=settings.layout,
            capabilities=settings.panel.to_capabilities(),
        )
    except RenderError:
        logger.exception("Render failed; leaving the display untouched")
        return 1

    export_render(buffer, image, settings.output_path)
    return 0


__all__ = ["create_parser", "main_entry"]
