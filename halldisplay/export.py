"""Writing render output to disk."""

import logging
from pathlib import Path
from typing import Union

from PIL import Image

logger = logging.getLogger(__name__)


def export_render(
    buffer: bytes, image: Image.Image, output_path: Union[str, Path]
) -> tuple[Path, Path]:
    """Write the frame buffer and a PNG preview of the canvas.

    Args:
        buffer: Packed frame buffer
        image: Rendered canvas
        output_path: Buffer destination; the PNG gets the same stem with
            a ``.png`` suffix

    Returns:
        (buffer_path, png_path)
    """
    buffer_path = Path(output_path)
    png_path = buffer_path.with_suffix(".png")
    if png_path == buffer_path:
        png_path = buffer_path.with_name(buffer_path.name + ".preview.png")

    buffer_path.parent.mkdir(parents=True, exist_ok=True)
    buffer_path.write_bytes(buffer)
    image.save(png_path, format="PNG")

    logger.info("Wrote %d-byte frame buffer to %s", len(buffer), buffer_path)
    logger.info("Wrote %dx%d preview to %s", image.width, image.height, png_path)
    return buffer_path, png_path
