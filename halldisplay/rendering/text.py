"""Text measurement and stamping for the render canvas.

Glyphs are rasterized by Pillow's FreeType binding, then thresholded: any
pixel with more than 10% coverage is painted in the full text color and
everything else is left alone. The canvas therefore never receives
anti-aliased in-between shades that the 3-color panel cannot show.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PIL import Image, ImageDraw, ImageFont
from PIL.ImageFont import FreeTypeFont

from ..epaper.palette import BLACK
from ..utils.exceptions import FontError

logger = logging.getLogger(__name__)

Color = tuple[int, int, int]

COVERAGE_THRESHOLD = 0.1

_COVERAGE_LUT = [255 if value / 255 > COVERAGE_THRESHOLD else 0 for value in range(256)]


class FontFace:
    """A typeface that can be drawn at any pixel size.

    Pillow font objects are bound to one size, so sized instances are
    created on first use and kept for the lifetime of the face.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        """Initialize the font face.

        Args:
            path: TrueType/OpenType file; None selects Pillow's bundled face
        """
        self.path = Path(path) if path else None
        self._sized: dict[float, FreeTypeFont] = {}

    def __repr__(self) -> str:
        return f"FontFace(path={str(self.path) if self.path else None!r})"

    def at(self, size: float) -> FreeTypeFont:
        """Return the face at ``size`` pixels."""
        font = self._sized.get(size)
        if font is None:
            font = self._load(size)
            self._sized[size] = font
        return font

    def _load(self, size: float) -> FreeTypeFont:
        if self.path is not None:
            try:
                return ImageFont.truetype(str(self.path), size)
            except ImportError as e:
                raise FontError(f"Cannot load {self.path}: Pillow lacks FreeType support") from e
            except OSError as e:
                logger.warning(f"Failed to load font {self.path}: {e}, using default font")

        font = ImageFont.load_default(size=size)
        # Without FreeType, Pillow hands back a fixed-size bitmap font
        if not isinstance(font, FreeTypeFont):
            raise FontError(
                "Pillow was built without FreeType support; sized text needs a "
                "FreeType-enabled Pillow"
            )
        return font


def measure_text(face: FontFace, text: str, size: float) -> tuple[int, int]:
    """Measure the rendered extent of a single line of text.

    Args:
        face: Font face to measure with
        text: Text to measure (no newlines)
        size: Font size in pixels

    Returns:
        (width, height): width spans the inked glyph boxes, height is the
        line height (ascent + descent) regardless of the characters used
    """
    font = face.at(size)
    ascent, descent = font.getmetrics()
    height = ascent + descent
    if not text:
        return 0, height

    left, _top, right, _bottom = font.getbbox(text)
    return int(right - left), height


def draw_text(
    canvas: Image.Image,
    text: str,
    x: float,
    y: float,
    face: FontFace,
    size: float,
    color: Color = BLACK,
) -> None:
    """Draw text with its top-left (ascender line) at (x, y).

    Anything falling outside the canvas is clipped. Newlines are not
    supported; lay out multiple lines by calling this once per line.

    Args:
        canvas: RGB image to draw on
        text: Text to draw
        x: Left edge in pixels
        y: Top edge in pixels
        face: Font face
        size: Font size in pixels
        color: RGB fill color
    """
    font = face.at(size)
    left, top, right, bottom = (int(v) for v in font.getbbox(text)) if text else (0, 0, 0, 0)
    if right <= left or bottom <= top:
        return

    # Glyphs may overhang the anchor to the left or above; shift them into the mask
    offset_x = -min(0, left)
    offset_y = -min(0, top)
    mask = Image.new("L", (right + offset_x, bottom + offset_y), 0)
    ImageDraw.Draw(mask).text((offset_x, offset_y), text, font=font, fill=255)
    mask = mask.point(_COVERAGE_LUT)

    canvas.paste(color, (int(x) - offset_x, int(y) - offset_y), mask)


def draw_text_right(
    canvas: Image.Image,
    text: str,
    x: float,
    y: float,
    face: FontFace,
    size: float,
    color: Color = BLACK,
) -> None:
    """Draw text whose right edge ends at x."""
    width, _height = measure_text(face, text, size)
    draw_text(canvas, text, x - width, y, face, size, color)


def draw_text_bottom_right(
    canvas: Image.Image,
    text: str,
    x: float,
    y: float,
    face: FontFace,
    size: float,
    color: Color = BLACK,
) -> None:
    """Draw text whose bottom-right corner sits at (x, y)."""
    width, height = measure_text(face, text, size)
    draw_text(canvas, text, x - width, y - height, face, size, color)

