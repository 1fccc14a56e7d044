"""
Tri-color palette for the e-Paper panel.

The panel shows exactly three colors. Rendering happens on a full RGB
canvas; quantization snaps every pixel onto the palette with a fixed
per-pixel threshold (no error diffusion). Any halftone look comes from the
geometric hatch the graph renderer draws, not from this module.
"""

import logging
from enum import Enum
from typing import Any

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

# Chromatic test: strong red, weak green/blue
RED_MIN = 250
GREEN_BLUE_MAX = 210

# Anything darker than this (Rec. 601 luma) becomes black
LUMA_WHITE_MIN = 250


class Palette(Enum):
    """The three panel colors and their canonical RGB values.

    The 2-bit code is split across the two buffer planes: the high bit
    lives in the black/white plane, the low bit in the chromatic plane.
    """

    WHITE = (255, 255, 255)
    BLACK = (0, 0, 0)
    CHROMATIC = (255, 0, 0)

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Canonical RGB value."""
        return self.value

    @property
    def code(self) -> int:
        """2-bit palette code."""
        return _CODES[self]

    @property
    def bw_bit(self) -> int:
        """Bit stored in the black/white plane."""
        return self.code >> 1

    @property
    def chromatic_bit(self) -> int:
        """Bit stored in the chromatic plane."""
        return self.code & 1

    @classmethod
    def from_code(cls, code: int) -> "Palette":
        """Palette color for a 2-bit code; unassigned codes read as white."""
        for color, color_code in _CODES.items():
            if color_code == code:
                return color
        return cls.WHITE


_CODES = {
    Palette.WHITE: 0b10,
    Palette.BLACK: 0b00,
    Palette.CHROMATIC: 0b11,
}

WHITE = Palette.WHITE.rgb
BLACK = Palette.BLACK.rgb
RED = Palette.CHROMATIC.rgb


def _luma(r: Any, g: Any, b: Any) -> Any:
    # Works for plain ints and for float numpy arrays alike
    return 0.299 * r + 0.587 * g + 0.114 * b


def _is_chromatic(r: Any, g: Any, b: Any) -> Any:
    return (r > RED_MIN) & (g < GREEN_BLUE_MAX) & (b < GREEN_BLUE_MAX)


def classify(pixel: tuple[int, ...]) -> Palette:
    """Classify one RGB pixel onto the palette.

    Rules, first match wins:
        1. red > 250 and green < 210 and blue < 210 -> CHROMATIC
        2. luma < 250 -> BLACK
        3. otherwise -> WHITE

    Args:
        pixel: (r, g, b) tuple; extra channels such as alpha are ignored

    Returns:
        Palette color for the pixel
    """
    r, g, b = int(pixel[0]), int(pixel[1]), int(pixel[2])
    if _is_chromatic(r, g, b):
        return Palette.CHROMATIC
    if _luma(r, g, b) < LUMA_WHITE_MIN:
        return Palette.BLACK
    return Palette.WHITE


def quantize(raster: Image.Image) -> Image.Image:
    """Snap every pixel of an RGB image onto the palette, in place.

    Args:
        raster: RGB image to modify

    Returns:
        The same image object, for chaining

    Raises:
        ValueError: If the image is not in RGB mode
    """
    if raster.mode != "RGB":
        raise ValueError(f"quantize expects an RGB image, got mode {raster.mode!r}")
    if raster.width == 0 or raster.height == 0:
        return raster

    pixels = np.asarray(raster, dtype=np.float64)
    r, g, b = pixels[..., 0], pixels[..., 1], pixels[..., 2]

    chromatic = _is_chromatic(r, g, b)
    black = ~chromatic & (_luma(r, g, b) < LUMA_WHITE_MIN)

    out = np.empty(pixels.shape, dtype=np.uint8)
    out[...] = WHITE
    out[black] = BLACK
    out[chromatic] = RED

    raster.paste(Image.fromarray(out))
    logger.debug(
        "Quantized %dx%d raster: %d black, %d chromatic",
        raster.width,
        raster.height,
        int(black.sum()),
        int(chromatic.sum()),
    )
    return raster
