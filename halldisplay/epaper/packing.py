"""Frame buffer packing for tri-color e-Paper panels.

Buffer layout (what the display controller consumes):

- Two 1-bit planes back to back: the black/white plane, then the chromatic
  plane. Together they hold a 2-bit palette code per pixel.
- Each plane is row-major with ``ceil(width / 8)`` bytes per row.
- Pixel ``x`` of a row lives in byte ``x // 8`` at bit ``7 - (x % 8)``
  (MSB first). Padding bits at the end of a row hold the white code.
"""

import logging
from typing import Optional

import numpy as np
from PIL import Image

from .palette import Palette
from .utils import row_stride

logger = logging.getLogger(__name__)

FrameBuffer = bytes


def buffer_len(width: int, height: int) -> int:
    """Size in bytes of a packed two-plane buffer.

    Args:
        width: Panel width in pixels
        height: Panel height in pixels

    Returns:
        ``2 * ceil(width / 8) * height``
    """
    return 2 * row_stride(width) * height


def pack(
    raster: Image.Image,
    width: Optional[int] = None,
    height: Optional[int] = None,
    supports_red: bool = True,
) -> FrameBuffer:
    """Pack a quantized raster into the panel's frame buffer format.

    Only exact palette colors are mapped; every other pixel value is left
    at the white code. Raster pixels outside ``width`` x ``height`` are
    ignored and panel pixels the raster does not cover stay white.

    Args:
        raster: Image to pack, normally already quantized
        width: Panel width in pixels (defaults to the raster width)
        height: Panel height in pixels (defaults to the raster height)
        supports_red: False packs chromatic pixels as black and leaves the
            chromatic plane at the white bit

    Returns:
        Packed buffer of ``buffer_len(width, height)`` bytes
    """
    width = raster.width if width is None else width
    height = raster.height if height is None else height
    padded_width = row_stride(width) * 8

    white = Palette.WHITE
    bw_plane = np.full((height, padded_width), white.bw_bit, dtype=np.uint8)
    chromatic_plane = np.full((height, padded_width), white.chromatic_bit, dtype=np.uint8)

    rows = min(height, raster.height)
    cols = min(width, raster.width)
    if rows > 0 and cols > 0:
        pixels = np.asarray(raster.convert("RGB"))[:rows, :cols]
        bw_view = bw_plane[:rows, :cols]
        chromatic_view = chromatic_plane[:rows, :cols]
        for color in (Palette.BLACK, Palette.CHROMATIC):
            mask = np.all(pixels == color.rgb, axis=-1)
            packed_as = color if supports_red else Palette.BLACK
            bw_view[mask] = packed_as.bw_bit
            chromatic_view[mask] = packed_as.chromatic_bit

    buffer = np.packbits(bw_plane, axis=1).tobytes() + np.packbits(chromatic_plane, axis=1).tobytes()
    logger.debug("Packed %dx%d raster into %d bytes", width, height, len(buffer))
    return buffer


def split_planes(buffer: bytes, width: int, height: int) -> Optional[tuple[bytes, bytes]]:
    """Split buffer into black/white and chromatic planes.

    Args:
        buffer: Buffer containing both planes
        width: Panel width in pixels
        height: Panel height in pixels

    Returns:
        Tuple of (bw_plane, chromatic_plane) or None if buffer size is invalid
    """
    expected = buffer_len(width, height)
    if len(buffer) != expected:
        logger.error(f"Invalid buffer size: {len(buffer)}, expected {expected}")
        return None

    plane_size = expected // 2
    return (buffer[:plane_size], buffer[plane_size:])


def unpack(buffer: bytes, width: int, height: int) -> Image.Image:
    """Decode a packed buffer back into an RGB preview image.

    The unassigned code (bw bit 0, chromatic bit 1) decodes as white, the
    same way the panel firmware falls back.

    Args:
        buffer: Packed two-plane buffer
        width: Panel width in pixels
        height: Panel height in pixels

    Returns:
        RGB image of the panel contents

    Raises:
        ValueError: If the buffer does not match the panel size
    """
    planes = split_planes(buffer, width, height)
    if planes is None:
        raise ValueError(f"Buffer of {len(buffer)} bytes does not fit a {width}x{height} panel")

    stride = row_stride(width)
    bw_bits, chromatic_bits = (
        np.unpackbits(np.frombuffer(plane, dtype=np.uint8).reshape(height, stride), axis=1)[
            :, :width
        ]
        for plane in planes
    )
    codes = (bw_bits << 1) | chromatic_bits

    rgb = np.empty((height, width, 3), dtype=np.uint8)
    for code in range(4):
        rgb[codes == code] = Palette.from_code(code).rgb
    return Image.fromarray(rgb)
