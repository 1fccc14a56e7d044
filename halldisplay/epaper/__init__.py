"""E-Paper panel support: palette quantization and frame buffer packing.

Core Components:
- Palette / classify / quantize: snap an RGB canvas onto the 3 panel colors
- pack / unpack: two-plane, 2-bit-per-pixel frame buffer encoding
- DisplayCapabilities: panel size and color support
- Region: rectangular layout areas
"""

from .capabilities import WAVESHARE_7IN5B_V2, DisplayCapabilities
from .packing import FrameBuffer, buffer_len, pack, split_planes, unpack
from .palette import Palette, classify, quantize
from .region import Region

__all__ = [
    "WAVESHARE_7IN5B_V2",
    "DisplayCapabilities",
    "FrameBuffer",
    "Palette",
    "Region",
    "buffer_len",
    "classify",
    "pack",
    "quantize",
    "split_planes",
    "unpack",
]
