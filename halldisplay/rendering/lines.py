"""Pixel-exact line rasterization."""

from collections.abc import Iterator
from typing import Any

Point = tuple[float, float]


def bresenham(start: Point, end: Point) -> Iterator[tuple[int, int]]:
    """Yield the integer pixels of the segment from ``start`` to ``end``.

    Endpoints are truncated toward zero. The walk always advances along the
    major axis, so a segment touches exactly one pixel per major-axis step,
    both endpoints included.

    Args:
        start: (x, y) start point
        end: (x, y) end point

    Yields:
        (x, y) pixel coordinates; they may lie outside any image
    """
    x0, y0 = start
    x1, y1 = end

    steep = abs(y1 - y0) > abs(x1 - x0)
    if steep:
        x0, y0 = y0, x0
        x1, y1 = y1, x1
    if x0 > x1:
        x0, x1 = x1, x0
        y0, y1 = y1, y0

    dx = x1 - x0
    dy = abs(y1 - y0)
    error = dx / 2.0
    y = int(y0)
    y_step = 1 if y0 < y1 else -1

    for x in range(int(x0), int(x1) + 1):
        yield (y, x) if steep else (x, y)
        error -= dy
        if error < 0:
            y += y_step
            error += dx


def draw_line(
    pixels: Any, size: tuple[int, int], start: Point, end: Point, color: tuple[int, int, int]
) -> None:
    """Paint a segment, skipping pixels outside a ``size`` image.

    Args:
        pixels: Pixel access object from ``Image.load()``
        size: (width, height) of the image
        start: (x, y) start point
        end: (x, y) end point
        color: RGB color
    """
    width, height = size
    for x, y in bresenham(start, end):
        if 0 <= x < width and 0 <= y < height:
            pixels[x, y] = color
