"""Five-day forecast graph.

Draws, in order:

1. Day separators plus "<weekday> <high> <low>" labels at each midnight
   crossing (the final day is not labeled).
2. The rain-probability curve in black.
3. A diagonal 6x6 hatch beneath the rain curve, standing in for a gray
   fill the panel cannot show.
4. The temperature curve in red, three pixels thick, on top of everything.
"""

import logging
import math
from collections.abc import Iterable
from typing import Optional, Union

import numpy as np
from PIL import Image

from ..epaper.palette import BLACK, RED, WHITE
from ..models import Forecast, ForecastSample, as_forecast
from .lines import Point, bresenham, draw_line
from .text import FontFace, draw_text

logger = logging.getLogger(__name__)

WEEKDAY_INITIALS = "MTWTFSS"

# Temperature domain is widened so the curve stays off the borders
TEMP_DOMAIN_LOW_FACTOR = 0.9
TEMP_DOMAIN_HIGH_FACTOR = 1.1

DAY_LABEL_SIZE = 36
DAY_LABEL_OFFSET = 5

HATCH_PERIOD = 6


def temperature_domain(forecast: Forecast) -> tuple[float, float]:
    """Vertical temperature domain: 90% of the series minimum to 110% of its maximum."""
    week = forecast.week_range
    return TEMP_DOMAIN_LOW_FACTOR * week.low, TEMP_DOMAIN_HIGH_FACTOR * week.high


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def scale_to_height(value: float, low: float, high: float, height: int) -> float:
    """Map ``value`` from [low, high] onto a pixel row, bottom-up.

    Args:
        value: Data value
        low: Domain minimum, lands on the bottom row
        high: Domain maximum, lands on the top row
        height: Raster height in pixels

    Returns:
        Row coordinate clamped to [0, height - 1]
    """
    fraction = 0.5 if high == low else (value - low) / (high - low)
    return _clamp(height - fraction * (height - 1) - 1, 0, height - 1)


def rain_to_height(probability: int, height: int) -> float:
    """Map a 0-100 rain probability onto a whole pixel row."""
    return _clamp(height - math.floor(probability / 100 * (height - 1)) - 1, 0, height - 1)


def render_graph(
    series: Union[Forecast, Iterable[ForecastSample]],
    width: int,
    height: int,
    font: FontFace,
    label_size: float = DAY_LABEL_SIZE,
) -> Image.Image:
    """Render the temperature and rain forecast graph.

    Args:
        series: Forecast, or samples in ascending time order
        width: Graph width in pixels
        height: Graph height in pixels
        font: Face used for the day labels
        label_size: Day label font size in pixels

    Returns:
        New RGB image of exactly width x height pixels

    Raises:
        InsufficientDataError: If the series has fewer than two samples
        InconsistentStateError: If a labeled day has no temperature range
        ValueError: If width or height is not positive
    """
    forecast = as_forecast(series)
    if width <= 0 or height <= 0:
        raise ValueError(f"Graph size must be positive, got {width}x{height}")

    samples = forecast.samples
    spacing = (width - 1) / (len(samples) - 1)
    xs = [spacing * i for i in range(len(samples))]

    temp_low, temp_high = temperature_domain(forecast)
    temp_points = [
        (x, scale_to_height(s.temp_f, temp_low, temp_high, height)) for x, s in zip(xs, samples)
    ]
    rain_points = [(x, rain_to_height(s.rain_probability, height)) for x, s in zip(xs, samples)]

    image = Image.new("RGB", (width, height), WHITE)

    _draw_day_boundaries(image, forecast, xs, font, label_size)
    column_bottoms = _draw_rain_curve(image, rain_points)
    _shade_under_curve(image, column_bottoms)

    pixels = image.load()
    for start, end in zip(temp_points, temp_points[1:]):
        for offset in (1, 0, -1):
            draw_line(
                pixels,
                image.size,
                (start[0], start[1] + offset),
                (end[0], end[1] + offset),
                RED,
            )

    logger.debug(
        "Rendered %dx%d graph from %d samples (temp domain %.1f..%.1f)",
        width,
        height,
        len(samples),
        temp_low,
        temp_high,
    )
    return image


def _draw_day_boundaries(
    image: Image.Image, forecast: Forecast, xs: list[float], font: FontFace, label_size: float
) -> None:
    samples = forecast.samples
    last_day = samples[-1].timestamp.date()
    boundaries = [
        (x, current.timestamp.date())
        for x, previous, current in zip(xs[1:], samples, samples[1:])
        if previous.timestamp.date() != current.timestamp.date()
    ]

    pixels = image.load()
    for x, _day in boundaries:
        draw_line(pixels, image.size, (x, 0), (x, image.height), BLACK)

    for x, day in boundaries:
        if day == last_day:
            continue
        day_range = forecast.range_for(day)
        label = f"{WEEKDAY_INITIALS[day.weekday()]} {day_range.high} {day_range.low}"
        draw_text(image, label, x + DAY_LABEL_OFFSET, 0, font, label_size)


def _draw_rain_curve(image: Image.Image, points: list[Point]) -> list[Optional[int]]:
    """Draw the rain curve and return the lowest touched row of every column."""
    width, height = image.size
    pixels = image.load()
    column_bottoms: list[Optional[int]] = [None] * width

    for start, end in zip(points, points[1:]):
        for x, y in bresenham(start, end):
            x = int(_clamp(x, 0, width - 1))
            y = int(_clamp(y, 0, height - 1))
            bottom = column_bottoms[x]
            if bottom is None or y > bottom:
                column_bottoms[x] = y
            pixels[x, y] = BLACK

    return column_bottoms


def _shade_under_curve(image: Image.Image, column_bottoms: list[Optional[int]]) -> None:
    width, height = image.size
    # Untouched columns get a limit past the last row so nothing is shaded
    limits = np.array([height if b is None else b for b in column_bottoms])

    rows, cols = np.indices((height, width))
    row_phase = rows % HATCH_PERIOD
    col_phase = (cols + 2 * (rows // HATCH_PERIOD)) % HATCH_PERIOD
    hatch = ((col_phase == row_phase) | (col_phase == row_phase + 1)) & (row_phase < 3)
    below_curve = rows > limits[np.newaxis, :]

    pixels = np.array(image)
    pixels[hatch & below_curve] = BLACK
    image.paste(Image.fromarray(pixels))
