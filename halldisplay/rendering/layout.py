"""Full-screen layout: header, task list and forecast graph.

One call to :func:`render` builds a fresh canvas, draws everything, snaps
the canvas onto the panel palette and packs it into a frame buffer. The
wall clock is read once at the start of the pass so every relative date
on the screen agrees with the clock text.
"""

import logging
from datetime import date, datetime, timedelta, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo

from PIL import Image

from ..config.settings import LayoutConfig
from ..epaper.capabilities import WAVESHARE_7IN5B_V2, DisplayCapabilities
from ..epaper.packing import FrameBuffer, pack
from ..epaper.palette import RED, WHITE, quantize
from ..models import CurrentWeather, DisplayData, Forecast, Task, TemperatureRange
from .graph import render_graph
from .text import FontFace, draw_text, draw_text_bottom_right, draw_text_right, measure_text

logger = logging.getLogger(__name__)


def resolve_timezone(local_timezone: Union[str, tzinfo]) -> tzinfo:
    """Accept either a tzinfo or an IANA name such as ``America/New_York``."""
    if isinstance(local_timezone, str):
        return ZoneInfo(local_timezone)
    return local_timezone


def describe_due_date(due_date: date, today: date) -> str:
    """Short relative label for a task's due date.

    Args:
        due_date: Task due date
        today: Current local date

    Returns:
        "yesterday" for anything overdue, "today", "tomorrow", otherwise
        month/day without zero padding (e.g. "5/25")
    """
    if due_date < today:
        return "yesterday"
    if due_date == today:
        return "today"
    if due_date == today + timedelta(days=1):
        return "tomorrow"
    return f"{due_date.month}/{due_date.day}"


def format_clock(now: datetime) -> str:
    """Clock text such as ``5/20  3pm``."""
    hour = now.hour % 12 or 12
    suffix = "am" if now.hour < 12 else "pm"
    return f"{now.month}/{now.day}  {hour}{suffix}"


def render(
    local_timezone: Union[str, tzinfo],
    display_data: DisplayData,
    *,
    now: Optional[datetime] = None,
    font: Optional[FontFace] = None,
    config: Optional[LayoutConfig] = None,
    capabilities: Optional[DisplayCapabilities] = None,
) -> tuple[FrameBuffer, Image.Image]:
    """Render the status screen.

    Args:
        local_timezone: Timezone for the clock and relative dates
        display_data: Current conditions, forecast and tasks
        now: Moment to render for; defaults to the current time
        font: Font face for all text; Pillow's bundled face when omitted
        config: Layout constants; defaults match the 800x480 panel
        capabilities: Panel the buffer is packed for; red content is packed
            as black when the panel lacks the chromatic color

    Returns:
        (buffer, image): the packed frame buffer and the quantized RGB
        canvas for diagnostics

    Raises:
        InconsistentStateError: If today has no temperature range in the forecast
        InsufficientDataError: If the forecast is too short to graph
    """
    tz = resolve_timezone(local_timezone)
    now = datetime.now(tz) if now is None else now.astimezone(tz)
    font = font or FontFace()
    config = config or LayoutConfig()
    capabilities = capabilities or WAVESHARE_7IN5B_V2

    forecast = display_data.forecast
    today = now.date()
    # Looked up before drawing so a bad forecast aborts without a partial image
    today_range = forecast.range_for(today)

    canvas = Image.new("RGB", (config.canvas_width, config.canvas_height), WHITE)

    _draw_header(canvas, display_data.current_weather, forecast, today_range, now, font, config)
    _draw_tasks(canvas, display_data.sorted_tasks(), today, font, config)

    region = config.graph_region
    graph = render_graph(
        forecast, region.width, region.height, font, label_size=config.day_label_size
    )
    canvas.paste(graph, (region.x, region.y))

    quantize(canvas)
    buffer = pack(canvas, capabilities.width, capabilities.height, capabilities.supports_red)

    logger.debug("Rendered frame for %s: %d bytes", now.isoformat(), len(buffer))
    return buffer, canvas


def _draw_header(
    canvas: Image.Image,
    weather: CurrentWeather,
    forecast: Forecast,
    today_range: TemperatureRange,
    now: datetime,
    font: FontFace,
    config: LayoutConfig,
) -> None:
    temp_text = f"{weather.temp_f}°"
    temp_width, temp_height = measure_text(font, temp_text, config.current_temp_size)
    temp_x = config.current_temp_x
    temp_y = config.current_temp_y

    draw_text(canvas, temp_text, temp_x, temp_y, font, config.current_temp_size)
    draw_text(
        canvas,
        weather.description,
        temp_x + temp_width + config.description_gap,
        temp_y + temp_height / 2,
        font,
        config.description_size,
    )
    draw_text(
        canvas,
        f"{today_range.high}° {today_range.low}°",
        temp_x + temp_width + config.today_temps_gap,
        config.today_temps_y,
        font,
        config.header_size,
    )
    draw_text_right(
        canvas, format_clock(now), config.time_right_x, config.time_y, font, config.header_size
    )

    # Week extremes beside the graph's top and bottom edges
    region = config.graph_region
    scale_x = region.x - config.graph_scale_gap
    week = forecast.week_range
    draw_text_right(canvas, str(week.high), scale_x, region.y, font, config.graph_scale_size, RED)
    draw_text_bottom_right(
        canvas, str(week.low), scale_x, region.bottom, font, config.graph_scale_size, RED
    )


def _draw_tasks(
    canvas: Image.Image, tasks: list[Task], today: date, font: FontFace, config: LayoutConfig
) -> None:
    y = config.task_start_y
    for index, task in enumerate(tasks):
        draw_text(
            canvas,
            describe_due_date(task.due_date, today),
            config.task_date_x,
            y,
            font,
            config.task_size,
        )
        draw_text(canvas, task.description, config.task_description_x, y, font, config.task_size)
        y += config.task_row_height

        if y >= config.canvas_height:
            dropped = len(tasks) - index - 1
            if dropped:
                logger.debug("%d tasks did not fit on screen", dropped)
            break
