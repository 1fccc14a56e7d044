"""Deterministic demonstration data for previews and smoke runs."""

import math
from datetime import datetime, timedelta

from .forecast import HourlyPeriod, average_periods
from .models import CurrentWeather, DisplayData, Forecast, Task

SAMPLE_DAYS = 5


def sample_periods(start: datetime, days: int = SAMPLE_DAYS) -> list[HourlyPeriod]:
    """Hourly periods with a daily temperature swing and a passing rain band.

    Args:
        start: Aware datetime of the first period
        days: Number of days to generate

    Returns:
        ``days * 24`` hourly periods
    """
    periods = []
    for hour in range(days * 24):
        moment = start + timedelta(hours=hour)
        # Coldest around 5am, warmest around 5pm, slowly warming through the week
        swing = -math.cos((moment.hour - 5) / 24 * 2 * math.pi)
        temp_f = round(58 + 12 * swing + hour / 24)
        rain = max(0, min(100, round(90 * math.sin(hour / (days * 24) * 3 * math.pi))))
        periods.append(HourlyPeriod(start_time=moment, temp_f=temp_f, rain_probability=rain))
    return periods


def sample_display_data(now: datetime) -> DisplayData:
    """Build a full screen's worth of data anchored at ``now``.

    The forecast starts at local midnight of ``now`` so today always has a
    temperature range. Tasks are deliberately not in due-date order.

    Args:
        now: Aware datetime in the display's local timezone

    Returns:
        DisplayData ready to render
    """
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    forecast = Forecast(average_periods(sample_periods(midnight)))

    today = now.date()
    tasks = [
        Task(description="test task", due_date=today),
        Task(description="task 2", due_date=today - timedelta(days=1)),
        Task(description="task 3", due_date=today + timedelta(days=1)),
    ]

    return DisplayData(
        current_weather=CurrentWeather(description="test data", temp_f=69, rain_in=0),
        forecast=forecast,
        tasks=tasks,
    )
