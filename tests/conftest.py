"""Shared fixtures for halldisplay tests."""

import logging
import os
from collections.abc import Callable, Iterator
from datetime import date, datetime, timedelta, timezone
from pathlib import Path

import pytest

from halldisplay.config import settings as settings_module
from halldisplay.models import CurrentWeather, DisplayData, Forecast, ForecastSample, Task
from halldisplay.rendering.text import FontFace
from halldisplay.utils.logging import PACKAGE_LOGGER

# Fixed offset keeps day boundaries independent of the host timezone database
EDT = timezone(timedelta(hours=-4))


def _make_samples(
    start: datetime, count: int, step_hours: int = 3, temps: tuple[int, ...] = (50, 55, 62, 58)
) -> list[ForecastSample]:
    """Build evenly spaced samples cycling through ``temps``."""
    return [
        ForecastSample(
            timestamp=start + timedelta(hours=step_hours * i),
            temp_f=temps[i % len(temps)],
            rain_probability=(i * 7) % 101,
        )
        for i in range(count)
    ]


@pytest.fixture
def make_samples() -> Callable[..., list[ForecastSample]]:
    """Factory for evenly spaced forecast samples."""
    return _make_samples


@pytest.fixture
def font() -> FontFace:
    """Pillow's bundled font face."""
    return FontFace()


@pytest.fixture
def fixed_now() -> datetime:
    """Saturday 2023-05-20, 3pm EDT."""
    return datetime(2023, 5, 20, 15, 0, tzinfo=EDT)


@pytest.fixture
def forecast_samples(fixed_now: datetime) -> list[ForecastSample]:
    """Five days of 3-hour samples starting at local midnight."""
    midnight = fixed_now.replace(hour=0)
    return _make_samples(midnight, 40)


@pytest.fixture
def forecast(forecast_samples: list[ForecastSample]) -> Forecast:
    """Forecast built from the five-day samples."""
    return Forecast(forecast_samples)


@pytest.fixture
def display_data(forecast: Forecast, fixed_now: datetime) -> DisplayData:
    """Complete screen data with unsorted tasks."""
    today = fixed_now.date()
    return DisplayData(
        current_weather=CurrentWeather(description="cloudy", temp_f=61, rain_in=0),
        forecast=forecast,
        tasks=[
            Task(description="water plants", due_date=today + timedelta(days=3)),
            Task(description="pay rent", due_date=today - timedelta(days=2)),
            Task(description="call mom", due_date=today),
        ],
    )


@pytest.fixture
def today() -> date:
    """Reference date for relative-date labels."""
    return date(2023, 5, 20)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Keep user config, HALLDISPLAY_* variables and CLI log handlers out of every test."""
    monkeypatch.setattr(settings_module, "DEFAULT_CONFIG_FILE", tmp_path / "no-config.yaml")
    for name in list(os.environ):
        if name.upper().startswith("HALLDISPLAY_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    settings_module.reset_settings()

    yield

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
