"""Domain records handed to the renderer by the data-gathering side."""

import logging
from collections.abc import Iterable, Iterator
from datetime import date, datetime, timedelta
from functools import cached_property
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils.exceptions import InconsistentStateError, InsufficientDataError

logger = logging.getLogger(__name__)

# Samples at or past this distance from the first sample are dropped
FORECAST_WINDOW = timedelta(days=5)

# Daily lows only consider samples after this hour of the day
LOW_TEMP_AFTER_HOUR = 12

MIN_SAMPLES = 2


class ForecastSample(BaseModel):
    """One 3-hour-averaged forecast bucket."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(..., description="Bucket start, with a fixed UTC offset")
    temp_f: int = Field(..., description="Average temperature in Fahrenheit")
    rain_probability: int = Field(..., ge=0, le=100, description="Chance of rain, 0-100")

    @field_validator("timestamp")
    @classmethod
    def _require_offset(cls, value: datetime) -> datetime:
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError("forecast timestamps must carry a UTC offset")
        return value


class CurrentWeather(BaseModel):
    """Snapshot of the latest observation."""

    model_config = ConfigDict(frozen=True)

    description: str
    temp_f: int
    rain_in: int = Field(default=0, ge=0)


class Task(BaseModel):
    """A to-do item with a due date."""

    model_config = ConfigDict(frozen=True)

    description: str
    due_date: date


class TemperatureRange(BaseModel):
    """Low/high temperature pair."""

    model_config = ConfigDict(frozen=True)

    low: int
    high: int


class Forecast:
    """Forecast series plus the temperature aggregates derived from it.

    The aggregates are computed once per instance so the graph and the
    header always show the same numbers.
    """

    def __init__(self, samples: Iterable[ForecastSample]) -> None:
        """Initialize the forecast.

        Args:
            samples: Samples in ascending time order

        Raises:
            InsufficientDataError: If fewer than two samples remain after
                applying the 5-day window
        """
        samples = list(samples)
        if samples:
            start = samples[0].timestamp
            samples = [s for s in samples if s.timestamp - start < FORECAST_WINDOW]

        if len(samples) < MIN_SAMPLES:
            raise InsufficientDataError(len(samples), MIN_SAMPLES)

        self._samples = tuple(samples)

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[ForecastSample]:
        return iter(self._samples)

    def __repr__(self) -> str:
        return (
            f"Forecast(samples={len(self._samples)}, "
            f"start={self._samples[0].timestamp.isoformat()}, "
            f"end={self._samples[-1].timestamp.isoformat()})"
        )

    @property
    def samples(self) -> tuple[ForecastSample, ...]:
        """Samples inside the forecast window."""
        return self._samples

    @cached_property
    def daily_ranges(self) -> dict[date, TemperatureRange]:
        """Per-day temperature range keyed by the sample's local calendar date.

        The high is the maximum over every sample of the day. The low only
        looks at afternoon/evening samples (hour > 12) so the overnight
        minimum does not bleed into the day's label. Days without any such
        sample are left out.

        Returns:
            Mapping of date to TemperatureRange
        """
        highs: dict[date, int] = {}
        lows: dict[date, int] = {}

        for sample in self._samples:
            day = sample.timestamp.date()
            highs[day] = max(highs.get(day, sample.temp_f), sample.temp_f)
            if sample.timestamp.hour > LOW_TEMP_AFTER_HOUR:
                lows[day] = min(lows.get(day, sample.temp_f), sample.temp_f)

        ranges = {
            day: TemperatureRange(low=lows[day], high=high)
            for day, high in highs.items()
            if day in lows
        }
        logger.debug("Computed daily ranges for %d of %d days", len(ranges), len(highs))
        return ranges

    @cached_property
    def week_range(self) -> TemperatureRange:
        """Minimum and maximum temperature over the whole series."""
        temps = [s.temp_f for s in self._samples]
        return TemperatureRange(low=min(temps), high=max(temps))

    def range_for(self, day: date) -> TemperatureRange:
        """Look up the temperature range of one day.

        Args:
            day: Calendar date

        Returns:
            The day's TemperatureRange

        Raises:
            InconsistentStateError: If the day has no complete range
        """
        day_range = self.daily_ranges.get(day)
        if day_range is None:
            raise InconsistentStateError(f"daily min/max not found for {day.isoformat()}")
        return day_range


class DisplayData(BaseModel):
    """Everything one render pass needs."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    current_weather: CurrentWeather
    forecast: Forecast
    tasks: list[Task] = Field(default_factory=list)

    @field_validator("forecast", mode="before")
    @classmethod
    def _wrap_forecast(cls, value: object) -> object:
        if isinstance(value, Forecast):
            return value
        return Forecast(value)  # type: ignore[arg-type]

    def sorted_tasks(self) -> list[Task]:
        """Tasks ordered by due date, ties kept in input order."""
        return sorted(self.tasks, key=lambda task: task.due_date)


def as_forecast(series: Union[Forecast, Iterable[ForecastSample]]) -> Forecast:
    """Return ``series`` as a Forecast, wrapping plain sample sequences."""
    if isinstance(series, Forecast):
        return series
    return Forecast(series)

