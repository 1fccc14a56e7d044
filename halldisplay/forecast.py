"""Bucketing of hourly forecast periods into graph samples."""

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .models import ForecastSample

logger = logging.getLogger(__name__)

DEFAULT_BUCKET_HOURS = 3


class HourlyPeriod(BaseModel):
    """One hour of a forecast as delivered by the weather service."""

    model_config = ConfigDict(frozen=True)

    start_time: datetime
    temp_f: int
    rain_probability: Optional[int] = Field(default=None, ge=0, le=100)


def average_periods(
    periods: Sequence[HourlyPeriod], bucket_hours: int = DEFAULT_BUCKET_HOURS
) -> list[ForecastSample]:
    """Average consecutive hourly periods into forecast samples.

    Each bucket is stamped with its first period's start time. Temperatures
    average with truncation toward zero, rain probabilities with floor
    division; a period without a rain probability counts as 0%. A short
    trailing bucket is averaged over the periods it has.

    Args:
        periods: Hourly periods in ascending time order
        bucket_hours: Periods per bucket

    Returns:
        Forecast samples, one per bucket

    Raises:
        ValueError: If bucket_hours is not positive
    """
    if bucket_hours <= 0:
        raise ValueError(f"bucket_hours must be positive, got {bucket_hours}")

    samples = []
    for start in range(0, len(periods), bucket_hours):
        bucket = periods[start : start + bucket_hours]
        count = len(bucket)
        total_temp = sum(p.temp_f for p in bucket)
        total_rain = sum(p.rain_probability or 0 for p in bucket)
        samples.append(
            ForecastSample(
                timestamp=bucket[0].start_time,
                temp_f=int(total_temp / count),
                rain_probability=total_rain // count,
            )
        )

    logger.debug("Averaged %d hourly periods into %d samples", len(periods), len(samples))
    return samples
