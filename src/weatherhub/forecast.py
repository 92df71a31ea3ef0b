"""Bucketing of sub-daily forecast samples into daily summaries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import tzinfo

from weatherhub.conditions import to_glyph
from weatherhub.models.forecast import ForecastDay, ForecastSample
from weatherhub.units import round_half_away


@dataclass
class _DayBucket:
    condition: str
    temps: list[float] = field(default_factory=list)
    precipitation: float = 0.0


def aggregate_daily(
    samples: Iterable[ForecastSample],
    days: int | None = None,
    tz: tzinfo | None = None,
) -> list[ForecastDay]:
    """Group samples by calendar date and summarize each day.

    Dates are taken in ``tz`` (the local zone when ``None``). Days keep the
    order in which they were first seen and the representative condition is
    that of the first sample of the day. High and low are rounded only here,
    after aggregation.

    Args:
        samples: Sub-daily samples in provider order, any cadence.
        days: Keep at most this many days. ``None`` keeps all.
        tz: Time zone used to derive the calendar date.

    Returns:
        One ForecastDay per distinct date, truncated to ``days``.
    """
    buckets: dict[str, _DayBucket] = {}
    for sample in samples:
        date = sample.timestamp.astimezone(tz).date().isoformat()
        bucket = buckets.get(date)
        if bucket is None:
            bucket = buckets[date] = _DayBucket(condition=sample.condition)
        bucket.temps.append(sample.temperature)
        bucket.precipitation += sample.precipitation

    dates = list(buckets)
    if days is not None:
        dates = dates[:days]

    return [
        ForecastDay(
            date=date,
            high_c=round_half_away(max(buckets[date].temps)),
            low_c=round_half_away(min(buckets[date].temps)),
            condition=buckets[date].condition,
            glyph=to_glyph(buckets[date].condition),
            precipitation_mm=round_half_away(buckets[date].precipitation * 100) / 100,
        )
        for date in dates
    ]
