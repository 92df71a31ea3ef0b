"""Forecast models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, model_validator


class ForecastSample(BaseModel):
    """A single sub-daily provider sample, before bucketing."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    temperature: float
    condition: str
    precipitation: float = 0.0


class ForecastDay(BaseModel):
    """Daily forecast summary for one calendar date."""

    model_config = ConfigDict(frozen=True)

    date: str
    high_c: int
    low_c: int
    condition: str
    glyph: str
    precipitation_mm: float = 0.0

    @model_validator(mode="after")
    def _check_range(self) -> ForecastDay:
        if self.high_c < self.low_c:
            raise ValueError(f"high_c ({self.high_c}) is below low_c ({self.low_c})")
        return self
