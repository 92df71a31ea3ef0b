"""Combined weather report models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from weatherhub.models.air_quality import AirQualitySample
from weatherhub.models.current import CurrentConditions
from weatherhub.models.forecast import ForecastDay


class ReportExtras(BaseModel):
    """Best-effort enrichment data; every field degrades to empty/zero."""

    model_config = ConfigDict(frozen=True)

    forecast: list[ForecastDay] = Field(default_factory=list)
    air_quality: AirQualitySample = Field(default_factory=AirQualitySample.empty)
    uv_index: float = 0


class WeatherReport(ReportExtras):
    """Full report handed to the caller."""

    current: CurrentConditions
