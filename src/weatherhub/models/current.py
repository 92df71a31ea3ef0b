"""Current conditions model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CurrentConditions(BaseModel):
    """Normalized current conditions at a location."""

    model_config = ConfigDict(frozen=True)

    location_label: str
    temperature_c: int
    condition: str
    humidity_pct: int
    wind_speed_mph: int
    glyph: str
    description: str = ""
    uv_index: float = 0
    air_quality_index: int = 0
    pressure_hpa: int = 0
    visibility_km: int = 0
    moon_phase: str = ""
