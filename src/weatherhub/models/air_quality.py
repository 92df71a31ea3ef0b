"""Air quality model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class AirQualitySample(BaseModel):
    """Air quality index and pollutant concentrations (μg/m³).

    ``aqi`` is a 1 (good) to 5 (very poor) band whichever provider answered;
    0 means unavailable.
    """

    model_config = ConfigDict(frozen=True)

    aqi: int = 0
    pm25: float = 0.0
    pm10: float = 0.0
    o3: float = 0.0
    no2: float = 0.0

    @classmethod
    def empty(cls) -> AirQualitySample:
        """All-zero sample used when no provider has data."""
        return cls()
