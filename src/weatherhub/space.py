"""Space weather summary model and derived viewing/impact tips."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SolarFlare(BaseModel):
    model_config = ConfigDict(frozen=True)

    flare_class: str = Field(alias="class")
    peak_time: str = Field(alias="peakTime")
    region: str


class AuroraForecast(BaseModel):
    model_config = ConfigDict(frozen=True)

    visibility: str = "Not Visible"
    locations: list[str] = Field(default_factory=list)


class SpaceWeather(BaseModel):
    """Solar and geomagnetic activity snapshot."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    solar_activity: str = Field("Low", alias="solarActivity")
    geomagnetic_activity: str = Field("Quiet", alias="geomagneticActivity")
    solar_wind_speed: float = Field(0.0, alias="solarWindSpeed")  # km/s
    kp_index: int = Field(0, alias="kpIndex", ge=0, le=9)
    solar_flares: list[SolarFlare] = Field(default_factory=list, alias="solarFlares")
    satellite_disruption: str = Field("None", alias="satelliteDisruption")
    aurora_forecast: AuroraForecast = Field(default_factory=AuroraForecast, alias="auroraForecast")


_SEVERITY: dict[str, str] = {
    "Low": "low",
    "Quiet": "low",
    "None": "low",
    "Moderate": "moderate",
    "Unsettled": "moderate",
    "Minor": "moderate",
    "Active": "elevated",
    "High": "high",
    "Minor Storm": "high",
    "Severe": "severe",
}

STORM_KP_THRESHOLD = 5


def activity_severity(label: str) -> str:
    """Map an activity label to a severity level; unrecognised gives "unknown"."""
    return _SEVERITY.get(label, "unknown")


def space_weather_tips(data: SpaceWeather) -> list[str]:
    """Human-readable tips for the current space weather."""
    tips: list[str] = []

    if data.kp_index >= STORM_KP_THRESHOLD:
        tips.append("🛰️ Possible GPS and satellite communication disruptions")
        tips.append("📡 Radio blackouts may affect aviation and marine communications")

    if data.aurora_forecast.visibility in ("Likely", "Very Likely"):
        tips.append("🌌 Great aurora viewing conditions tonight! Look north after sunset")

    if data.solar_activity == "High":
        tips.append("☀️ Increased solar radiation - astronauts take extra precautions")
        tips.append("⚡ Power grid operators monitor for potential fluctuations")

    if not tips:
        tips.append("🌌 Calm space weather conditions - perfect for stargazing!")

    return tips
