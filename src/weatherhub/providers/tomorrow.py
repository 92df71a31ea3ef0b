"""Tomorrow.io provider (primary).

API docs: https://docs.tomorrow.io/reference/timelines
All requests go through the Timelines endpoint with ``units=metric``, so
temperatures arrive in °C, wind in m/s and visibility in km.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Any

from pydantic import BaseModel, Field

from weatherhub._http import DEFAULT_TIMEOUT, AsyncTransport
from weatherhub.api_logging import log_provider_call
from weatherhub.conditions import describe_code, moon_phase_name, to_canonical_condition, to_glyph
from weatherhub.exceptions import MalformedPayload
from weatherhub.forecast import aggregate_daily
from weatherhub.models.air_quality import AirQualitySample
from weatherhub.models.current import CurrentConditions
from weatherhub.models.forecast import ForecastDay, ForecastSample
from weatherhub.providers.base import MAX_FORECAST_DAYS, WeatherProvider, validate_payload
from weatherhub.units import ms_to_mph, round_half_away

TOMORROW_BASE_URL = "https://api.tomorrow.io/v4"
TIMELINES_ENDPOINT = "/timelines"

CURRENT_FIELDS = [
    "temperature",
    "weatherCode",
    "humidity",
    "windSpeed",
    "uvIndex",
    "pressureSeaLevel",
    "visibility",
    "moonPhase",
]
HOURLY_FIELDS = ["temperature", "weatherCode", "precipitationIntensity"]
AIR_QUALITY_FIELDS = [
    "epaIndex",
    "particulateMatter25",
    "particulateMatter10",
    "pollutantO3",
    "pollutantNO2",
]
UV_FIELDS = ["uvIndex"]


# ── Raw payload shapes ─────────────────────────────────────────


class _Interval(BaseModel):
    start_time: datetime = Field(alias="startTime")
    values: dict[str, Any]


class _Timeline(BaseModel):
    timestep: str = ""
    intervals: list[_Interval] = Field(min_length=1)


class _TimelineData(BaseModel):
    timelines: list[_Timeline] = Field(min_length=1)


class _TimelinesResponse(BaseModel):
    data: _TimelineData


class _CurrentValues(BaseModel):
    temperature: float
    weather_code: int | None = Field(None, alias="weatherCode")
    humidity: float
    wind_speed: float = Field(alias="windSpeed")
    uv_index: float | None = Field(None, alias="uvIndex")
    pressure_sea_level: float | None = Field(None, alias="pressureSeaLevel")
    visibility: float | None = None
    moon_phase: int | None = Field(None, alias="moonPhase")


class _HourlyValues(BaseModel):
    temperature: float
    weather_code: int | None = Field(None, alias="weatherCode")
    precipitation_intensity: float | None = Field(None, alias="precipitationIntensity")


class _AirQualityValues(BaseModel):
    epa_index: float | None = Field(None, alias="epaIndex")
    pm25: float | None = Field(None, alias="particulateMatter25")
    pm10: float | None = Field(None, alias="particulateMatter10")
    o3: float | None = Field(None, alias="pollutantO3")
    no2: float | None = Field(None, alias="pollutantNO2")


class _UvValues(BaseModel):
    uv_index: float | None = Field(None, alias="uvIndex")


def _intervals(data: Any) -> list[_Interval]:
    return validate_payload(_TimelinesResponse, data).data.timelines[0].intervals


# Upper bound of each EPA index band, mapped onto the 1-5 scale
_EPA_BANDS = ((50, 1), (100, 2), (150, 3), (200, 4))


def epa_index_to_band(epa_index: float) -> int:
    """Bucket a 0-500 EPA AQI into the 1 (good) to 5 (very poor) band."""
    value = round_half_away(epa_index)
    for upper, band in _EPA_BANDS:
        if value <= upper:
            return band
    return 5


class TomorrowProvider(WeatherProvider):
    """Tomorrow.io Timelines client.

    Usage:
        async with TomorrowProvider(api_key="...") as primary:
            now = await primary.fetch_current(48.85, 2.35)
    """

    name = "tomorrow.io"
    key_param = "apikey"

    def __init__(
        self,
        api_key: str = "",
        *,
        base_url: str = TOMORROW_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: AsyncTransport | None = None,
        tz: tzinfo | None = None,
    ) -> None:
        super().__init__(api_key, base_url=base_url, timeout=timeout, transport=transport)
        self._tz = tz

    async def _timelines(self, lat: float, lon: float, fields: list[str], **kwargs: Any) -> list[_Interval]:
        data = await self._get(
            TIMELINES_ENDPOINT,
            location=f"{lat},{lon}",
            fields=fields,
            units="metric",
            **kwargs,
        )
        return _intervals(data)

    @log_provider_call
    async def fetch_current(self, lat: float, lon: float) -> CurrentConditions:
        """Get current conditions from the ``current`` timestep."""
        self._check_request(lat, lon)
        intervals = await self._timelines(lat, lon, CURRENT_FIELDS, timesteps="current")
        values = validate_payload(_CurrentValues, intervals[0].values)

        condition = to_canonical_condition(values.weather_code)
        return CurrentConditions(
            location_label=f"{lat:.2f}, {lon:.2f}",
            temperature_c=round_half_away(values.temperature),
            condition=condition,
            humidity_pct=round_half_away(values.humidity),
            wind_speed_mph=ms_to_mph(values.wind_speed),
            glyph=to_glyph(condition),
            description=f"{describe_code(values.weather_code)} weather today",
            uv_index=values.uv_index or 0,
            pressure_hpa=round_half_away(values.pressure_sea_level or 0),
            visibility_km=round_half_away(values.visibility or 0),
            moon_phase=moon_phase_name(values.moon_phase),
        )

    @log_provider_call
    async def fetch_forecast(self, lat: float, lon: float, days: int = MAX_FORECAST_DAYS) -> list[ForecastDay]:
        """Get hourly samples for ``days`` days and bucket them by date."""
        self._check_request(lat, lon, days)
        intervals = await self._timelines(
            lat, lon, HOURLY_FIELDS, timesteps="1h", endTime=f"nowPlus{days}d",
        )
        samples = []
        for interval in intervals:
            values = validate_payload(_HourlyValues, interval.values)
            samples.append(
                ForecastSample(
                    timestamp=interval.start_time,
                    temperature=values.temperature,
                    condition=to_canonical_condition(values.weather_code),
                    # mm/hr over a one-hour step
                    precipitation=values.precipitation_intensity or 0.0,
                )
            )
        return aggregate_daily(samples, days=days, tz=self._tz)

    @log_provider_call
    async def fetch_air_quality(self, lat: float, lon: float) -> AirQualitySample:
        """Get the EPA index, as a 1-5 band, and pollutant concentrations."""
        self._check_request(lat, lon)
        intervals = await self._timelines(lat, lon, AIR_QUALITY_FIELDS, timesteps="current")
        values = validate_payload(_AirQualityValues, intervals[0].values)
        if values.epa_index is None:
            raise MalformedPayload("Air quality payload has no epaIndex")
        return AirQualitySample(
            aqi=epa_index_to_band(values.epa_index),
            pm25=values.pm25 or 0.0,
            pm10=values.pm10 or 0.0,
            o3=values.o3 or 0.0,
            no2=values.no2 or 0.0,
        )

    @log_provider_call
    async def fetch_uv(self, lat: float, lon: float) -> float:
        """Get the current UV index."""
        self._check_request(lat, lon)
        intervals = await self._timelines(lat, lon, UV_FIELDS, timesteps="current")
        values = validate_payload(_UvValues, intervals[0].values)
        if values.uv_index is None:
            raise MalformedPayload("UV payload has no uvIndex")
        return values.uv_index
