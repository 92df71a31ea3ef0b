"""OpenWeatherMap provider (fallback, and the only geocoder).

API docs:
  - Current: https://openweathermap.org/current
  - 5 day / 3 hour forecast: https://openweathermap.org/forecast5
  - Air pollution: https://openweathermap.org/api/air-pollution
  - Geocoding: https://openweathermap.org/api/geocoding-api
"""

from __future__ import annotations

from datetime import datetime, tzinfo

from pydantic import BaseModel, Field

from weatherhub._http import DEFAULT_TIMEOUT, AsyncTransport
from weatherhub.api_logging import log_provider_call
from weatherhub.conditions import to_canonical_condition, to_glyph
from weatherhub.forecast import aggregate_daily
from weatherhub.models.air_quality import AirQualitySample
from weatherhub.models.current import CurrentConditions
from weatherhub.models.forecast import ForecastDay, ForecastSample
from weatherhub.models.location import Location
from weatherhub.providers.base import MAX_FORECAST_DAYS, WeatherProvider, validate_payload
from weatherhub.units import meters_to_km, ms_to_mph, round_half_away

OPENWEATHER_BASE_URL = "https://api.openweathermap.org"
CURRENT_ENDPOINT = "/data/2.5/weather"
FORECAST_ENDPOINT = "/data/2.5/forecast"
AIR_POLLUTION_ENDPOINT = "/data/2.5/air_pollution"
UV_ENDPOINT = "/data/2.5/uvi"
GEOCODING_ENDPOINT = "/geo/1.0/direct"

SAMPLES_PER_DAY = 8  # 3-hour cadence
GEOCODING_LIMIT = 5


# ── Raw payload shapes ─────────────────────────────────────────


class _Weather(BaseModel):
    main: str
    description: str = ""
    icon: str = ""


class _CurrentMain(BaseModel):
    temp: float
    humidity: float
    pressure: float | None = None


class _Wind(BaseModel):
    speed: float


class _CurrentResponse(BaseModel):
    name: str = ""
    main: _CurrentMain
    weather: list[_Weather] = Field(min_length=1)
    wind: _Wind
    visibility: float | None = None


class _Precipitation(BaseModel):
    three_hours: float = Field(0.0, alias="3h")


class _ForecastMain(BaseModel):
    temp: float


class _ForecastItem(BaseModel):
    dt: datetime
    main: _ForecastMain
    weather: list[_Weather] = Field(min_length=1)
    rain: _Precipitation | None = None
    snow: _Precipitation | None = None

    @property
    def precipitation(self) -> float:
        """Rain over the 3-hour window, else snow, else zero."""
        for amount in (self.rain, self.snow):
            if amount is not None and amount.three_hours:
                return amount.three_hours
        return 0.0


class _ForecastResponse(BaseModel):
    items: list[_ForecastItem] = Field(alias="list")


class _AirMain(BaseModel):
    aqi: int


class _AirComponents(BaseModel):
    pm2_5: float = 0.0
    pm10: float = 0.0
    o3: float = 0.0
    no2: float = 0.0


class _AirItem(BaseModel):
    main: _AirMain
    components: _AirComponents = Field(default_factory=_AirComponents)


class _AirResponse(BaseModel):
    items: list[_AirItem] = Field(alias="list", min_length=1)


class _UvResponse(BaseModel):
    value: float


class _GeocodingItem(BaseModel):
    name: str
    lat: float
    lon: float
    country: str = ""


class OpenWeatherProvider(WeatherProvider):
    """OpenWeatherMap client.

    Usage:
        async with OpenWeatherProvider(api_key="...") as fallback:
            days = await fallback.fetch_forecast(48.85, 2.35, days=3)
    """

    name = "openweathermap"
    key_param = "appid"
    supports_geocoding = True

    def __init__(
        self,
        api_key: str = "",
        *,
        base_url: str = OPENWEATHER_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: AsyncTransport | None = None,
        tz: tzinfo | None = None,
    ) -> None:
        super().__init__(api_key, base_url=base_url, timeout=timeout, transport=transport)
        self._tz = tz

    @log_provider_call
    async def fetch_current(self, lat: float, lon: float) -> CurrentConditions:
        """Get current conditions; the payload carries its own place name."""
        self._check_request(lat, lon)
        data = await self._get(CURRENT_ENDPOINT, lat=lat, lon=lon, units="metric")
        payload = validate_payload(_CurrentResponse, data)

        weather = payload.weather[0]
        condition = to_canonical_condition(weather.main)
        is_daytime = not weather.icon.endswith("n")
        return CurrentConditions(
            location_label=payload.name or f"{lat:.2f}, {lon:.2f}",
            temperature_c=round_half_away(payload.main.temp),
            condition=condition,
            humidity_pct=round_half_away(payload.main.humidity),
            wind_speed_mph=ms_to_mph(payload.wind.speed),
            glyph=to_glyph(condition, is_daytime),
            description=weather.description,
            pressure_hpa=round_half_away(payload.main.pressure or 0),
            visibility_km=meters_to_km(payload.visibility) if payload.visibility else 0,
        )

    @log_provider_call
    async def fetch_forecast(self, lat: float, lon: float, days: int = MAX_FORECAST_DAYS) -> list[ForecastDay]:
        """Get 3-hour samples for ``days`` days and bucket them by date."""
        self._check_request(lat, lon, days)
        data = await self._get(
            FORECAST_ENDPOINT, lat=lat, lon=lon, units="metric", cnt=days * SAMPLES_PER_DAY,
        )
        payload = validate_payload(_ForecastResponse, data)
        samples = [
            ForecastSample(
                timestamp=item.dt,
                temperature=item.main.temp,
                condition=to_canonical_condition(item.weather[0].main),
                precipitation=item.precipitation,
            )
            for item in payload.items
        ]
        return aggregate_daily(samples, days=days, tz=self._tz)

    @log_provider_call
    async def fetch_air_quality(self, lat: float, lon: float) -> AirQualitySample:
        """Get the air quality index (1-5) and pollutant concentrations."""
        self._check_request(lat, lon)
        data = await self._get(AIR_POLLUTION_ENDPOINT, lat=lat, lon=lon)
        item = validate_payload(_AirResponse, data).items[0]
        return AirQualitySample(
            aqi=item.main.aqi,
            pm25=item.components.pm2_5,
            pm10=item.components.pm10,
            o3=item.components.o3,
            no2=item.components.no2,
        )

    @log_provider_call
    async def fetch_uv(self, lat: float, lon: float) -> float:
        """Get the current UV index."""
        self._check_request(lat, lon)
        data = await self._get(UV_ENDPOINT, lat=lat, lon=lon)
        return validate_payload(_UvResponse, data).value

    @log_provider_call
    async def search_locations(self, query: str) -> list[Location]:
        """Geocode ``query`` into up to five candidate places."""
        data = await self._get(GEOCODING_ENDPOINT, q=query, limit=GEOCODING_LIMIT)
        items = validate_payload(list[_GeocodingItem], data)
        return [
            Location(name=item.name, lat=item.lat, lon=item.lon, country=item.country)
            for item in items
        ]
