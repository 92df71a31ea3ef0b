"""Provider fallback, concurrent report assembly and location search."""

from __future__ import annotations

import asyncio
import functools
from collections.abc import Awaitable, Callable
from random import Random
from typing import TypeVar

from weatherhub._http import DEFAULT_TIMEOUT
from weatherhub._params import validate_coordinates, validate_days
from weatherhub._result import Err, Ok, Result, first_success, unwrap_or
from weatherhub.advice import generate_suggestion
from weatherhub.api_logging import get_logger, log_service_call
from weatherhub.credentials import CredentialStore, Credentials
from weatherhub.exceptions import NoProviderAvailable
from weatherhub.models.air_quality import AirQualitySample
from weatherhub.models.current import CurrentConditions
from weatherhub.models.location import Location
from weatherhub.models.report import ReportExtras, WeatherReport
from weatherhub.providers.base import MAX_FORECAST_DAYS, WeatherProvider
from weatherhub.providers.openweather import OpenWeatherProvider
from weatherhub.providers.tomorrow import TomorrowProvider

T = TypeVar("T")

MIN_QUERY_LENGTH = 2


def merge_extras(current: CurrentConditions, extras: ReportExtras) -> CurrentConditions:
    """Fold air quality and UV results into a copy of ``current``.

    A zero UV or AQI result means the slot degraded, so the provider's own
    value is kept.
    """
    update: dict[str, object] = {}
    if extras.air_quality.aqi:
        update["air_quality_index"] = extras.air_quality.aqi
    if extras.uv_index:
        update["uv_index"] = extras.uv_index
    return current.model_copy(update=update) if update else current


class WeatherAggregationService:
    """Builds one weather report out of a primary and a fallback provider.

    Each capability (current conditions, forecast, air quality, UV) tries the
    primary provider, then the fallback. The four chains run concurrently and
    degrade independently; only current conditions are mandatory.

    Usage:
        async with WeatherAggregationService(Credentials(fallback_key="...")) as weather:
            report = await weather.get_full_report(48.85, 2.35, days=5)
    """

    def __init__(
        self,
        credentials: Credentials | None = None,
        *,
        primary: WeatherProvider | None = None,
        fallback: WeatherProvider | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.credentials = credentials or Credentials()
        self._primary = primary or TomorrowProvider(self.credentials.primary_key, timeout=timeout)
        self._fallback = fallback or OpenWeatherProvider(self.credentials.fallback_key, timeout=timeout)

    @classmethod
    def from_store(cls, store: CredentialStore, **kwargs: object) -> WeatherAggregationService:
        """Build a service from the store's current credentials snapshot."""
        return cls(store.get(), **kwargs)  # type: ignore[arg-type]

    async def __aenter__(self) -> WeatherAggregationService:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the providers' HTTP connections."""
        await asyncio.gather(self._primary.close(), self._fallback.close())

    @property
    def providers(self) -> list[WeatherProvider]:
        """Providers in fallback order."""
        return [self._primary, self._fallback]

    def _chain(
        self,
        capability: str,
        call: Callable[[WeatherProvider], Awaitable[T]],
        providers: list[WeatherProvider] | None = None,
    ) -> Awaitable[Result[T]]:
        attempts = [functools.partial(call, p) for p in (self.providers if providers is None else providers)]
        return first_success(capability, attempts)

    # ── Public API ─────────────────────────────────────────────

    @log_service_call
    async def get_current(self, lat: float, lon: float) -> CurrentConditions:
        """Current conditions alone; raises NoProviderAvailable when exhausted."""
        validate_coordinates(lat, lon)
        result = await self._chain("current", lambda p: p.fetch_current(lat, lon))
        if isinstance(result, Err):
            raise result.error
        return result.value

    @log_service_call
    async def get_full_report(
        self, lat: float, lon: float, days: int = MAX_FORECAST_DAYS,
    ) -> WeatherReport:
        """Fetch all four capabilities concurrently and combine them.

        Forecast, air quality and UV degrade to empty/zero values. If no
        provider can supply current conditions, raises NoProviderAvailable
        whose ``extras`` still carries the other three slots.
        """
        validate_coordinates(lat, lon)
        validate_days(days, MAX_FORECAST_DAYS)

        current, forecast, air_quality, uv_index = await asyncio.gather(
            self._chain("current", lambda p: p.fetch_current(lat, lon)),
            self._chain("forecast", lambda p: p.fetch_forecast(lat, lon, days)),
            self._chain("air_quality", lambda p: p.fetch_air_quality(lat, lon)),
            self._chain("uv", lambda p: p.fetch_uv(lat, lon)),
        )

        logger = get_logger()
        for result in (forecast, air_quality, uv_index):
            if isinstance(result, Err):
                logger.warning("DEGRADED: %s", result.error)

        extras = ReportExtras(
            forecast=unwrap_or(forecast, []),
            air_quality=unwrap_or(air_quality, AirQualitySample.empty()),
            uv_index=unwrap_or(uv_index, 0),
        )
        if not isinstance(current, Ok):
            raise NoProviderAvailable("current", current.error.errors, extras=extras)

        return WeatherReport(
            current=merge_extras(current.value, extras),
            forecast=extras.forecast,
            air_quality=extras.air_quality,
            uv_index=extras.uv_index,
        )

    @log_service_call
    async def search_locations(self, query: str) -> list[Location]:
        """Geocode ``query``; short queries and failures give an empty list."""
        query = query.strip()
        if len(query) < MIN_QUERY_LENGTH:
            return []

        geocoders = [p for p in self.providers if p.supports_geocoding]
        result = await self._chain("search", lambda p: p.search_locations(query), geocoders)
        if isinstance(result, Err):
            get_logger().warning("DEGRADED: %s", result.error)
            return []
        return result.value

    def generate_suggestion(self, prompt: str, rng: Random | None = None) -> str:
        """Suggestion text gated on the assistant key."""
        return generate_suggestion(prompt, self.credentials, rng=rng)
