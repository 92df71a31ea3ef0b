"""Abstract base class shared by weather providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TypeVar

from pydantic import TypeAdapter

from weatherhub._http import DEFAULT_TIMEOUT, AsyncTransport
from weatherhub._params import build_query_params, validate_coordinates, validate_days
from weatherhub.exceptions import CapabilityUnsupported, MalformedPayload, MissingCredential
from weatherhub.models.air_quality import AirQualitySample
from weatherhub.models.current import CurrentConditions
from weatherhub.models.forecast import ForecastDay
from weatherhub.models.location import Location

MAX_FORECAST_DAYS = 5

T = TypeVar("T")


def validate_payload(model_type: type[T], data: Any) -> T:
    """Validate a decoded JSON body against a Pydantic model."""
    try:
        return TypeAdapter(model_type).validate_python(data)
    except Exception as exc:
        raise MalformedPayload(
            f"Failed to validate {getattr(model_type, '__name__', model_type)} payload: {exc}"
        ) from exc


class WeatherProvider(ABC):
    """One upstream weather API, normalized to the weatherhub models.

    Every capability issues exactly one GET. A blank API key fails fast with
    ``MissingCredential`` before any request is made.
    """

    name: str = "provider"
    key_param: str = "apikey"
    supports_geocoding: bool = False
    max_forecast_days: int = MAX_FORECAST_DAYS

    def __init__(
        self,
        api_key: str = "",
        *,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: AsyncTransport | None = None,
    ) -> None:
        self._api_key = api_key.strip()
        self._transport = transport or AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> WeatherProvider:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    @property
    def has_credential(self) -> bool:
        return bool(self._api_key)

    def _check_request(self, lat: float, lon: float, days: int | None = None) -> None:
        validate_coordinates(lat, lon)
        if days is not None:
            validate_days(days, self.max_forecast_days)
        if not self._api_key:
            raise MissingCredential(f"No API key configured for {self.name}")

    async def _get(self, endpoint: str, **kwargs: Any) -> Any:
        if not self._api_key:
            raise MissingCredential(f"No API key configured for {self.name}")
        params = build_query_params(**kwargs, **{self.key_param: self._api_key})
        return await self._transport.get(endpoint, params)

    # ── Capabilities ───────────────────────────────────────────

    @abstractmethod
    async def fetch_current(self, lat: float, lon: float) -> CurrentConditions: ...

    @abstractmethod
    async def fetch_forecast(self, lat: float, lon: float, days: int = MAX_FORECAST_DAYS) -> list[ForecastDay]: ...

    @abstractmethod
    async def fetch_air_quality(self, lat: float, lon: float) -> AirQualitySample: ...

    @abstractmethod
    async def fetch_uv(self, lat: float, lon: float) -> float: ...

    async def search_locations(self, query: str) -> list[Location]:
        """Geocode a free-text place name. Only some providers support this."""
        raise CapabilityUnsupported(f"{self.name} does not support location search")
