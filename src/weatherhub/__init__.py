"""weatherhub: weather aggregation over Tomorrow.io and OpenWeatherMap."""

from weatherhub.conditions import to_canonical_condition, to_glyph
from weatherhub.credentials import CredentialStore, Credentials
from weatherhub.exceptions import (
    CapabilityUnsupported,
    MalformedPayload,
    MissingCredential,
    NoProviderAvailable,
    TransportError,
    TransportTimeout,
    UpstreamRejected,
    WeatherHubError,
)
from weatherhub.forecast import aggregate_daily
from weatherhub.models import (
    AirQualitySample,
    CurrentConditions,
    ForecastDay,
    ForecastSample,
    Location,
    ReportExtras,
    WeatherReport,
)
from weatherhub.providers import OpenWeatherProvider, TomorrowProvider, WeatherProvider
from weatherhub.service import WeatherAggregationService
from weatherhub.space import SpaceWeather, activity_severity, space_weather_tips

__all__ = [
    "AirQualitySample",
    "CapabilityUnsupported",
    "CredentialStore",
    "Credentials",
    "CurrentConditions",
    "ForecastDay",
    "ForecastSample",
    "Location",
    "MalformedPayload",
    "MissingCredential",
    "NoProviderAvailable",
    "OpenWeatherProvider",
    "ReportExtras",
    "SpaceWeather",
    "TomorrowProvider",
    "TransportError",
    "TransportTimeout",
    "UpstreamRejected",
    "WeatherAggregationService",
    "WeatherHubError",
    "WeatherProvider",
    "activity_severity",
    "aggregate_daily",
    "space_weather_tips",
    "to_canonical_condition",
    "to_glyph",
]

__version__ = "0.1.0"
