"""weatherhub data models."""

from weatherhub.models.air_quality import AirQualitySample
from weatherhub.models.current import CurrentConditions
from weatherhub.models.forecast import ForecastDay, ForecastSample
from weatherhub.models.location import Location
from weatherhub.models.report import ReportExtras, WeatherReport

__all__ = [
    "AirQualitySample",
    "CurrentConditions",
    "ForecastDay",
    "ForecastSample",
    "Location",
    "ReportExtras",
    "WeatherReport",
]
