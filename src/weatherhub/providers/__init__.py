"""Weather provider clients."""

from weatherhub.providers.base import MAX_FORECAST_DAYS, WeatherProvider
from weatherhub.providers.openweather import OpenWeatherProvider
from weatherhub.providers.tomorrow import TomorrowProvider

__all__ = [
    "MAX_FORECAST_DAYS",
    "OpenWeatherProvider",
    "TomorrowProvider",
    "WeatherProvider",
]
