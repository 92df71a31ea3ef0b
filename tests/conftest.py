"""Shared test fixtures and sample provider responses."""

from __future__ import annotations

import logging

import pytest

TOMORROW_URL = "https://api.tomorrow.io/v4/timelines"
OPENWEATHER_URL = "https://api.openweathermap.org"


def tomorrow_timeline(*intervals: tuple[str, dict], timestep: str = "current") -> dict:
    """Wrap (startTime, values) pairs in a Timelines response envelope."""
    return {
        "data": {
            "timelines": [
                {
                    "timestep": timestep,
                    "startTime": intervals[0][0] if intervals else None,
                    "intervals": [
                        {"startTime": start, "values": values} for start, values in intervals
                    ],
                }
            ]
        }
    }


SAMPLE_TOMORROW_CURRENT = tomorrow_timeline(
    (
        "2026-10-19T12:00:00Z",
        {
            "temperature": 17.6,
            "weatherCode": 4200,
            "humidity": 71.4,
            "windSpeed": 10.0,
            "uvIndex": 3,
            "pressureSeaLevel": 1013.6,
            "visibility": 16.0,
            "moonPhase": 4,
        },
    )
)

SAMPLE_TOMORROW_HOURLY = tomorrow_timeline(
    ("2026-10-19T00:00:00Z", {"temperature": 10.0, "weatherCode": 1000, "precipitationIntensity": 0}),
    ("2026-10-19T12:00:00Z", {"temperature": 16.4, "weatherCode": 4001, "precipitationIntensity": 0.5}),
    ("2026-10-20T06:00:00Z", {"temperature": 8.5, "weatherCode": 1001, "precipitationIntensity": 0.25}),
    timestep="1h",
)

SAMPLE_TOMORROW_AIR = tomorrow_timeline(
    (
        "2026-10-19T12:00:00Z",
        {
            "epaIndex": 42,
            "particulateMatter25": 8.1,
            "particulateMatter10": 14.0,
            "pollutantO3": 31.5,
            "pollutantNO2": 12.2,
        },
    )
)

SAMPLE_TOMORROW_UV = tomorrow_timeline(("2026-10-19T12:00:00Z", {"uvIndex": 6}))

SAMPLE_OWM_CURRENT = {
    "coord": {"lon": 2.35, "lat": 48.85},
    "weather": [{"id": 804, "main": "Clouds", "description": "overcast clouds", "icon": "04n"}],
    "main": {"temp": 12.5, "feels_like": 11.9, "pressure": 1009, "humidity": 80},
    "visibility": 10000,
    "wind": {"speed": 4.1, "deg": 220},
    "dt": 1792368000,
    "name": "Paris",
}

SAMPLE_OWM_FORECAST = {
    "cod": "200",
    "cnt": 5,
    "list": [
        {"dt": 1792368000, "main": {"temp": 11.2}, "weather": [{"main": "Clouds"}]},
        {"dt": 1792378800, "main": {"temp": 9.8}, "weather": [{"main": "Rain"}], "rain": {"3h": 1.25}},
        {"dt": 1792443600, "main": {"temp": 14.6}, "weather": [{"main": "Clear"}]},
        {"dt": 1792454400, "main": {"temp": 7.5}, "weather": [{"main": "Snow"}], "snow": {"3h": 0.4}},
        {"dt": 1792540800, "main": {"temp": -2.5}, "weather": [{"main": "Clear"}]},
    ],
}

SAMPLE_OWM_AIR = {
    "coord": {"lon": 2.35, "lat": 48.85},
    "list": [
        {
            "main": {"aqi": 2},
            "components": {"co": 201.9, "no2": 15.3, "o3": 68.7, "pm2_5": 5.4, "pm10": 9.8},
            "dt": 1792368000,
        }
    ],
}

SAMPLE_OWM_UV = {"lat": 48.85, "lon": 2.35, "date": 1792368000, "value": 4.2}

SAMPLE_OWM_GEOCODING = [
    {"name": "Paris", "lat": 48.8589, "lon": 2.32, "country": "FR", "state": "Ile-de-France"},
    {"name": "Paris", "lat": 33.6609, "lon": -95.5555, "country": "US", "state": "Texas"},
]


@pytest.fixture(autouse=True)
def _log_to_tmp_path(tmp_path):
    """Send the API call log to tmp_path instead of the user's home."""
    import weatherhub.api_logging as mod

    old_logger = mod._logger
    old_dir = mod._LOG_DIR
    old_file = mod._LOG_FILE

    named_logger = logging.getLogger(mod.LOGGER_NAME)
    named_logger.handlers.clear()

    mod._logger = None
    mod._LOG_DIR = str(tmp_path)
    mod._LOG_FILE = str(tmp_path / "api_calls.log")

    yield tmp_path

    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    mod._logger = old_logger
    mod._LOG_DIR = old_dir
    mod._LOG_FILE = old_file
