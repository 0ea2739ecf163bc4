from __future__ import annotations

import pytest

from requests_mock import Mocker

from weather_search.config import FORECAST_URL, GEOCODING_URL


TOKYO_GEOCODE = {
    "results": [
        {
            "id": 1850147,
            "name": "Tokyo",
            "latitude": 35.68,
            "longitude": 139.69,
            "country": "Japan",
        }
    ],
    "generationtime_ms": 0.6,
}

TOKYO_WEATHER = {
    "latitude": 35.7,
    "longitude": 139.6875,
    "timezone": "Asia/Tokyo",
    "current_units": {
        "time": "iso8601",
        "temperature_2m": "°C",
        "relative_humidity_2m": "%",
        "weather_code": "wmo code",
        "wind_speed_10m": "km/h",
        "wind_direction_10m": "°",
    },
    "current": {
        "time": "2024-05-01T12:00",
        "interval": 900,
        "temperature_2m": 20,
        "relative_humidity_2m": 55,
        "weather_code": 1,
        "wind_speed_10m": 10,
        "wind_direction_10m": 90,
    },
}


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def tokyo_api(requests_mock):
    requests_mock.get(GEOCODING_URL, json=TOKYO_GEOCODE)
    requests_mock.get(FORECAST_URL, json=TOKYO_WEATHER)
    return requests_mock
