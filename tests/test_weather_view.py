from __future__ import annotations

import requests
from django.test import Client

from tests.conftest import TOKYO_GEOCODE
from weather_search.config import FORECAST_URL, GEOCODING_URL


def test_search_endpoint_returns_rendered_view(tokyo_api) -> None:
    client = Client()
    response = client.get("/api/weather/search", {"q": "Tokyo"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["view"]["title"] == "Tokyo, Japan"
    assert payload["view"]["condition"] == "Mainly clear"
    assert payload["view"]["humidity"] == "55%"
    assert payload["view"]["wind"] == "10 km/h E"
    assert payload["record"]["location"]["latitude"] == 35.68
    assert payload["record"]["weather"]["weather_code"] == 1


def test_search_endpoint_rejects_blank_query(requests_mock) -> None:
    client = Client()
    response = client.get("/api/weather/search", {"q": "   "})

    assert response.status_code == 400
    assert response.json() == {"error": "empty_query", "detail": "Please enter a location"}
    assert requests_mock.call_count == 0


def test_search_endpoint_missing_query_param(requests_mock) -> None:
    response = Client().get("/api/weather/search")

    assert response.status_code == 400
    assert response.json()["error"] == "empty_query"


def test_search_endpoint_location_not_found(requests_mock) -> None:
    requests_mock.get(GEOCODING_URL, json={"results": []})

    response = Client().get("/api/weather/search", {"q": "Atlantis"})

    assert response.status_code == 404
    assert response.json()["error"] == "location_not_found"


def test_search_endpoint_weather_error_flag(requests_mock) -> None:
    requests_mock.get(GEOCODING_URL, json=TOKYO_GEOCODE)
    requests_mock.get(FORECAST_URL, status_code=400, json={"error": True, "reason": "invalid"})

    response = Client().get("/api/weather/search", {"q": "Tokyo"})

    assert response.status_code == 502
    assert response.json()["error"] == "weather_fetch_failed"


def test_search_endpoint_transport_failure(requests_mock) -> None:
    requests_mock.get(GEOCODING_URL, exc=requests.exceptions.ConnectionError)

    response = Client().get("/api/weather/search", {"q": "Tokyo"})

    assert response.status_code == 502
    assert response.json() == {
        "error": "unknown_fetch_error",
        "detail": "An error occurred while fetching data. Please try again.",
    }


def test_search_endpoint_malformed_geocoding_body(requests_mock) -> None:
    requests_mock.get(GEOCODING_URL, json={"results": ["Tokyo"]})

    response = Client().get("/api/weather/search", {"q": "Tokyo"})

    assert response.status_code == 502
    assert response.json()["error"] == "unknown_fetch_error"


def test_search_endpoint_nan_wind_direction(requests_mock) -> None:
    requests_mock.get(GEOCODING_URL, json=TOKYO_GEOCODE)
    requests_mock.get(
        FORECAST_URL,
        json={"current": {"wind_speed_10m": 3, "wind_direction_10m": float("nan")}},
    )

    response = Client().get("/api/weather/search", {"q": "Tokyo"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["view"]["wind"] == "3 km/h"
    assert payload["record"]["weather"]["wind_direction"] is None
