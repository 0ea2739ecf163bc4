"""Static lookups turning raw measurements into display labels."""
from __future__ import annotations

import math
from enum import Enum
from typing import Dict, Optional


WEATHER_CODES: Dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snow fall",
    73: "Moderate snow fall",
    75: "Heavy snow fall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}

UNKNOWN_DESCRIPTION = "Unknown"

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


class WeatherIcon(str, Enum):
    CLEAR = "clear"
    PARTLY_CLOUDY = "partly_cloudy"
    FOG = "fog"
    RAIN = "rain"
    SNOW = "snow"
    THUNDERSTORM = "thunderstorm"

    @property
    def symbol(self) -> str:
        return _ICON_SYMBOLS[self]


_ICON_SYMBOLS = {
    WeatherIcon.CLEAR: "☀️",
    WeatherIcon.PARTLY_CLOUDY: "⛅",
    WeatherIcon.FOG: "\U0001f32b️",
    WeatherIcon.RAIN: "\U0001f327️",
    WeatherIcon.SNOW: "❄️",
    WeatherIcon.THUNDERSTORM: "⛈️",
}


def describe_weather_code(code: Optional[int]) -> str:
    if code is None:
        return UNKNOWN_DESCRIPTION
    return WEATHER_CODES.get(code, UNKNOWN_DESCRIPTION)


def weather_icon(code: Optional[int]) -> WeatherIcon:
    """Map a WMO code onto one of six bands.

    Bands are inclusive upper bounds: 0, 1-3, 4-48, 49-67, 68-86, rest.
    """
    if code is None:
        return WeatherIcon.THUNDERSTORM
    if code == 0:
        return WeatherIcon.CLEAR
    if code <= 3:
        return WeatherIcon.PARTLY_CLOUDY
    if code <= 48:
        return WeatherIcon.FOG
    if code <= 67:
        return WeatherIcon.RAIN
    if code <= 86:
        return WeatherIcon.SNOW
    return WeatherIcon.THUNDERSTORM


def compass_direction(degrees: float) -> str:
    # Half-up rounding: 11.25 degrees belongs to NNE, not N.
    index = math.floor(degrees / 22.5 + 0.5) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]


__all__ = [
    "COMPASS_POINTS",
    "UNKNOWN_DESCRIPTION",
    "WEATHER_CODES",
    "WeatherIcon",
    "compass_direction",
    "describe_weather_code",
    "weather_icon",
]
