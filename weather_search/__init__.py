"""Resolve a place name and show its current weather from Open-Meteo."""
from __future__ import annotations

from .entities import DisplayRecord, GeoResult, WeatherSnapshot
from .errors import ErrorKind, SearchError
from .services.lookup import WeatherLookup

__all__ = [
    "DisplayRecord",
    "ErrorKind",
    "GeoResult",
    "SearchError",
    "WeatherLookup",
    "WeatherSnapshot",
]
