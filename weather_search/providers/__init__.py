from __future__ import annotations

from .base import HttpProvider, ProviderError, WeatherReportedError
from .geocoding import OpenMeteoGeocoder
from .openmeteo import OpenMeteoProvider

__all__ = [
    "HttpProvider",
    "OpenMeteoGeocoder",
    "OpenMeteoProvider",
    "ProviderError",
    "WeatherReportedError",
]
