from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional


DEFAULT_UNITS: Mapping[str, str] = {
    "temperature": "°C",
    "humidity": "%",
    "wind_speed": "km/h",
    "wind_direction": "°",
}


@dataclass(frozen=True)
class GeoResult:
    """First geocoding match for a query."""

    name: str
    country: str
    latitude: float
    longitude: float
    admin1: str = ""


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions for a coordinate pair.

    ``units`` always holds an entry for every measured field; values missing
    from the upstream ``current_units`` block fall back to ``DEFAULT_UNITS``.
    """

    temperature: Optional[float]
    humidity: Optional[float]
    weather_code: Optional[int]
    wind_speed: Optional[float]
    wind_direction: Optional[float]
    units: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_UNITS))
    time: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "units", dict(self.units))

    def unit(self, name: str) -> str:
        return self.units.get(name) or DEFAULT_UNITS.get(name, "")


@dataclass(frozen=True)
class DisplayRecord:
    location: GeoResult
    weather: WeatherSnapshot


__all__ = ["DEFAULT_UNITS", "DisplayRecord", "GeoResult", "WeatherSnapshot"]
