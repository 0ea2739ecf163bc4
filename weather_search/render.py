"""Turn a :class:`DisplayRecord` into the strings the surfaces show."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from .entities import DisplayRecord
from .mappers import compass_direction, describe_weather_code, weather_icon


ATTRIBUTION = "Data provided by Open-Meteo"
MISSING = "n/a"


@dataclass(frozen=True)
class DisplayView:
    title: str
    region: str
    coordinates: str
    temperature: str
    condition: str
    icon: str
    humidity: str
    wind: str
    attribution: str = ATTRIBUTION

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)

    def lines(self) -> List[str]:
        return [
            self.title,
            self.region,
            self.coordinates,
            f"Temperature: {self.temperature}",
            f"Condition: {self.icon} {self.condition}",
            f"Humidity: {self.humidity}",
            f"Wind: {self.wind}",
            self.attribution,
        ]


def format_number(value: Optional[float]) -> str:
    if value is None:
        return MISSING
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def format_coordinates(latitude: float, longitude: float) -> str:
    lat_hemisphere = "N" if latitude >= 0 else "S"
    lon_hemisphere = "E" if longitude >= 0 else "W"
    return f"{abs(latitude):.4f}°{lat_hemisphere}, {abs(longitude):.4f}°{lon_hemisphere}"


def render_record(record: DisplayRecord) -> DisplayView:
    location = record.location
    weather = record.weather

    title = ", ".join(part for part in (location.name, location.country) if part)
    region = ", ".join(part for part in (location.admin1, location.country) if part)

    if weather.wind_speed is None:
        wind = MISSING
    else:
        wind = f"{format_number(weather.wind_speed)} {weather.unit('wind_speed')}"
        if weather.wind_direction is not None:
            wind = f"{wind} {compass_direction(weather.wind_direction)}"

    return DisplayView(
        title=title,
        region=region,
        coordinates=format_coordinates(location.latitude, location.longitude),
        temperature=_with_unit(weather.temperature, weather.unit("temperature")),
        condition=describe_weather_code(weather.weather_code),
        icon=weather_icon(weather.weather_code).symbol,
        humidity=_with_unit(weather.humidity, weather.unit("humidity")),
        wind=wind,
    )


def record_to_dict(record: DisplayRecord) -> Dict[str, Any]:
    return asdict(record)


def _with_unit(value: Optional[float], unit: str) -> str:
    if value is None:
        return MISSING
    return f"{format_number(value)}{unit}"


__all__ = ["ATTRIBUTION", "DisplayView", "format_coordinates", "format_number", "record_to_dict", "render_record"]
