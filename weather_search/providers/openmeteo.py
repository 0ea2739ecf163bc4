from __future__ import annotations

from typing import Dict, Optional

from .base import HttpProvider, ProviderError, WeatherReportedError, _safe_float
from ..config import FORECAST_URL
from ..entities import DEFAULT_UNITS, WeatherSnapshot


# Open-Meteo field name -> WeatherSnapshot attribute.
CURRENT_FIELDS: Dict[str, str] = {
    "temperature_2m": "temperature",
    "relative_humidity_2m": "humidity",
    "weather_code": "weather_code",
    "wind_speed_10m": "wind_speed",
    "wind_direction_10m": "wind_direction",
}


class OpenMeteoProvider(HttpProvider):
    base_url = FORECAST_URL

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url

    def current(self, latitude: float, longitude: float) -> WeatherSnapshot:
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(CURRENT_FIELDS),
            "timezone": "auto",
        }
        data = self._fetch_json(self.base_url, params)
        current = data.get("current")
        if not isinstance(current, dict):
            raise ProviderError("missing current weather")
        return WeatherSnapshot(
            temperature=_safe_float(current.get("temperature_2m")),
            humidity=_safe_float(current.get("relative_humidity_2m")),
            weather_code=_safe_int(current.get("weather_code")),
            wind_speed=_safe_float(current.get("wind_speed_10m")),
            wind_direction=_safe_float(current.get("wind_direction_10m")),
            units=self._units(data.get("current_units")),
            time=current.get("time"),
        )

    def _check_payload(self, data: dict) -> None:
        if data.get("error"):
            reason = data.get("reason")
            self._log.warning("Open-Meteo reported an error: %s", reason)
            raise WeatherReportedError(reason)

    def _units(self, raw: Optional[object]) -> Dict[str, str]:
        units = dict(DEFAULT_UNITS)
        if not isinstance(raw, dict):
            return units
        for source, target in CURRENT_FIELDS.items():
            value = raw.get(source)
            if value and target in units:
                units[target] = str(value)
        return units


def _safe_int(value: Optional[object]) -> Optional[int]:
    number = _safe_float(value)
    if number is None:
        return None
    return int(number)


__all__ = ["CURRENT_FIELDS", "OpenMeteoProvider"]
