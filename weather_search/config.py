"""Runtime configuration for the lookup flow, read from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"


@dataclass(frozen=True)
class SearchConfig:
    geocoding_url: str = GEOCODING_URL
    forecast_url: str = FORECAST_URL
    language: str = "en"
    timeout: float = 10.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SearchConfig":
        environ = os.environ if environ is None else environ
        timeout = environ.get("WEATHER_SEARCH_TIMEOUT")
        try:
            timeout_value = float(timeout) if timeout else cls.timeout
        except ValueError as exc:
            raise ValueError(f"WEATHER_SEARCH_TIMEOUT must be a number, got {timeout!r}") from exc
        return cls(
            geocoding_url=environ.get("WEATHER_SEARCH_GEOCODING_URL") or cls.geocoding_url,
            forecast_url=environ.get("WEATHER_SEARCH_FORECAST_URL") or cls.forecast_url,
            language=environ.get("WEATHER_SEARCH_LANGUAGE") or cls.language,
            timeout=timeout_value,
        )


__all__ = ["FORECAST_URL", "GEOCODING_URL", "SearchConfig"]
