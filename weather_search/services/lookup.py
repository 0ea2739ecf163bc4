"""Two-step lookup: place name -> coordinates -> current conditions."""
from __future__ import annotations

import logging
from typing import Optional

import requests

from ..config import SearchConfig
from ..entities import DisplayRecord
from ..errors import EmptyQuery, LocationNotFound, UnknownFetchError, WeatherFetchFailed
from ..providers.base import ProviderError, WeatherReportedError
from ..providers.geocoding import OpenMeteoGeocoder
from ..providers.openmeteo import OpenMeteoProvider


class WeatherLookup:
    """Resolve a free-text query into a :class:`DisplayRecord`.

    Every failure surfaces as a :class:`~weather_search.errors.SearchError`
    subclass. Nothing is returned until both remote calls have succeeded.
    """

    def __init__(
        self,
        *,
        geocoder: Optional[OpenMeteoGeocoder] = None,
        weather_provider: Optional[OpenMeteoProvider] = None,
        config: Optional[SearchConfig] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config or SearchConfig.from_env()
        self.geocoder = geocoder or OpenMeteoGeocoder(
            base_url=self.config.geocoding_url,
            language=self.config.language,
            session=session,
            timeout=self.config.timeout,
        )
        self.weather_provider = weather_provider or OpenMeteoProvider(
            base_url=self.config.forecast_url,
            session=session,
            timeout=self.config.timeout,
        )
        self._log = logger or logging.getLogger(self.__class__.__name__)

    def search(self, query: Optional[str]) -> DisplayRecord:
        name = (query or "").strip()
        if not name:
            raise EmptyQuery()

        try:
            location = self.geocoder.search(name)
        except (ProviderError, TypeError, ValueError, KeyError, AttributeError) as exc:
            self._log.error("Geocoding %r failed: %s", name, exc, exc_info=exc)
            raise UnknownFetchError() from exc
        if location is None:
            raise LocationNotFound()

        try:
            weather = self.weather_provider.current(location.latitude, location.longitude)
        except WeatherReportedError as exc:
            raise WeatherFetchFailed() from exc
        except (ProviderError, TypeError, ValueError, KeyError, AttributeError) as exc:
            self._log.error(
                "Weather fetch for %.4f,%.4f failed: %s",
                location.latitude,
                location.longitude,
                exc,
                exc_info=exc,
            )
            raise UnknownFetchError() from exc

        self._log.debug("Resolved %r to %s, %s", name, location.name, location.country)
        return DisplayRecord(location=location, weather=weather)


__all__ = ["WeatherLookup"]
