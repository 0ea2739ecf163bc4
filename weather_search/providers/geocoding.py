from __future__ import annotations

from typing import Optional

from .base import HttpProvider, ProviderError, _safe_float
from ..config import GEOCODING_URL
from ..entities import GeoResult


class OpenMeteoGeocoder(HttpProvider):
    base_url = GEOCODING_URL

    def __init__(self, base_url: Optional[str] = None, language: str = "en", **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self.language = language

    def search(self, name: str) -> Optional[GeoResult]:
        """Return the first match for ``name`` or ``None`` when nothing matches."""
        params = {"name": name, "count": 1, "language": self.language, "format": "json"}
        data = self._fetch_json(self.base_url, params)
        results = data.get("results") or []
        if not isinstance(results, list):
            raise ProviderError("geocoding results is not a list")
        if not results:
            self._log.info("No geocoding match for %r", name)
            return None
        first = results[0]
        if not isinstance(first, dict):
            raise ProviderError("malformed geocoding result")
        latitude = _safe_float(first.get("latitude"))
        longitude = _safe_float(first.get("longitude"))
        if latitude is None or longitude is None:
            raise ProviderError("geocoding result without coordinates")
        return GeoResult(
            name=first.get("name") or name,
            country=first.get("country") or "",
            admin1=first.get("admin1") or "",
            latitude=latitude,
            longitude=longitude,
        )


__all__ = ["OpenMeteoGeocoder"]
