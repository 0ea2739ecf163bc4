from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional

import requests
from requests import Response


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class ProviderError(RuntimeError):
    """Base provider error."""


class WeatherReportedError(ProviderError):
    """Raised when the upstream body carries an ``error`` flag."""

    def __init__(self, reason: Optional[str] = None) -> None:
        self.reason = reason
        super().__init__(reason or "upstream reported an error")


class HttpProvider:
    """Base class for JSON-over-HTTP providers sharing one session."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
    ) -> None:
        self.timeout = timeout
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def _handle_response(self, response: Response) -> Response:
        if response.status_code >= 400:
            self._log.error("Provider returned %s: %s", response.status_code, response.text[:500])
            raise ProviderError(f"HTTP {response.status_code}")
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise ProviderError("timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise ProviderError("request failed") from exc
        return response

    def _fetch_json(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        response = self._request("GET", url, params=params)
        try:
            data = response.json()
        except ValueError as exc:
            self._handle_response(response)
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise ProviderError("invalid json") from exc
        if isinstance(data, dict):
            self._check_payload(data)
        self._handle_response(response)
        if not isinstance(data, dict):
            raise ProviderError("unexpected payload type")
        return data

    def _check_payload(self, data: Dict[str, Any]) -> None:
        """Hook for providers that report failures inside a JSON body."""


def _safe_float(value: Optional[object]) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


__all__ = ["DEFAULT_TIMEOUT", "HttpProvider", "ProviderError", "WeatherReportedError"]
