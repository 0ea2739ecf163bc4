"""Errors a search can end with.

Each error carries the :class:`ErrorKind` used by the HTTP and CLI surfaces
and the message shown to the user.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    EMPTY_QUERY = "empty_query"
    LOCATION_NOT_FOUND = "location_not_found"
    WEATHER_FETCH_FAILED = "weather_fetch_failed"
    UNKNOWN_FETCH_ERROR = "unknown_fetch_error"


class SearchError(RuntimeError):
    """Base error for a failed search."""

    kind: ErrorKind = ErrorKind.UNKNOWN_FETCH_ERROR
    default_message = "An error occurred while fetching data. Please try again."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyQuery(SearchError):
    kind = ErrorKind.EMPTY_QUERY
    default_message = "Please enter a location"


class LocationNotFound(SearchError):
    kind = ErrorKind.LOCATION_NOT_FOUND
    default_message = "Location not found. Please try a different search term."


class WeatherFetchFailed(SearchError):
    kind = ErrorKind.WEATHER_FETCH_FAILED
    default_message = "Failed to fetch weather data. Please try again."


class UnknownFetchError(SearchError):
    kind = ErrorKind.UNKNOWN_FETCH_ERROR


__all__ = [
    "EmptyQuery",
    "ErrorKind",
    "LocationNotFound",
    "SearchError",
    "UnknownFetchError",
    "WeatherFetchFailed",
]
