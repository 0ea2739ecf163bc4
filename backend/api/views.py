"""REST API view for the place-name weather search."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from weather_search.config import SearchConfig
from weather_search.errors import ErrorKind, SearchError
from weather_search.render import record_to_dict, render_record
from weather_search.services.lookup import WeatherLookup


logger = logging.getLogger(__name__)

ERROR_STATUS: Dict[ErrorKind, int] = {
    ErrorKind.EMPTY_QUERY: status.HTTP_400_BAD_REQUEST,
    ErrorKind.LOCATION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.WEATHER_FETCH_FAILED: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.UNKNOWN_FETCH_ERROR: status.HTTP_502_BAD_GATEWAY,
}


@lru_cache(maxsize=1)
def get_weather_lookup() -> WeatherLookup:
    config = SearchConfig(
        geocoding_url=settings.WEATHER_SEARCH_GEOCODING_URL,
        forecast_url=settings.WEATHER_SEARCH_FORECAST_URL,
        language=settings.WEATHER_SEARCH_LANGUAGE,
        timeout=settings.WEATHER_SEARCH_TIMEOUT,
    )
    return WeatherLookup(config=config)


def error_payload(error: SearchError) -> Dict[str, str]:
    return {"error": error.kind.value, "detail": error.message}


class WeatherSearchView(APIView):
    """Resolve ``q`` to a location and return its current weather."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the rendered weather card for the query."""
        query = request.query_params.get("q", "")
        try:
            record = get_weather_lookup().search(query)
        except SearchError as exc:
            logger.info("Search for %r failed: %s", query, exc.kind.value)
            return Response(error_payload(exc), status=ERROR_STATUS[exc.kind])

        payload = {
            "record": record_to_dict(record),
            "view": render_record(record).as_dict(),
        }
        return Response(payload, status=status.HTTP_200_OK)
