"""REST API views for weather information."""
from __future__ import annotations

from functools import lru_cache
import logging
from typing import Optional

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.services.weather import WeatherService, build_weather_service


logger = logging.getLogger(__name__)

FATAL_ERROR_PAYLOAD = {"error": "Unable to fetch weather"}


@lru_cache(maxsize=1)
def get_weather_service() -> WeatherService:
    return build_weather_service(
        api_key=settings.WEATHER_API_KEY,
        weatherapi_base_url=settings.WEATHERAPI_BASE_URL,
        forecast_url=settings.OPEN_METEO_FORECAST_URL,
        geocoding_url=settings.OPEN_METEO_GEOCODING_URL,
        ip_lookup_url=settings.IP_GEOLOCATION_URL,
        timeout=settings.WEATHER_HTTP_TIMEOUT,
    )


def _location_param(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    return raw.strip() or None


class WeatherView(APIView):
    """Provide normalized weather data for a place name, "lat,lon" or the caller's IP."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return current conditions plus hourly and daily forecasts."""
        location = _location_param(request.query_params.get("location"))
        try:
            weather = get_weather_service().get_weather(location)
        except Exception:  # noqa: BLE001 - the endpoint never leaks upstream failures
            logger.exception("Weather route fatal error")
            return Response(FATAL_ERROR_PAYLOAD, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(weather.as_dict(), status=status.HTTP_200_OK)
