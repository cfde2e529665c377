from __future__ import annotations

import logging
from typing import Optional

from ..entities import NormalizedWeather
from ..providers.base import RequestConfig
from ..providers.openmeteo import OpenMeteoProvider
from ..providers.weatherapi import WeatherAPIProvider


class WeatherService:
    """Serve weather from WeatherAPI when configured, otherwise from Open-Meteo."""

    def __init__(
        self,
        *,
        primary_provider: Optional[WeatherAPIProvider],
        fallback_provider: OpenMeteoProvider,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.primary = primary_provider
        self.fallback = fallback_provider
        self._log = logger or logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def get_weather(self, location: Optional[str] = None) -> NormalizedWeather:
        """Return the normalized payload for ``location``.

        Failures of the primary provider are absorbed; failures of the
        fallback provider propagate to the caller.
        """
        if self.primary is not None:
            result = self.primary.fetch(location)
            if result.ok and result.value is not None:
                self._log.info("Weather served by %s", self.primary.name)
                return result.value
        weather = self.fallback.fetch(location)
        self._log.info("Weather served by %s", self.fallback.name)
        return weather


def build_weather_service(
    *,
    api_key: Optional[str],
    weatherapi_base_url: Optional[str] = None,
    forecast_url: Optional[str] = None,
    geocoding_url: Optional[str] = None,
    ip_lookup_url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> WeatherService:
    """Compose the service from explicit configuration values."""
    request_config = RequestConfig(timeout=timeout)
    primary = None
    if api_key:
        primary = WeatherAPIProvider(
            api_key=api_key,
            base_url=weatherapi_base_url,
            request_config=request_config,
        )
    fallback = OpenMeteoProvider(
        base_url=forecast_url,
        geocoding_url=geocoding_url,
        ip_lookup_url=ip_lookup_url,
        request_config=request_config,
    )
    return WeatherService(primary_provider=primary, fallback_provider=fallback)


__all__ = ["WeatherService", "build_weather_service"]
