from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, List, Optional

from .base import WeatherProvider
from ..entities import CurrentConditions, DailyForecast, HourlyForecast, Location, NormalizedWeather


AUTO_IP_QUERY = "auto:ip"
FORECAST_DAYS = 7
HOURS_PER_DAY = 24


@dataclass(frozen=True)
class ProviderResult:
    """Outcome of the primary provider: either a payload or a miss."""

    ok: bool
    value: Optional[NormalizedWeather] = None

    @classmethod
    def success(cls, value: NormalizedWeather) -> "ProviderResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls) -> "ProviderResult":
        return cls(ok=False)


class WeatherAPIProvider(WeatherProvider):
    """WeatherAPI.com client; accepts city names, "lat,lon" and auto:ip natively."""

    name = "weatherapi"
    base_url = "https://api.weatherapi.com/v1"

    def __init__(self, api_key: str, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = (base_url or self.base_url).rstrip("/")
        self._log = logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def fetch(self, location: Optional[str]) -> ProviderResult:
        """Fetch current conditions and the forecast concurrently.

        Never raises: any transport, status or shape problem is reported as
        ``ProviderResult.failure()`` so the caller can fall back.
        """
        query = location or AUTO_IP_QUERY
        try:
            with ThreadPoolExecutor(max_workers=2) as pool:
                current_future = pool.submit(self._current, query)
                forecast_future = pool.submit(self._forecast, query)
                current_data = current_future.result()
                forecast_data = forecast_future.result()
            return ProviderResult.success(self._normalize(current_data, forecast_data))
        except Exception as exc:  # noqa: BLE001 - every failure here means "try the fallback"
            self._log.warning("WeatherAPI unavailable, falling back: %r", exc)
            return ProviderResult.failure()

    # Helpers ------------------------------------------------------------
    def _current(self, query: str) -> dict:
        params = {"key": self.api_key, "q": query, "aqi": "no"}
        return self._get_json(f"{self.base_url}/current.json", params=params)

    def _forecast(self, query: str) -> dict:
        params = {
            "key": self.api_key,
            "q": query,
            "days": FORECAST_DAYS,
            "aqi": "no",
            "alerts": "no",
        }
        return self._get_json(f"{self.base_url}/forecast.json", params=params)

    def _normalize(self, current_data: dict, forecast_data: dict) -> NormalizedWeather:
        current = current_data["current"]
        location = current_data["location"]
        forecast_days = forecast_data["forecast"]["forecastday"]
        return NormalizedWeather(
            current=CurrentConditions(
                temp=current["temp_c"],
                condition=current["condition"]["text"],
                icon=current["condition"]["icon"],
                humidity=current["humidity"],
                wind_speed=current["wind_kph"],
                wind_direction=current["wind_degree"],
                pressure=current["pressure_mb"],
                visibility=current["vis_km"],
                uv_index=current["uv"],
                feels_like=current["feelslike_c"],
            ),
            location=Location(
                name=location["name"],
                country=location["country"],
                lat=location["lat"],
                lon=location["lon"],
            ),
            hourly=tuple(self._hourly(forecast_days[0]["hour"][:HOURS_PER_DAY])),
            daily=tuple(self._daily(forecast_days)),
        )

    def _hourly(self, hours: List[dict]) -> List[HourlyForecast]:
        return [
            HourlyForecast(
                time=hour["time"],
                temp=hour["temp_c"],
                condition=hour["condition"]["text"],
                icon=hour["condition"]["icon"],
                precipitation=hour["precip_mm"],
            )
            for hour in hours
        ]

    def _daily(self, forecast_days: List[Any]) -> List[DailyForecast]:
        result: List[DailyForecast] = []
        for forecast_day in forecast_days:
            day = forecast_day["day"]
            result.append(
                DailyForecast(
                    date=forecast_day["date"],
                    temp_max=day["maxtemp_c"],
                    temp_min=day["mintemp_c"],
                    condition=day["condition"]["text"],
                    icon=day["condition"]["icon"],
                    precipitation=day["totalprecip_mm"],
                    humidity=day["avghumidity"],
                )
            )
        return result


__all__ = ["WeatherAPIProvider", "ProviderResult", "AUTO_IP_QUERY"]
