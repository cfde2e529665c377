from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, List, Optional, Sequence

from .base import GeocodingError, ProviderError, WeatherProvider
from ..entities import CurrentConditions, DailyForecast, HourlyForecast, Location, NormalizedWeather
from ..wmo import describe_weather_code


COORDINATES_RE = re.compile(r"(-?\d+(?:\.\d+)?),(-?\d+(?:\.\d+)?)")
UNKNOWN_PLACE = "Unknown"
HOURS_PER_DAY = 24

HOURLY_FIELDS = ["temperature_2m", "relative_humidity_2m", "precipitation_probability", "weathercode"]
DAILY_FIELDS = ["temperature_2m_max", "temperature_2m_min", "precipitation_probability_max", "weathercode"]


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


class OpenMeteoProvider(WeatherProvider):
    """Keyless fallback built on Open-Meteo, its geocoder and an IP lookup."""

    name = "openmeteo"
    base_url = "https://api.open-meteo.com/v1/forecast"
    geocoding_url = "https://geocoding-api.open-meteo.com/v1/search"
    ip_lookup_url = "https://ipapi.co/json/"

    def __init__(
        self,
        base_url: Optional[str] = None,
        geocoding_url: Optional[str] = None,
        ip_lookup_url: Optional[str] = None,
        clock: Callable[[], datetime] = _utc_now,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self.geocoding_url = geocoding_url or self.geocoding_url
        self.ip_lookup_url = ip_lookup_url or self.ip_lookup_url
        self._clock = clock
        self._log = logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def fetch(self, location: Optional[str]) -> NormalizedWeather:
        resolved = self.resolve_location(location)
        params = {
            "latitude": resolved.lat,
            "longitude": resolved.lon,
            "current_weather": "true",
            "hourly": ",".join(HOURLY_FIELDS),
            "daily": ",".join(DAILY_FIELDS),
            "timezone": "auto",
        }
        data = self._get_json(self.base_url, params=params)
        try:
            return self._normalize(data, resolved)
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            self._log.error("Malformed forecast response", exc_info=exc)
            raise ProviderError("malformed forecast response") from exc

    def resolve_location(self, location: Optional[str]) -> Location:
        """Turn a raw query into coordinates.

        A "lat,lon" pair is parsed locally, any other text goes to the
        geocoder, and no text at all falls back to IP based lookup.
        """
        match = COORDINATES_RE.search(location) if location else None
        if match:
            return Location(
                name=UNKNOWN_PLACE,
                country="",
                lat=float(match.group(1)),
                lon=float(match.group(2)),
            )
        if location:
            return self._geocode(location)
        return self._locate_by_ip()

    # Helpers ------------------------------------------------------------
    def _geocode(self, name: str) -> Location:
        data = self._get_json(self.geocoding_url, params={"name": name, "count": 1})
        results = data.get("results") if isinstance(data, dict) else None
        if not results:
            raise GeocodingError(f"no geocoding results for {name!r}")
        best = results[0]
        try:
            return Location(
                name=best["name"],
                country=best.get("country", ""),
                lat=best["latitude"],
                lon=best["longitude"],
            )
        except (KeyError, TypeError, AttributeError) as exc:
            raise GeocodingError("malformed geocoding result") from exc

    def _locate_by_ip(self) -> Location:
        data = self._get_json(self.ip_lookup_url)
        try:
            return Location(
                name=data["city"],
                country=data["country_name"],
                lat=data["latitude"],
                lon=data["longitude"],
            )
        except (KeyError, TypeError) as exc:
            raise ProviderError("malformed IP geolocation response") from exc

    def _normalize(self, data: dict, location: Location) -> NormalizedWeather:
        current = data["current_weather"]
        hourly = data["hourly"]
        daily = data["daily"]
        temperature = current["temperature"]
        now = self._local_now(data.get("utc_offset_seconds"))
        return NormalizedWeather(
            current=CurrentConditions(
                temp=temperature,
                condition=describe_weather_code(current.get("weathercode")),
                icon=None,
                humidity=_current_humidity(hourly["time"], hourly.get("relative_humidity_2m") or [], now),
                wind_speed=current["windspeed"],
                wind_direction=current["winddirection"],
                pressure=None,
                visibility=None,
                uv_index=None,
                feels_like=temperature,
            ),
            location=location,
            hourly=tuple(self._hourly(hourly)),
            daily=tuple(self._daily(daily)),
        )

    def _hourly(self, hourly: dict) -> List[HourlyForecast]:
        temps = hourly["temperature_2m"]
        codes = hourly.get("weathercode") or []
        precipitation = hourly.get("precipitation_probability") or []
        return [
            HourlyForecast(
                time=time,
                temp=temps[idx],
                condition=describe_weather_code(_safe_index(codes, idx)),
                icon=None,
                precipitation=_value_or_zero(precipitation, idx),
            )
            for idx, time in enumerate(hourly["time"][:HOURS_PER_DAY])
        ]

    def _daily(self, daily: dict) -> List[DailyForecast]:
        temps_max = daily["temperature_2m_max"]
        temps_min = daily["temperature_2m_min"]
        codes = daily.get("weathercode") or []
        precipitation = daily.get("precipitation_probability_max") or []
        return [
            DailyForecast(
                date=date,
                temp_max=temps_max[idx],
                temp_min=temps_min[idx],
                condition=describe_weather_code(_safe_index(codes, idx)),
                icon=None,
                precipitation=_value_or_zero(precipitation, idx),
                humidity=None,
            )
            for idx, date in enumerate(daily["time"])
        ]

    def _local_now(self, utc_offset_seconds: Optional[int]) -> datetime:
        # Hourly timestamps come back as naive wall-clock times of the location.
        offset = timedelta(seconds=int(utc_offset_seconds or 0))
        return (self._clock().astimezone(timezone.utc) + offset).replace(tzinfo=None)


def _current_humidity(times: Sequence[str], humidity: Sequence[Any], now: datetime) -> float:
    """Humidity of the most recently started hour, or 0 when unknown."""
    position = next((idx for idx, value in enumerate(times) if datetime.fromisoformat(value) > now), None)
    if position is None:
        return 0
    return _value_or_zero(humidity, position - 1)


def _safe_index(values: Sequence[Any], index: int) -> Any:
    if index < 0:
        return None
    try:
        return values[index]
    except IndexError:
        return None


def _value_or_zero(values: Sequence[Any], index: int) -> Any:
    value = _safe_index(values, index)
    return 0 if value is None else value


__all__ = ["OpenMeteoProvider", "COORDINATES_RE", "UNKNOWN_PLACE"]
