from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class CurrentConditions:
    """Current weather at the resolved location.

    Values are kept in the units of the provider that produced them:
    - temperature in Celsius
    - wind speed in km/h, direction in degrees
    - pressure in millibars, visibility in kilometres
    """

    temp: float
    condition: str
    icon: Optional[str]
    humidity: float
    wind_speed: float
    wind_direction: float
    pressure: Optional[float]
    visibility: Optional[float]
    uv_index: Optional[float]
    feels_like: float

    def as_dict(self) -> Dict[str, Any]:
        return {
            "temp": self.temp,
            "condition": self.condition,
            "icon": self.icon,
            "humidity": self.humidity,
            "windSpeed": self.wind_speed,
            "windDirection": self.wind_direction,
            "pressure": self.pressure,
            "visibility": self.visibility,
            "uvIndex": self.uv_index,
            "feelsLike": self.feels_like,
        }


@dataclass(frozen=True)
class Location:
    name: str
    country: str
    lat: float
    lon: float

    def as_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "country": self.country, "lat": self.lat, "lon": self.lon}


@dataclass(frozen=True)
class HourlyForecast:
    """One hour of forecast; precipitation is mm or a probability in %."""

    time: str
    temp: float
    condition: str
    icon: Optional[str]
    precipitation: float

    def as_dict(self) -> Dict[str, Any]:
        return {
            "time": self.time,
            "temp": self.temp,
            "condition": self.condition,
            "icon": self.icon,
            "precipitation": self.precipitation,
        }


@dataclass(frozen=True)
class DailyForecast:
    date: str
    temp_max: float
    temp_min: float
    condition: str
    icon: Optional[str]
    precipitation: float
    humidity: Optional[float]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "tempMax": self.temp_max,
            "tempMin": self.temp_min,
            "condition": self.condition,
            "icon": self.icon,
            "precipitation": self.precipitation,
            "humidity": self.humidity,
        }


@dataclass(frozen=True)
class NormalizedWeather:
    """Provider independent weather payload returned by the API."""

    current: CurrentConditions
    location: Location
    hourly: Tuple[HourlyForecast, ...]
    daily: Tuple[DailyForecast, ...]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "current": self.current.as_dict(),
            "location": self.location.as_dict(),
            "hourly": [hour.as_dict() for hour in self.hourly],
            "daily": [day.as_dict() for day in self.daily],
        }


__all__ = ["CurrentConditions", "Location", "HourlyForecast", "DailyForecast", "NormalizedWeather"]
