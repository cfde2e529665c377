"""WMO weather interpretation codes as reported by Open-Meteo."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional


UNKNOWN_CONDITION = "Unknown"

WMO_CODES: Mapping[int, str] = MappingProxyType(
    {
        0: "Clear",
        1: "Mainly clear",
        2: "Partly cloudy",
        3: "Overcast",
        45: "Fog",
        48: "Depositing rime fog",
        51: "Light drizzle",
        53: "Drizzle",
        55: "Dense drizzle",
        56: "Freezing drizzle",
        57: "Dense freezing drizzle",
        61: "Rain: slight",
        63: "Rain",
        65: "Heavy rain",
        66: "Freezing rain",
        67: "Heavy freezing rain",
        71: "Snow fall: slight",
        73: "Snow fall",
        75: "Heavy snow fall",
        80: "Rain showers: slight",
        81: "Rain showers",
        82: "Violent rain showers",
        95: "Thunderstorm",
        99: "Thunderstorm with hail",
    }
)


def describe_weather_code(code: Optional[object]) -> str:
    """Return the short English description for a WMO code."""
    if isinstance(code, float) and code.is_integer():
        code = int(code)
    if isinstance(code, bool) or not isinstance(code, int):
        return UNKNOWN_CONDITION
    return WMO_CODES.get(code, UNKNOWN_CONDITION)


__all__ = ["WMO_CODES", "UNKNOWN_CONDITION", "describe_weather_code"]
