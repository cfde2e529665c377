from __future__ import annotations

import pytest

from backend.api.views import get_weather_service


@pytest.fixture(autouse=True)
def fresh_weather_service():
    get_weather_service.cache_clear()
    yield
    get_weather_service.cache_clear()


def _condition(text: str, icon: str) -> dict:
    return {"text": text, "icon": icon, "code": 1000}


def weatherapi_current_payload() -> dict:
    return {
        "location": {"name": "London", "country": "United Kingdom", "lat": 51.52, "lon": -0.11},
        "current": {
            "temp_c": 14.0,
            "condition": _condition("Partly cloudy", "//cdn.weatherapi.com/weather/64x64/day/116.png"),
            "humidity": 72,
            "wind_kph": 11.2,
            "wind_degree": 230,
            "pressure_mb": 1012.0,
            "vis_km": 10.0,
            "uv": 3.0,
            "feelslike_c": 13.1,
        },
    }


def weatherapi_forecast_payload(days: int = 7, hours: int = 24) -> dict:
    forecast_days = []
    for day in range(days):
        date = f"2024-05-{day + 1:02d}"
        forecast_days.append(
            {
                "date": date,
                "day": {
                    "maxtemp_c": 18.0 + day,
                    "mintemp_c": 8.0 + day,
                    "totalprecip_mm": 0.5 * day,
                    "avghumidity": 60 + day,
                    "condition": _condition("Sunny", "//cdn.weatherapi.com/weather/64x64/day/113.png"),
                },
                "hour": [
                    {
                        "time": f"{date} {hour:02d}:00",
                        "temp_c": 10.0 + hour / 2,
                        "precip_mm": 0.1,
                        "condition": _condition("Clear", "//cdn.weatherapi.com/weather/64x64/night/113.png"),
                    }
                    for hour in range(hours)
                ],
            }
        )
    return {"location": {"name": "London"}, "forecast": {"forecastday": forecast_days}}


def openmeteo_payload(hours: int = 48, days: int = 7, utc_offset_seconds: int = 0) -> dict:
    times = [f"2024-05-{1 + hour // 24:02d}T{hour % 24:02d}:00" for hour in range(hours)]
    return {
        "latitude": 40.0,
        "longitude": -75.0,
        "utc_offset_seconds": utc_offset_seconds,
        "current_weather": {
            "temperature": 21.5,
            "windspeed": 9.4,
            "winddirection": 180,
            "weathercode": 61,
            "time": "2024-05-01T10:00",
        },
        "hourly": {
            "time": times,
            "temperature_2m": [15.0 + idx * 0.1 for idx in range(hours)],
            "relative_humidity_2m": [idx for idx in range(hours)],
            "precipitation_probability": [None if idx == 3 else 20 for idx in range(hours)],
            "weathercode": [3 for _ in range(hours)],
        },
        "daily": {
            "time": [f"2024-05-{day + 1:02d}" for day in range(days)],
            "temperature_2m_max": [25.0 for _ in range(days)],
            "temperature_2m_min": [12.0 for _ in range(days)],
            "precipitation_probability_max": [None if day == 0 else 40 for day in range(days)],
            "weathercode": [95 if day == 1 else 0 for day in range(days)],
        },
    }


@pytest.fixture()
def weatherapi_payloads():
    return weatherapi_current_payload, weatherapi_forecast_payload


@pytest.fixture()
def openmeteo_forecast():
    return openmeteo_payload
