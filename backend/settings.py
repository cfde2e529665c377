"""Base Django settings for the weather service."""
from __future__ import annotations

from pathlib import Path
import os
from typing import Optional

from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


def env_float(name: str) -> Optional[float]:
    """Return an optional float setting; blank or missing means unset."""

    value = os.environ.get(name, "").strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise ImproperlyConfigured(f"Environment variable {name} must be a number") from exc


SECRET_KEY = env("DJANGO_SECRET_KEY")
DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "*").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "backend.api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "backend.urls"

WSGI_APPLICATION = "backend.wsgi.application"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# The service keeps no state of its own.
DATABASES: dict = {}

# Read once at startup and handed to the weather service explicitly.
WEATHER_API_KEY = os.environ.get("WEATHER_API_KEY", "").strip() or None
WEATHERAPI_BASE_URL = env("WEATHERAPI_BASE_URL", "https://api.weatherapi.com/v1")
OPEN_METEO_FORECAST_URL = env("OPEN_METEO_FORECAST_URL", "https://api.open-meteo.com/v1/forecast")
OPEN_METEO_GEOCODING_URL = env("OPEN_METEO_GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search")
IP_GEOLOCATION_URL = env("IP_GEOLOCATION_URL", "https://ipapi.co/json/")
WEATHER_HTTP_TIMEOUT = env_float("WEATHER_HTTP_TIMEOUT")

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
}

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "console": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "console",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "backend": {"level": LOG_LEVEL},
        "core": {"level": LOG_LEVEL},
        "WeatherService": {"level": LOG_LEVEL},
        "WeatherAPIProvider": {"level": LOG_LEVEL},
        "OpenMeteoProvider": {"level": LOG_LEVEL},
    },
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True
