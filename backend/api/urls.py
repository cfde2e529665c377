"""Weather API routes."""
from __future__ import annotations

from django.urls import path

from backend.api.views import WeatherView

app_name = "api"

urlpatterns = [
    path("weather", WeatherView.as_view(), name="weather"),
]
