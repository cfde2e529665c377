"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

import json
import logging
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from backend.api.views import FATAL_ERROR_PAYLOAD, _location_param, get_weather_service


logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Fetch normalized weather for a place name, a 'lat,lon' pair or the current IP"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--location", type=str, help="City name or 'lat,lon'; omit to locate by IP")
        parser.add_argument("--indent", type=int, default=None, help="Pretty-print the JSON output")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        location = _location_param(options.get("location"))
        try:
            weather = get_weather_service().get_weather(location)
        except Exception as exc:  # noqa: BLE001 - mirrors the HTTP endpoint
            logger.exception("Weather command fatal error")
            raise CommandError(FATAL_ERROR_PAYLOAD["error"]) from exc

        self.stdout.write(json.dumps(weather.as_dict(), indent=options.get("indent")))
