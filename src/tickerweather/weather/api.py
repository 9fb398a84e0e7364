"""Weather API client for Open-Meteo."""

from __future__ import annotations

import logging
from typing import Any, Final

import requests

from tickerweather.errors import NetworkError, ParseError, ProviderError
from tickerweather.settings import WeatherServiceSettings
from tickerweather.utils.http import error_message
from tickerweather.weather.models import ObservationBundle

logger = logging.getLogger(__name__)

# Variables requested for the ``current`` block
CURRENT_FIELDS: Final = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "is_day",
    "precipitation",
    "rain",
    "showers",
    "snowfall",
    "weather_code",
    "cloud_cover",
    "pressure_msl",
    "surface_pressure",
    "wind_speed_10m",
    "wind_direction_10m",
)


class WeatherClient:
    """Open-Meteo forecast client for current conditions.

    Issues one request per lookup and validates the ``current`` block into
    an ObservationBundle. A response missing any consumed variable is
    treated as a provider failure rather than passed on.
    """

    def __init__(self, settings: WeatherServiceSettings | None = None) -> None:
        """Initialize the weather client.

        Args:
            settings: Weather service settings with endpoint and timeout
        """
        self.settings = settings or WeatherServiceSettings()

    def fetch_current(self, latitude: float, longitude: float) -> ObservationBundle:
        """Retrieve current observations for a coordinate pair.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees

        Returns:
            Validated ObservationBundle

        Raises:
            NetworkError: When network connectivity issues occur
            ProviderError: When the provider answers with any non-2xx status
            ParseError: When the response is malformed or incomplete
        """
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(CURRENT_FIELDS),
            "timezone": "auto",
        }

        try:
            resp = requests.get(
                self.settings.forecast_url, params=params, timeout=self.settings.timeout
            )
        except requests.RequestException as exc:
            logger.warning("Weather API network error: %s", exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc

        if resp.status_code != 200:
            msg = error_message(resp)
            logger.error("Weather API error: %s - %s", resp.status_code, msg)
            raise ProviderError(resp.status_code, msg)

        try:
            payload: dict[str, Any] = resp.json()
        except ValueError as exc:
            raise ParseError("Weather response is not valid JSON", exc) from exc

        try:
            return ObservationBundle.from_provider(payload)
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Could not parse weather data: %s", exc)
            raise ParseError(f"Malformed weather data: {exc}", exc) from exc
