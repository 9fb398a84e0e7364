"""Open-Meteo geocoding client."""

from __future__ import annotations

import logging
from typing import Any, Final

import requests
from typing_extensions import TypedDict

from tickerweather.errors import NetworkError, ParseError, ProviderError
from tickerweather.settings import WeatherServiceSettings
from tickerweather.utils.http import error_message
from tickerweather.weather.models import Location

logger: Final = logging.getLogger(__name__)


class GeocodingResult(TypedDict, total=False):
    """Subset of one entry in the provider's ``results`` list."""

    name: str
    latitude: float
    longitude: float
    country: str
    timezone: str
    admin1: str


class GeocodingClient:
    """Resolve free-text place names to a single best-match Location."""

    def __init__(self, settings: WeatherServiceSettings | None = None) -> None:
        """Initialize the geocoding client.

        Args:
            settings: Weather service settings with endpoint and timeout
        """
        self.settings = settings or WeatherServiceSettings()

    def lookup(self, name: str) -> Location | None:
        """Return the first ranked match for ``name``, or None.

        Raises:
            NetworkError: When the provider cannot be reached
            ProviderError: When the provider answers with any non-2xx status
            ParseError: When the response is not usable JSON
        """
        params = {
            "name": name,
            "count": 1,
            "language": self.settings.language,
            "format": "json",
        }

        try:
            resp = requests.get(
                self.settings.geocoding_url, params=params, timeout=self.settings.timeout
            )
        except requests.RequestException as exc:
            logger.warning("Geocoding network error for %r: %s", name, exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc

        if resp.status_code != 200:
            logger.error("Geocoding error for %r: %s", name, resp.status_code)
            raise ProviderError(resp.status_code, error_message(resp))

        try:
            data: dict[str, Any] = resp.json()
        except ValueError as exc:
            raise ParseError("Geocoding response is not valid JSON", exc) from exc
        if not isinstance(data, dict):
            raise ParseError("Geocoding response is not a JSON object")

        results = data.get("results") or []
        if not results:
            logger.info("No geocoding match for %r", name)
            return None

        first: GeocodingResult = results[0]
        try:
            return Location(
                name=first["name"],
                latitude=first["latitude"],
                longitude=first["longitude"],
                country=first.get("country", ""),
                timezone=first.get("timezone", ""),
            )
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Could not parse geocoding result: %s", exc)
            raise ParseError(f"Malformed geocoding result: {exc}", exc) from exc

