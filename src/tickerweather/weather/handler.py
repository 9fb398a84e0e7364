"""Request pipeline for weather lookups by city name."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Final

from tickerweather.common.enums import Stage
from tickerweather.errors import NotFoundError, ProxyError, ValidationError
from tickerweather.utils.time import TimeUtils
from tickerweather.weather.api import WeatherClient
from tickerweather.weather.geocoding import GeocodingClient
from tickerweather.weather.models import NormalizedReport
from tickerweather.weather.normalize import assemble_report

logger: Final = logging.getLogger(__name__)


class WeatherRequestHandler:
    """Run one city lookup through geocoding, weather fetch and normalization.

    The handler holds no per-request state; every call to ``handle`` walks
    the stages in Stage order. Errors are not retried. ProxyError
    subclasses propagate unchanged for the web layer to translate, after
    being logged with the stage they came from.
    """

    def __init__(
        self,
        geocoder: GeocodingClient | None = None,
        weather: WeatherClient | None = None,
        clock: Callable[[], datetime] = TimeUtils.now_utc,
    ) -> None:
        """Initialize the handler.

        Args:
            geocoder: Client used to resolve city names
            weather: Client used to fetch current observations
            clock: Source of the report timestamp
        """
        self.geocoder = geocoder or GeocodingClient()
        self.weather = weather or WeatherClient()
        self.clock = clock

    def handle(self, city_name: str | None) -> NormalizedReport:
        """Produce the weather report for ``city_name``.

        Raises:
            ValidationError: If the city name is empty
            NotFoundError: If geocoding finds no match
            UpstreamError: If a provider call fails
        """
        stage = Stage.AWAITING_CITY_PARAM
        try:
            name = (city_name or "").strip()
            if not name:
                raise ValidationError("City name is required")

            stage = self._advance(stage, Stage.RESOLVING_LOCATION)
            location = self.geocoder.lookup(name)
            if location is None:
                raise NotFoundError("City not found")

            stage = self._advance(stage, Stage.FETCHING_WEATHER)
            bundle = self.weather.fetch_current(location.latitude, location.longitude)

            stage = self._advance(stage, Stage.NORMALIZING)
            report = assemble_report(location, bundle, self.clock())

            self._advance(stage, Stage.RESPONDED)
            return report
        except ProxyError as err:
            if err.http_status < 500:
                logger.info("Weather lookup for %r stopped at %s: %s", city_name, stage.value, err)
            else:
                logger.error("Weather lookup for %r failed at %s: %s", city_name, stage.value, err)
            raise

    @staticmethod
    def _advance(current: Stage, nxt: Stage) -> Stage:
        logger.debug("weather request: %s -> %s", current.value, nxt.value)
        return nxt
