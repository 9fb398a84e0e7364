"""WMO weather code descriptions and icon mappings."""

from __future__ import annotations

from types import MappingProxyType
from typing import ClassVar, Mapping

from tickerweather.weather.models import ConditionDescriptor


class WeatherCodes:
    """WMO weather code lookup utilities.

    Maps the integer codes used by Open-Meteo to a condition category,
    a lower-case description and an OpenWeather-style icon identifier.
    Codes missing from the tables fall back to an "Unknown" condition
    and the clear-day icon; lookups never raise.
    """

    UNKNOWN_CATEGORY: ClassVar[str] = "Unknown"
    UNKNOWN_DESCRIPTION: ClassVar[str] = "unknown weather condition"
    DEFAULT_ICON: ClassVar[str] = "01d"

    DESCRIPTIONS: ClassVar[Mapping[int, tuple[str, str]]] = MappingProxyType(
        {
            0: ("Clear", "clear sky"),
            1: ("Clear", "mainly clear"),
            2: ("Cloudy", "partly cloudy"),
            3: ("Cloudy", "overcast"),
            45: ("Fog", "fog"),
            48: ("Fog", "depositing rime fog"),
            51: ("Drizzle", "light drizzle"),
            53: ("Drizzle", "moderate drizzle"),
            55: ("Drizzle", "dense drizzle"),
            56: ("Freezing Drizzle", "light freezing drizzle"),
            57: ("Freezing Drizzle", "dense freezing drizzle"),
            61: ("Rain", "slight rain"),
            63: ("Rain", "moderate rain"),
            65: ("Rain", "heavy rain"),
            66: ("Freezing Rain", "light freezing rain"),
            67: ("Freezing Rain", "heavy freezing rain"),
            71: ("Snow", "slight snow fall"),
            73: ("Snow", "moderate snow fall"),
            75: ("Snow", "heavy snow fall"),
            77: ("Snow Grains", "snow grains"),
            80: ("Rain Showers", "slight rain showers"),
            81: ("Rain Showers", "moderate rain showers"),
            82: ("Rain Showers", "violent rain showers"),
            85: ("Snow Showers", "slight snow showers"),
            86: ("Snow Showers", "heavy snow showers"),
            95: ("Thunderstorm", "thunderstorm"),
            96: ("Thunderstorm", "thunderstorm with slight hail"),
            99: ("Thunderstorm", "thunderstorm with heavy hail"),
        }
    )

    ICONS: ClassVar[Mapping[int, str]] = MappingProxyType(
        {
            0: "01d",  # clear sky
            1: "02d",  # mainly clear
            2: "03d",  # partly cloudy
            3: "04d",  # overcast
            45: "50d",
            48: "50d",
            51: "09d",
            53: "09d",
            55: "09d",
            56: "09d",
            57: "09d",
            61: "10d",
            63: "10d",
            65: "10d",
            66: "13d",  # freezing rain shares the snow icon
            67: "13d",
            71: "13d",
            73: "13d",
            75: "13d",
            77: "13d",
            80: "09d",
            81: "09d",
            82: "09d",
            85: "13d",
            86: "13d",
            95: "11d",
            96: "11d",
            99: "11d",
        }
    )

    @classmethod
    def describe(cls, code: int) -> tuple[str, str]:
        """Get the (category, description) pair for a weather code.

        Args:
            code: WMO weather code

        Returns:
            Category and description, or the unknown pair for unmapped codes
        """
        return cls.DESCRIPTIONS.get(
            code, (cls.UNKNOWN_CATEGORY, cls.UNKNOWN_DESCRIPTION)
        )

    @classmethod
    def icon_for(cls, code: int) -> str:
        """Get the icon identifier for a weather code ("01d" when unmapped)."""
        return cls.ICONS.get(code, cls.DEFAULT_ICON)

    @classmethod
    def classify(cls, code: int) -> ConditionDescriptor:
        """Classify a weather code into a condition descriptor.

        Args:
            code: WMO weather code, any value

        Returns:
            ConditionDescriptor with category, description and icon
        """
        category, description = cls.describe(code)
        return ConditionDescriptor(
            category=category, description=description, icon_id=cls.icon_for(code)
        )

    @classmethod
    def icon_set(cls) -> frozenset[str]:
        """All icon identifiers the service can publish."""
        return frozenset(cls.ICONS.values()) | {cls.DEFAULT_ICON}
