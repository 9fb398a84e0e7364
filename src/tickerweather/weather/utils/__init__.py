"""Weather utility classes."""

from tickerweather.weather.utils.icons import WeatherCodes
from tickerweather.weather.utils.visibility import estimate_visibility

__all__ = ["WeatherCodes", "estimate_visibility"]
