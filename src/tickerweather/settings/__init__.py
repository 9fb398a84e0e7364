"""Service settings management.

This package provides:
- ServiceSettings: settings loaded from config.yaml (or defaults)
- WeatherServiceSettings / StockServiceSettings: per-service sections
"""

from tickerweather.settings.service import (
    ServiceSettings,
    StockServiceSettings,
    WeatherServiceSettings,
)

__all__ = ["ServiceSettings", "StockServiceSettings", "WeatherServiceSettings"]
