"""HTTP surface for the proxy services."""

from tickerweather.web.app import create_stock_app, create_weather_app

__all__ = ["create_stock_app", "create_weather_app"]
