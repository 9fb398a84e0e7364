"""Flask application factories for the weather and stock APIs."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Final

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from tickerweather.errors import ProxyError
from tickerweather.settings import ServiceSettings
from tickerweather.stock import StockClient, StockRequestHandler
from tickerweather.weather import GeocodingClient, WeatherClient, WeatherRequestHandler

logger: Final = logging.getLogger(__name__)

ResponseValue = tuple[Any, int]


def _create_base_app(name: str, settings: ServiceSettings) -> Flask:
    """Flask app with CORS, JSON error pages and the health check."""
    app = Flask(name)
    app.json.sort_keys = False  # type: ignore[attr-defined]
    CORS(app, origins=settings.cors_origins)

    @app.get("/health")
    def health() -> ResponseValue:
        return jsonify({"status": "ok"}), 200

    @app.errorhandler(HTTPException)
    def handle_http_error(err: HTTPException) -> ResponseValue:
        return jsonify({"error": err.name}), err.code or 500

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception) -> ResponseValue:
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": "Something went wrong!", "message": str(err)}), 500

    return app


# ─────────────────────────── weather ─────────────────────────────────────────


def create_weather_app(
    settings: ServiceSettings | None = None,
    handler: WeatherRequestHandler | None = None,
) -> Flask:
    """Create the weather lookup API.

    Args:
        settings: Service settings (defaults used when omitted)
        handler: Request pipeline; built from settings when omitted

    Returns:
        Configured Flask application
    """
    settings = settings or ServiceSettings()
    handler = handler or WeatherRequestHandler(
        geocoder=GeocodingClient(settings.weather),
        weather=WeatherClient(settings.weather),
    )
    app = _create_base_app("tickerweather.weather", settings)

    @app.get("/api/weather/city/", defaults={"city_name": ""})
    @app.get("/api/weather/city/<path:city_name>")
    def weather_by_city(city_name: str) -> ResponseValue:
        report = handler.handle(city_name)
        return jsonify(report.to_dict()), 200

    @app.errorhandler(ProxyError)
    def handle_proxy_error(err: ProxyError) -> ResponseValue:
        if err.http_status < 500:
            return jsonify({"error": err.message}), err.http_status
        return jsonify({"error": "Something went wrong!", "message": err.message}), 500

    return app


# ─────────────────────────── stock ───────────────────────────────────────────


def create_stock_app(
    settings: ServiceSettings | None = None,
    handler: StockRequestHandler | None = None,
) -> Flask:
    """Create the stock quote API.

    Args:
        settings: Service settings (defaults used when omitted)
        handler: Stock request handler; built from settings when omitted

    Returns:
        Configured Flask application
    """
    settings = settings or ServiceSettings()
    handler = handler or StockRequestHandler(StockClient(settings.stock))
    app = _create_base_app("tickerweather.stock", settings)

    def respond(
        action: Callable[[str | None], dict[str, Any]],
        value: str | None,
        failure: str,
    ) -> ResponseValue:
        try:
            return jsonify(action(value)), 200
        except ProxyError as err:
            if err.http_status < 500:
                return jsonify({"error": err.message}), err.http_status
            logger.error("%s: %s", failure, err)
            return jsonify({"error": failure}), 500

    @app.get("/api/stock")
    def stock_details() -> ResponseValue:
        return respond(
            handler.details, request.args.get("symbol"), "Failed to fetch stock details"
        )

    @app.get("/api/stock/symbol")
    def stock_symbol() -> ResponseValue:
        return respond(
            handler.symbol,
            request.args.get("companyName"),
            "Failed to fetch stock symbol",
        )

    @app.get("/api/stock/price")
    def stock_price() -> ResponseValue:
        return respond(
            handler.price, request.args.get("symbol"), "Failed to fetch stock price"
        )

    return app
