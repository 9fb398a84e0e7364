"""Command-line interface for the stock and weather proxy services.

This module starts either HTTP service, runs a one-off weather lookup
and provides configuration helpers.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Final

import typer
import yaml

from tickerweather.errors import ProxyError
from tickerweather.settings import ServiceSettings
from tickerweather.weather import GeocodingClient, WeatherClient, WeatherRequestHandler
from tickerweather.web import create_stock_app, create_weather_app

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Stock quote and weather proxy APIs", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "tickerweather.cli"

CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
HOST_OPTION = typer.Option(None, "--host", help="Interface to bind (overrides config)")
PORT_OPTION = typer.Option(
    None, "--port", "-p", envvar="PORT", help="Port to listen on (overrides config)"
)
CITY_ARGUMENT = typer.Argument(..., help="City name to look up")
DST_ARGUMENT = typer.Argument(..., help="Output config.yaml")


def _load_settings(config: Path | None) -> ServiceSettings:
    """Load settings from ``config`` or the default locations, else use defaults."""
    try:
        return ServiceSettings.load(config)
    except FileNotFoundError as exc:
        if config is None and not os.environ.get("TICKERWEATHER_CONFIG"):
            return ServiceSettings()
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    except RuntimeError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def _setup_logging(settings: ServiceSettings, debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else getattr(logging, settings.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


@app.command()
def weather(
    config: Path | None = CONFIG_OPTION,
    host: str | None = HOST_OPTION,
    port: int | None = PORT_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Serve the weather lookup API."""
    settings = _load_settings(config)
    _setup_logging(settings, debug)

    bind_host = host or settings.weather.host
    bind_port = port or settings.weather.port
    logger.info("Weather API server running on %s:%d", bind_host, bind_port)
    create_weather_app(settings).run(host=bind_host, port=bind_port, debug=debug)


@app.command()
def stock(
    config: Path | None = CONFIG_OPTION,
    host: str | None = HOST_OPTION,
    port: int | None = PORT_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Serve the stock quote API."""
    settings = _load_settings(config)
    _setup_logging(settings, debug)

    bind_host = host or settings.stock.host
    bind_port = port or settings.stock.port
    logger.info("Stock API server running on %s:%d", bind_host, bind_port)
    create_stock_app(settings).run(host=bind_host, port=bind_port, debug=debug)


@app.command()
def lookup(
    city: str = CITY_ARGUMENT,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Look up current weather for a city once and print the report."""
    settings = _load_settings(config)
    _setup_logging(settings, debug)

    handler = WeatherRequestHandler(
        geocoder=GeocodingClient(settings.weather),
        weather=WeatherClient(settings.weather),
    )
    try:
        report = handler.handle(city)
    except ProxyError as err:
        typer.secho(f"Error ({err.code}): {err.message}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from err

    typer.echo(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        ServiceSettings.load(file)
        typer.echo("✅ Config valid")
    except (RuntimeError, FileNotFoundError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("init")
def init_config(dst: Path = DST_ARGUMENT):
    """Write a config file populated with the defaults."""
    if dst.exists():
        typer.secho(f"{dst} already exists", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    data = ServiceSettings().model_dump()
    dst.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    typer.secho(f"Config written to {dst}", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
