"""Service settings loaded from config.yaml."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import ClassVar, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

# Load environment variables from .env file(s)
load_dotenv()


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class WeatherServiceSettings(BaseModel):
    """Settings for the weather lookup API and its Open-Meteo providers."""

    host: str = Field("0.0.0.0", description="Interface to bind")
    port: int = Field(3000, gt=0, le=65535, description="Port to listen on")
    geocoding_url: str = Field(
        "https://geocoding-api.open-meteo.com/v1/search",
        description="Open-Meteo geocoding search endpoint",
    )
    forecast_url: str = Field(
        "https://api.open-meteo.com/v1/forecast",
        description="Open-Meteo forecast endpoint",
    )
    language: str = Field("en", description="Language for geocoding results")
    timeout: float = Field(10.0, gt=0, description="Outbound request timeout (seconds)")


class StockServiceSettings(BaseModel):
    """Settings for the stock quote API and its finance provider."""

    host: str = Field("0.0.0.0", description="Interface to bind")
    port: int = Field(3001, gt=0, le=65535, description="Port to listen on")
    chart_url: str = Field(
        "https://query1.finance.yahoo.com/v8/finance/chart",
        description="Chart endpoint; the symbol is appended as a path segment",
    )
    search_url: str = Field(
        "https://query1.finance.yahoo.com/v1/finance/search",
        description="Symbol search endpoint",
    )
    user_agent: str = Field(
        "Mozilla/5.0 (compatible; tickerweather/0.1)",
        description="User-Agent sent to the finance provider",
    )
    timeout: float = Field(10.0, gt=0, description="Outbound request timeout (seconds)")


class ServiceSettings(BaseModel):
    """Settings for both proxy services.

    Every value has a default, so an empty config file is valid.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/tickerweather/config.yaml").expanduser(),
        Path("/etc/tickerweather/config.yaml"),
    ]

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    cors_origins: str | list[str] = Field(
        "*", description="Origins allowed by CORS ('*' for any)"
    )
    weather: WeatherServiceSettings = Field(default_factory=WeatherServiceSettings)
    stock: StockServiceSettings = Field(default_factory=StockServiceSettings)

    @classmethod
    def load(cls, path: Path | None = None) -> ServiceSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated ServiceSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        # Try to find config file
        if path is None:
            # Check environment variable first
            env_path = os.environ.get("TICKERWEATHER_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(
                        f"Config file from TICKERWEATHER_CONFIG not found: {path}"
                    )
            else:
                # Try default paths
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        "No configuration file found. Create config.yaml or set TICKERWEATHER_CONFIG."
                    )

        # Load and parse config
        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw) or {}
        except Exception as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
