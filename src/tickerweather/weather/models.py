"""Typed models for Open-Meteo payloads and the normalized weather report.

Only the fields the service consumes are required; the rest of the
provider's ``current`` block is kept as optional extras.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from tickerweather.utils.time import TimeUtils

# ─────────────────────────── provider side ───────────────────────────────────


class Location(BaseModel):
    """Best geocoding match for a free-text place name."""

    model_config = ConfigDict(frozen=True)

    name: str
    latitude: float
    longitude: float
    country: str = ""
    timezone: str = ""


class ObservationBundle(BaseModel):
    """Current conditions returned by the forecast provider.

    Field aliases are the provider's variable names, so a ``current``
    block can be validated as-is.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    temperature_c: float = Field(..., alias="temperature_2m")
    apparent_temperature_c: float = Field(..., alias="apparent_temperature")
    humidity_pct: int = Field(..., alias="relative_humidity_2m")
    pressure_hpa: float = Field(..., alias="surface_pressure")
    wind_speed: float = Field(..., alias="wind_speed_10m")
    wind_direction_deg: int = Field(..., alias="wind_direction_10m")
    weather_code: int
    units: dict[str, str] = Field(default_factory=dict)

    # requested alongside the consumed fields, never required
    is_day: int | None = None
    precipitation: float | None = None
    rain: float | None = None
    showers: float | None = None
    snowfall: float | None = None
    cloud_cover: int | None = None
    pressure_msl: float | None = None

    @classmethod
    def from_provider(cls, payload: Mapping[str, Any]) -> ObservationBundle:
        """Build a bundle from a full forecast response.

        Args:
            payload: Decoded forecast JSON with ``current`` and ``current_units``

        Returns:
            Validated ObservationBundle

        Raises:
            KeyError: If the payload has no ``current`` block
            pydantic.ValidationError: If a consumed field is missing or mistyped
        """
        current = dict(payload["current"])
        current["units"] = dict(payload.get("current_units") or {})
        return cls.model_validate(current)

    def unit_for(self, field: str) -> str:
        """Return the provider's unit string for a variable, verbatim."""
        return self.units.get(field, "")


# ─────────────────────────── derived ─────────────────────────────────────────


class ConditionDescriptor(BaseModel):
    """Readable condition derived from a WMO weather code."""

    model_config = ConfigDict(frozen=True)

    category: str
    description: str
    icon_id: str


# ─────────────────────────── report blocks ───────────────────────────────────


class TemperatureBlock(BaseModel):
    """Rounded current and feels-like temperatures."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    current: int
    feels_like: int = Field(..., alias="feelsLike")
    unit: str


class ConditionBlock(BaseModel):
    """Condition text and icon as published to clients."""

    model_config = ConfigDict(frozen=True)

    main: str
    description: str
    icon: str


class WindBlock(BaseModel):
    """Wind speed and bearing copied from the observation."""

    model_config = ConfigDict(frozen=True)

    speed: float
    direction: int
    unit: str


class NormalizedReport(BaseModel):
    """Weather report returned by ``GET /api/weather/city/<name>``.

    ``timestamp`` records when the report was assembled, not when the
    provider took the measurement.
    """

    model_config = ConfigDict(frozen=True)

    city: str
    country: str
    temperature: TemperatureBlock
    weather: ConditionBlock
    wind: WindBlock
    humidity: int
    pressure: float
    visibility: int
    timezone: str
    timestamp: datetime

    @field_serializer("timestamp")
    def _serialize_timestamp(self, value: datetime) -> str:
        return TimeUtils.to_iso_z(value)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the published (camelCase) field names."""
        return self.model_dump(by_alias=True, mode="json")
