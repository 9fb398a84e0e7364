"""Reshape provider observations into the published weather report."""

from __future__ import annotations

from datetime import datetime

from tickerweather.utils.formatting import round_half_up
from tickerweather.weather.models import (
    ConditionBlock,
    ConditionDescriptor,
    Location,
    NormalizedReport,
    ObservationBundle,
    TemperatureBlock,
    WindBlock,
)
from tickerweather.weather.utils import WeatherCodes, estimate_visibility


def classify(weather_code: int) -> ConditionDescriptor:
    """Describe a WMO weather code; unmapped codes degrade to "Unknown"."""
    return WeatherCodes.classify(weather_code)


def assemble_report(
    location: Location, bundle: ObservationBundle, now: datetime
) -> NormalizedReport:
    """Build the report for one request.

    Temperatures are rounded for display; wind, humidity and pressure
    are copied verbatim and unit strings are passed through untouched.

    Args:
        location: Geocoded location
        bundle: Current observations for that location
        now: Time the report is assembled

    Returns:
        NormalizedReport ready for serialization
    """
    condition = classify(bundle.weather_code)

    return NormalizedReport(
        city=location.name,
        country=location.country,
        temperature=TemperatureBlock(
            current=round_half_up(bundle.temperature_c),
            feels_like=round_half_up(bundle.apparent_temperature_c),
            unit=bundle.unit_for("temperature_2m"),
        ),
        weather=ConditionBlock(
            main=condition.category,
            description=condition.description,
            icon=condition.icon_id,
        ),
        wind=WindBlock(
            speed=bundle.wind_speed,
            direction=bundle.wind_direction_deg,
            unit=bundle.unit_for("wind_speed_10m"),
        ),
        humidity=bundle.humidity_pct,
        pressure=bundle.pressure_hpa,
        visibility=estimate_visibility(bundle.humidity_pct, bundle.weather_code),
        timezone=location.timezone,
        timestamp=now,
    )
