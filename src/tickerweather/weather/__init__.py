"""Weather package - geocoding and forecast clients, normalization, request handler."""

from .api import WeatherClient
from .geocoding import GeocodingClient
from .handler import WeatherRequestHandler
from .models import (
    ConditionDescriptor,
    Location,
    NormalizedReport,
    ObservationBundle,
)
from .normalize import assemble_report, classify
from .utils import WeatherCodes, estimate_visibility

# Define what gets imported with: from tickerweather.weather import *
__all__ = [
    "ConditionDescriptor",
    "GeocodingClient",
    "Location",
    "NormalizedReport",
    "ObservationBundle",
    "WeatherClient",
    "WeatherCodes",
    "WeatherRequestHandler",
    "assemble_report",
    "classify",
    "estimate_visibility",
]
