"""Common utility functions and helpers for the tickerweather package."""

from tickerweather.utils.formatting import round_half_up
from tickerweather.utils.time import TimeUtils

__all__ = [
    "TimeUtils",
    "round_half_up",
]
