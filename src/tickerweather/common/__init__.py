"""Shared enumerations."""

from tickerweather.common.enums import Stage

__all__ = ["Stage"]
