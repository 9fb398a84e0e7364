"""Visibility estimate derived from humidity and weather code."""

from __future__ import annotations

from typing import Final

from tickerweather.utils.formatting import round_half_up

CLEAR_SKY_VISIBILITY_M: Final = 10000
HUMIDITY_THRESHOLD_PCT: Final = 70

FOG_CODES: Final = frozenset({45, 48})
RAIN_CODES: Final = frozenset({51, 53, 55, 56, 57, 61, 63, 65, 66, 67, 80, 81, 82})
SNOW_CODES: Final = frozenset({71, 73, 75, 77, 85, 86})
THUNDERSTORM_CODES: Final = frozenset({95, 96, 99})

# Checked in order, first match wins.
CONDITION_FACTORS: Final = (
    (FOG_CODES, 0.1),
    (RAIN_CODES, 0.6),
    (SNOW_CODES, 0.4),
    (THUNDERSTORM_CODES, 0.3),
)


def estimate_visibility(humidity_pct: float, weather_code: int) -> int:
    """Estimate visibility in meters.

    Starts from a 10 km clear-sky reference, derates linearly for
    humidity above 70 % and then applies a multiplier for fog, rain,
    snow or thunderstorm codes. The result is not clamped: humidity far
    outside 0-100 can produce non-physical values.

    Args:
        humidity_pct: Relative humidity in percent
        weather_code: WMO weather code

    Returns:
        Estimated visibility, rounded to the nearest meter
    """
    visibility = float(CLEAR_SKY_VISIBILITY_M)

    if humidity_pct > HUMIDITY_THRESHOLD_PCT:
        visibility *= 1 - (humidity_pct - HUMIDITY_THRESHOLD_PCT) / 100

    for codes, factor in CONDITION_FACTORS:
        if weather_code in codes:
            visibility *= factor
            break

    return round_half_up(visibility)
