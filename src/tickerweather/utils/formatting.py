"""Number formatting utilities."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, sending .5 towards positive infinity.

    Unlike the built-in ``round``, ``20.5`` becomes ``21`` and ``-3.5`` becomes ``-3``.

    Args:
        value: Value to round

    Returns:
        Nearest integer
    """
    return math.floor(value + 0.5)
