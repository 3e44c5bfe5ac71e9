"""Rounding shared by every presentation boundary."""

from __future__ import annotations

import math


def round_half_up(value: float, places: int = 2) -> float:
    """Round halves towards positive infinity, like ``Math.round(v * 10**p) / 10**p``.

    The booking client rounds this way, so the server has to as well; Python's
    ``round`` rounds half to even and would disagree on ties.
    """

    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor
