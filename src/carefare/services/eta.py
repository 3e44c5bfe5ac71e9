"""Distance and arrival-time estimates between a patient and a nurse."""

from __future__ import annotations

import math

from ..models.domain import DistanceEstimate, GeoPoint, RateTable
from .geospatial import billable_distance, great_circle_distance_km
from .pricing.rates import RATE_TABLE, travel_speed_kmh
from .rounding import round_half_up


def estimate_distance_and_eta(
    patient: GeoPoint,
    provider: GeoPoint,
    service_type: str = "",
    rates: RateTable = RATE_TABLE,
) -> DistanceEstimate:
    """Estimate straight-line distance and nurse ETA.

    Rounding is applied to the returned values only; the ETA is derived from
    the unrounded distance.
    """

    raw_km = great_circle_distance_km(patient, provider)
    speed_kmh = travel_speed_kmh(service_type, rates)
    return DistanceEstimate(
        distance_km=round_half_up(raw_km, 1),
        billable_distance_km=round_half_up(billable_distance(raw_km, rates), 1),
        eta_minutes=math.ceil(raw_km / speed_kmh * 60),
    )


def format_distance(km: float) -> str:
    if km < 1:
        return f"{round_half_up(km * 1000, 0):.0f}m"
    return f"{km:.1f} km"


def format_eta(minutes: int) -> str:
    if minutes < 1:
        return "< 1 min"
    if minutes >= 60:
        hours, mins = divmod(minutes, 60)
        return f"{hours}h {mins}m" if mins > 0 else f"{hours}h"
    return f"{minutes} min"
