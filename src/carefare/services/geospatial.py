"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Optional

from ..models.domain import GeoPoint, RateTable
from .pricing.rates import RATE_TABLE

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def great_circle_distance_km(a: GeoPoint, b: GeoPoint) -> float:
    return haversine_km(a.lat, a.lng, b.lat, b.lng)


def billable_distance(raw_km: Optional[float], rates: RateTable = RATE_TABLE) -> float:
    """Distance left after the free radius, never negative."""

    return max(0.0, (raw_km or 0.0) - rates.free_radius_km)


def billable_duration(raw_hours: Optional[float], rates: RateTable = RATE_TABLE) -> float:
    """Hours left after the included allowance, never negative."""

    return max(0.0, (raw_hours or 0.0) - rates.included_hours)
