"""Compiled-in pricing configuration.

Every value that feeds a fare lives here. ``PRICING_VERSION`` is bumped whenever
any rate, tier or window changes so stored quotes can be audited against the
table that priced them.
"""

from __future__ import annotations

import math
from dataclasses import asdict
from typing import Any

from ...models.domain import ExperienceTier, RateTable, SurgeWindow

PRICING_VERSION = "v1"

DEFAULT_SERVICE = "General Care"
EMERGENCY_SERVICE = "Emergency"

# Services offered by the booking form, in display order.
SERVICE_CATALOGUE: tuple[dict[str, str], ...] = (
    {"name": "General Care", "description": "Basic nursing care"},
    {"name": "Elderly Care", "description": "Specialized elderly support"},
    {"name": "Post-Surgery", "description": "Post-operative care"},
    {"name": "IV Therapy", "description": "Intravenous treatments"},
    {"name": "Wound Care", "description": "Professional wound management"},
    {"name": "Emergency", "description": "Urgent medical needs"},
)

BASE_FARES: dict[str, float] = {
    "General Care": 300,
    "Elderly Care": 400,
    "Post-Surgery": 500,
    "Post Surgery Care": 500,
    "IV Therapy": 600,
    "Wound Care": 450,
    "Emergency": 800,
    "Home Care": 300,
    "Medication Management": 300,
}

# Ascending by max_years; the last tier is unbounded.
EXPERIENCE_TIERS: tuple[ExperienceTier, ...] = (
    ExperienceTier(key="junior", label="Junior", multiplier=1.0, max_years=2),
    ExperienceTier(key="mid", label="Mid-Level", multiplier=1.2, max_years=5),
    ExperienceTier(key="senior", label="Senior", multiplier=1.5, max_years=math.inf),
)

# Evaluated in order, first match wins.
SURGE_WINDOWS: tuple[SurgeWindow, ...] = (
    SurgeWindow(label="Late Night", multiplier=2.0, day_type="any", start_hour=22, end_hour=6),
    SurgeWindow(label="Morning Rush", multiplier=1.5, day_type="weekday", start_hour=7, end_hour=9),
    SurgeWindow(label="Evening Rush", multiplier=1.5, day_type="weekday", start_hour=17, end_hour=20),
    SurgeWindow(label="Weekend Rush", multiplier=1.8, day_type="weekend", start_hour=17, end_hour=22),
)

RATE_TABLE = RateTable(
    version=PRICING_VERSION,
    base_fares=BASE_FARES,
    default_service=DEFAULT_SERVICE,
    emergency_service=EMERGENCY_SERVICE,
    distance_rate_per_km=15,
    free_radius_km=2,
    duration_rate_per_hour=25,
    included_hours=1,
    emergency_surcharge=300,
    platform_fee=50,
    tax_rate=0.10,
    experience_tiers=EXPERIENCE_TIERS,
    surge_windows=SURGE_WINDOWS,
    travel_speeds_kmh={EMERGENCY_SERVICE: 30},
    default_speed_kmh=20,
    timezone="Asia/Kolkata",
)


def base_fare(service_type: str | None, rates: RateTable = RATE_TABLE) -> float:
    """Return the base fare for a service, falling back to the default service."""

    fare = rates.base_fares.get(service_type or "")
    if fare is None:
        return rates.base_fares[rates.default_service]
    return fare


def get_tier(key: str, rates: RateTable = RATE_TABLE) -> ExperienceTier | None:
    for tier in rates.experience_tiers:
        if tier.key == key:
            return tier
    return None


def resolve_experience_tier(years: float, rates: RateTable = RATE_TABLE) -> str:
    """Map years of experience onto the tier whose bound first covers it."""

    tiers = rates.experience_tiers
    if math.isnan(years) or years <= 0:
        return tiers[0].key
    for tier in tiers[:-1]:
        if years <= tier.max_years:
            return tier.key
    return tiers[-1].key


def travel_speed_kmh(service_type: str | None, rates: RateTable = RATE_TABLE) -> float:
    return rates.travel_speeds_kmh.get(service_type or "", rates.default_speed_kmh)


def is_emergency_service(service_type: str | None, rates: RateTable = RATE_TABLE) -> bool:
    return service_type == rates.emergency_service


def rate_table_snapshot(rates: RateTable = RATE_TABLE) -> dict[str, Any]:
    """JSON-friendly view of the rate table; the unbounded tier reports ``None``."""

    payload = asdict(rates)
    for tier in payload["experience_tiers"]:
        if math.isinf(tier["max_years"]):
            tier["max_years"] = None
    payload["experience_tiers"] = list(payload["experience_tiers"])
    payload["surge_windows"] = list(payload["surge_windows"])
    payload["services"] = [dict(service) for service in SERVICE_CATALOGUE]
    return payload
