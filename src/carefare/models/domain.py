"""Domain models for pricing configuration, locations and fare results."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, Optional, Union

DayType = Literal["weekday", "weekend", "any"]


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lng: float


@dataclass(frozen=True, slots=True)
class ExperienceTier:
    """Provider experience bracket applying a multiplier to the core cost."""

    key: str
    label: str
    multiplier: float
    max_years: float = math.inf


@dataclass(frozen=True, slots=True)
class SurgeWindow:
    """Time-of-day rule; ``start_hour > end_hour`` wraps past midnight."""

    label: str
    multiplier: float
    day_type: DayType
    start_hour: int
    end_hour: int

    def contains_hour(self, hour: int) -> bool:
        if self.start_hour < self.end_hour:
            return self.start_hour <= hour < self.end_hour
        return hour >= self.start_hour or hour < self.end_hour

    def applies_to(self, day_type: DayType) -> bool:
        return self.day_type == "any" or self.day_type == day_type


@dataclass(frozen=True, slots=True)
class RateTable:
    """Versioned, immutable set of every value that feeds a fare."""

    version: str
    base_fares: dict[str, float]
    default_service: str
    emergency_service: str
    distance_rate_per_km: float
    free_radius_km: float
    duration_rate_per_hour: float
    included_hours: float
    emergency_surcharge: float
    platform_fee: float
    tax_rate: float
    experience_tiers: tuple[ExperienceTier, ...]
    surge_windows: tuple[SurgeWindow, ...]
    travel_speeds_kmh: dict[str, float]
    default_speed_kmh: float
    timezone: str


@dataclass(frozen=True, slots=True)
class YearsOfExperience:
    years: float


@dataclass(frozen=True, slots=True)
class ResolvedTier:
    key: str


ExperienceInput = Union[YearsOfExperience, ResolvedTier]


@dataclass(frozen=True, slots=True)
class SurgeResult:
    multiplier: float = 1.0
    label: Optional[str] = None


@dataclass(frozen=True, slots=True)
class FareTotals:
    """Unrounded output of every stage of the fare pipeline."""

    core_cost: float
    after_experience: float
    after_surge: float
    tax: float
    platform_fee: float
    total: float


@dataclass(frozen=True, slots=True)
class DistanceEstimate:
    distance_km: float
    billable_distance_km: float
    eta_minutes: int
