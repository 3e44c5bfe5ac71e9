"""Pricing engine: turns raw booking parameters into an itemized fare.

The engine is stateless apart from the immutable rate table it is built with,
so a single module-level instance is shared by every caller.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional, Sequence, Union
from zoneinfo import ZoneInfo

from ...models.domain import (
    DayType,
    ExperienceInput,
    ExperienceTier,
    RateTable,
    ResolvedTier,
    SurgeResult,
    SurgeWindow,
    YearsOfExperience,
)
from ...schemas.pricing import FareLines, PriceBreakdown, PriceInputs
from ..geospatial import billable_distance, billable_duration
from ..rounding import round_half_up
from .composer import compose_fare
from .rates import RATE_TABLE, base_fare, get_tier, is_emergency_service, resolve_experience_tier

logger = logging.getLogger(__name__)

ScheduledTime = Union[datetime, str, None]


def experience_from_raw(value: Any, rates: RateTable = RATE_TABLE) -> ExperienceInput:
    """Parse a loosely typed experience value into the tagged union.

    Known tier keys pass through, numbers and numeric strings become years,
    anything else counts as zero years.
    """

    if isinstance(value, str):
        candidate = value.strip()
        if get_tier(candidate, rates) is not None:
            return ResolvedTier(candidate)
        try:
            return YearsOfExperience(float(candidate))
        except ValueError:
            return YearsOfExperience(0)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return YearsOfExperience(float(value))
    return YearsOfExperience(0)


def resolve_experience(experience: ExperienceInput, rates: RateTable = RATE_TABLE) -> ExperienceTier:
    match experience:
        case ResolvedTier(key=key):
            tier = get_tier(key, rates)
        case YearsOfExperience(years=years):
            tier = get_tier(resolve_experience_tier(years, rates), rates)
        case _:
            tier = None
    return tier or rates.experience_tiers[0]


def day_type_for(moment: datetime) -> DayType:
    # Saturday and Sunday
    return "weekend" if moment.weekday() >= 5 else "weekday"


def resolve_surge(moment: datetime, windows: Sequence[SurgeWindow]) -> SurgeResult:
    """Return the first window matching the moment's day type and hour."""

    day_type = day_type_for(moment)
    for window in windows:
        if window.applies_to(day_type) and window.contains_hour(moment.hour):
            return SurgeResult(multiplier=window.multiplier, label=window.label)
    return SurgeResult()


def local_moment(scheduled_time: ScheduledTime, timezone: str) -> datetime:
    """Wall-clock time used for surge matching.

    Naive datetimes are already local; aware ones are converted into the rate
    table's time zone; ``None`` means now.
    """

    zone = ZoneInfo(timezone)
    if scheduled_time is None:
        return datetime.now(zone)
    if isinstance(scheduled_time, str):
        scheduled_time = datetime.fromisoformat(scheduled_time)
    if scheduled_time.tzinfo is not None:
        return scheduled_time.astimezone(zone)
    return scheduled_time


class PricingEngine:
    """Single-shot fare calculation over a fixed rate table."""

    def __init__(self, rates: RateTable = RATE_TABLE) -> None:
        self.rates = rates

    def calculate(
        self,
        service_type: str,
        distance_km: Optional[float] = 0.0,
        duration_hours: Optional[float] = 1.0,
        nurse_experience: ExperienceInput = YearsOfExperience(0),
        is_emergency: bool = False,
        scheduled_time: ScheduledTime = None,
    ) -> PriceBreakdown:
        rates = self.rates
        distance_km = float(distance_km or 0.0)
        duration_hours = float(duration_hours or 0.0)

        fare = base_fare(service_type, rates)

        billable_km = billable_distance(distance_km, rates)
        distance_fare = billable_km * rates.distance_rate_per_km

        billable_hours = billable_duration(duration_hours, rates)
        duration_fare = billable_hours * rates.duration_rate_per_hour

        tier = resolve_experience(nurse_experience, rates)

        moment = local_moment(scheduled_time, rates.timezone)
        surge = resolve_surge(moment, rates.surge_windows)
        logger.debug(
            f"Pricing {service_type!r}: tier={tier.key} surge={surge.label or 'none'} at {moment.isoformat()}"
        )

        emergency = is_emergency or is_emergency_service(service_type, rates)
        emergency_surcharge = rates.emergency_surcharge if emergency else 0.0

        totals = compose_fare(
            base_fare=fare,
            distance_fare=distance_fare,
            duration_fare=duration_fare,
            experience_multiplier=tier.multiplier,
            surge_multiplier=surge.multiplier,
            emergency_surcharge=emergency_surcharge,
            rates=rates,
        )

        # Each line is rounded on its own; the lines may not sum to the estimate.
        return PriceBreakdown(
            pricing_version=rates.version,
            inputs=PriceInputs(
                service_type=service_type,
                distance_km=distance_km,
                billable_distance_km=round_half_up(billable_km, 1),
                duration_hours=duration_hours,
                billable_duration_hours=round_half_up(billable_hours, 2),
                nurse_experience_level=tier.key,
                nurse_experience_multiplier=tier.multiplier,
                is_emergency=emergency,
                scheduled_time=moment,
            ),
            breakdown=FareLines(
                base_fare=round_half_up(fare),
                distance_fare=round_half_up(distance_fare),
                duration_fare=round_half_up(duration_fare),
                core_cost=round_half_up(totals.core_cost),
                experience_multiplier=tier.multiplier,
                experience_label=tier.label,
                after_experience=round_half_up(totals.after_experience),
                surge_multiplier=surge.multiplier,
                surge_label=surge.label,
                after_surge=round_half_up(totals.after_surge),
                emergency_surcharge=round_half_up(emergency_surcharge),
                tax=round_half_up(totals.tax),
                platform_fee=round_half_up(totals.platform_fee),
            ),
            client_estimate=round_half_up(totals.total),
        )


pricing_engine = PricingEngine()


def calculate(
    service_type: str,
    distance_km: Optional[float] = 0.0,
    duration_hours: Optional[float] = 1.0,
    nurse_experience: ExperienceInput = YearsOfExperience(0),
    is_emergency: bool = False,
    scheduled_time: ScheduledTime = None,
) -> PriceBreakdown:
    return pricing_engine.calculate(
        service_type,
        distance_km=distance_km,
        duration_hours=duration_hours,
        nurse_experience=nurse_experience,
        is_emergency=is_emergency,
        scheduled_time=scheduled_time,
    )
