"""Five-stage fare pipeline.

Stages run in a fixed order and every intermediate amount is kept:

1. ``core_cost = base_fare + distance_fare + duration_fare``
2. ``after_experience = core_cost * experience_multiplier``
3. ``after_surge = after_experience * surge_multiplier``
4. ``tax = after_surge * tax_rate``
5. ``total = after_surge + emergency_surcharge + tax + platform_fee``

The emergency surcharge and platform fee are flat add-ons outside the taxable
base. Nothing is rounded here; the booking validator recomputes the same
sequence, so reordering any stage changes the total.
"""

from __future__ import annotations

from ...models.domain import FareTotals, RateTable
from .rates import RATE_TABLE


def compose_fare(
    *,
    base_fare: float = 0.0,
    distance_fare: float = 0.0,
    duration_fare: float = 0.0,
    experience_multiplier: float = 1.0,
    surge_multiplier: float = 1.0,
    emergency_surcharge: float = 0.0,
    rates: RateTable = RATE_TABLE,
) -> FareTotals:
    core_cost = base_fare + distance_fare + duration_fare
    after_experience = core_cost * experience_multiplier
    after_surge = after_experience * surge_multiplier
    tax = after_surge * rates.tax_rate
    total = after_surge + emergency_surcharge + tax + rates.platform_fee
    return FareTotals(
        core_cost=core_cost,
        after_experience=after_experience,
        after_surge=after_surge,
        tax=tax,
        platform_fee=rates.platform_fee,
        total=total,
    )
