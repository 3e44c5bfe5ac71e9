"""Booking-time re-validation of client-computed quotes."""

from __future__ import annotations

import logging

from ...config import settings
from ...models.domain import ResolvedTier
from ...schemas.pricing import PriceBreakdown, ValidationReport
from .engine import PricingEngine, pricing_engine

logger = logging.getLogger(__name__)


def recompute_quote(submitted: PriceBreakdown, engine: PricingEngine = pricing_engine) -> PriceBreakdown:
    """Price the recorded inputs of a quote again with the engine's rate table."""

    inputs = submitted.inputs
    return engine.calculate(
        inputs.service_type,
        distance_km=inputs.distance_km,
        duration_hours=inputs.duration_hours,
        nurse_experience=ResolvedTier(inputs.nurse_experience_level),
        is_emergency=inputs.is_emergency,
        scheduled_time=inputs.scheduled_time,
    )


# Inputs the engine derives rather than reads from the caller.
DERIVED_INPUTS = ("billableDistanceKm", "billableDurationHours", "nurseExperienceMultiplier")


def _compare(submitted: dict, expected: dict, names, tolerance: float) -> list[str]:
    mismatched: list[str] = []
    for name in names:
        value, other = submitted[name], expected[name]
        if isinstance(value, (int, float)) and isinstance(other, (int, float)):
            if abs(value - other) > tolerance:
                mismatched.append(name)
        elif value != other:
            mismatched.append(name)
    return mismatched


def _mismatched_lines(submitted: PriceBreakdown, recomputed: PriceBreakdown, tolerance: float) -> list[str]:
    lines = submitted.breakdown.model_dump(by_alias=True)
    mismatched = _compare(
        submitted.inputs.model_dump(by_alias=True),
        recomputed.inputs.model_dump(by_alias=True),
        DERIVED_INPUTS,
        tolerance,
    )
    mismatched += _compare(lines, recomputed.breakdown.model_dump(by_alias=True), lines, tolerance)
    return mismatched


def validate_quote(
    submitted: PriceBreakdown,
    tolerance: float | None = None,
    engine: PricingEngine = pricing_engine,
) -> ValidationReport:
    """Check a submitted quote against a fresh computation.

    A quote is valid when it was priced with the current table version, its
    client estimate is within ``tolerance`` of the recomputed one and no line
    item drifts further than that.
    """

    tolerance = settings.quote_tolerance if tolerance is None else tolerance
    recomputed = recompute_quote(submitted, engine)
    current_version = engine.rates.version
    version_matches = submitted.pricing_version == current_version
    difference = round(abs(submitted.client_estimate - recomputed.client_estimate), 6)
    mismatched = _mismatched_lines(submitted, recomputed, tolerance)

    valid = version_matches and difference <= tolerance and not mismatched
    if not version_matches:
        logger.warning(
            f"Quote priced with version {submitted.pricing_version!r}, current is {current_version!r}"
        )
    if not valid:
        logger.warning(
            f"Quote rejected: submitted={submitted.client_estimate} recomputed={recomputed.client_estimate} "
            f"mismatched={mismatched}"
        )

    return ValidationReport(
        valid=valid,
        version_matches=version_matches,
        submitted_version=submitted.pricing_version,
        current_version=current_version,
        submitted_estimate=submitted.client_estimate,
        recomputed_estimate=recomputed.client_estimate,
        difference=difference,
        tolerance=tolerance,
        mismatched_fields=mismatched,
        recomputed=recomputed,
    )
