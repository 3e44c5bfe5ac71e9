"""Pydantic request/response models for pricing endpoints.

``PriceBreakdown`` is also the engine's return type and the payload persisted
with a booking, so its aliases are a stable wire contract.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class PriceInputs(BaseModel):
    """Inputs as priced, kept so the fare can be recomputed later."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    service_type: str = Field(..., alias="serviceType")
    distance_km: float = Field(..., alias="distanceKm", allow_inf_nan=False)
    billable_distance_km: float = Field(..., alias="billableDistanceKm")
    duration_hours: float = Field(..., alias="durationHours", allow_inf_nan=False)
    billable_duration_hours: float = Field(..., alias="billableDurationHours")
    nurse_experience_level: str = Field(..., alias="nurseExperienceLevel")
    nurse_experience_multiplier: float = Field(..., alias="nurseExperienceMultiplier")
    is_emergency: bool = Field(..., alias="isEmergency")
    scheduled_time: datetime = Field(..., alias="scheduledTime")

    @field_serializer("scheduled_time")
    def _serialize_scheduled_time(self, value: datetime) -> str:
        return value.isoformat()


class FareLines(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    base_fare: float = Field(..., alias="baseFare")
    distance_fare: float = Field(..., alias="distanceFare")
    duration_fare: float = Field(..., alias="durationFare")
    core_cost: float = Field(..., alias="coreCost")
    experience_multiplier: float = Field(..., alias="experienceMultiplier")
    experience_label: str = Field(..., alias="experienceLabel")
    after_experience: float = Field(..., alias="afterExperience")
    surge_multiplier: float = Field(..., alias="surgeMultiplier")
    surge_label: Optional[str] = Field(None, alias="surgeLabel")
    after_surge: float = Field(..., alias="afterSurge")
    emergency_surcharge: float = Field(..., alias="emergencySurcharge")
    tax: float
    platform_fee: float = Field(..., alias="platformFee")


class PriceBreakdown(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    pricing_version: str = Field(..., alias="pricingVersion")
    inputs: PriceInputs
    breakdown: FareLines
    client_estimate: float = Field(..., alias="clientEstimate")


class QuoteResponse(PriceBreakdown):
    quote_id: Optional[str] = Field(None, alias="quoteId")


class PriceRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    service_type: str = Field(..., alias="serviceType", description="Requested service, e.g. 'Elderly Care'.")
    distance_km: Optional[float] = Field(
        0.0, alias="distanceKm", allow_inf_nan=False, description="Distance from the nurse in km."
    )
    duration_hours: Optional[float] = Field(
        1.0, alias="durationHours", allow_inf_nan=False, description="Session length in hours."
    )
    nurse_experience: Union[float, str, None] = Field(
        default=0,
        alias="nurseExperience",
        description="Years of experience, or a tier key such as 'senior'.",
    )
    is_emergency: bool = Field(False, alias="isEmergency")
    scheduled_time: Optional[datetime] = Field(
        default=None,
        alias="scheduledTime",
        description="When the visit is booked for; omitted means now.",
    )
    persist: bool = Field(default=False, description="Store the quote and return its id.")


class ValidationRequest(BaseModel):
    quote: PriceBreakdown
    tolerance: Optional[float] = Field(default=None, ge=0.0)


class ValidationReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    valid: bool
    version_matches: bool = Field(..., alias="versionMatches")
    submitted_version: str = Field(..., alias="submittedVersion")
    current_version: str = Field(..., alias="currentVersion")
    submitted_estimate: float = Field(..., alias="submittedEstimate")
    recomputed_estimate: float = Field(..., alias="recomputedEstimate")
    difference: float
    tolerance: float
    mismatched_fields: List[str] = Field(default_factory=list, alias="mismatchedFields")
    recomputed: PriceBreakdown
