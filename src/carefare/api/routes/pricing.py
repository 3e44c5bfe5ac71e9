"""Fare estimate and validation endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...schemas.pricing import QuoteResponse, PriceRequest, ValidationReport, ValidationRequest
from ...services.pricing.rates import rate_table_snapshot
from ...services.pricing.validation import validate_quote
from ...services.quotes import process_price_request

router = APIRouter(prefix="/pricing", tags=["pricing"])


@router.get("/config", status_code=status.HTTP_200_OK)
def get_pricing_config() -> dict:
    """Current rate table, tiers and surge windows with their version tag."""
    return rate_table_snapshot()


@router.post("/estimate", response_model=QuoteResponse)
def estimate_price(payload: PriceRequest) -> QuoteResponse:
    return process_price_request(payload)


@router.post("/validate", response_model=ValidationReport)
def validate_price(payload: ValidationRequest) -> ValidationReport:
    return validate_quote(payload.quote, tolerance=payload.tolerance)
