"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...services.pricing.rates import PRICING_VERSION

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok", "pricingVersion": PRICING_VERSION}
