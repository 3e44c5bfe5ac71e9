"""Stored quote endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Path, Query, status
from pydantic import ValidationError

from ...persistence.filesystem import QuoteNotFoundError
from ...schemas.pricing import QuoteResponse, ValidationReport
from ...services.pricing.validation import validate_quote
from ...services.quotes import get_quote, list_quote_ids, stored_breakdown

router = APIRouter(prefix="/quotes", tags=["quotes"])


@router.get("", response_model=list[str])
def get_quote_ids(
    limit: int | None = Query(default=None, gt=0, description="Maximum number of quote ids to return"),
) -> list[str]:
    return list_quote_ids(limit=limit)


@router.get("/{quote_id}", response_model=QuoteResponse)
def read_quote(quote_id: str = Path(..., description="Stored quote identifier")) -> QuoteResponse:
    try:
        return get_quote(quote_id)
    except QuoteNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Stored quote '{quote_id}' is malformed",
        ) from exc


@router.post("/{quote_id}/validate", response_model=ValidationReport)
def validate_stored_quote(
    quote_id: str = Path(..., description="Stored quote identifier"),
    tolerance: float | None = Query(default=None, ge=0.0),
) -> ValidationReport:
    try:
        breakdown = stored_breakdown(quote_id)
    except QuoteNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return validate_quote(breakdown, tolerance=tolerance)
