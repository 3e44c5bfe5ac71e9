"""High-level orchestration for quote requests."""

from __future__ import annotations

import logging

from ..persistence.filesystem import FileStorage
from ..schemas.pricing import PriceBreakdown, PriceRequest, QuoteResponse
from .pricing.engine import experience_from_raw, pricing_engine


def process_price_request(request: PriceRequest) -> QuoteResponse:
    """Price a request and, when asked to, store the quote alongside its id."""

    breakdown = pricing_engine.calculate(
        request.service_type,
        distance_km=request.distance_km,
        duration_hours=request.duration_hours,
        nurse_experience=experience_from_raw(request.nurse_experience),
        is_emergency=request.is_emergency,
        scheduled_time=request.scheduled_time,
    )

    quote_id = None
    if request.persist:
        storage = FileStorage()
        quote_id = storage.save_quote(breakdown.model_dump(by_alias=True))
        logging.info(f"Stored quote {quote_id} ({breakdown.client_estimate} for {request.service_type!r})")

    return QuoteResponse(**breakdown.model_dump(), quote_id=quote_id)


def get_quote(quote_id: str) -> QuoteResponse:
    payload = FileStorage().load_quote(quote_id)
    return QuoteResponse.model_validate(payload)


def list_quote_ids(limit: int | None = None) -> list[str]:
    quote_ids = FileStorage().list_quotes()
    return quote_ids[:limit] if limit else quote_ids


def stored_breakdown(quote_id: str) -> PriceBreakdown:
    quote = get_quote(quote_id)
    return PriceBreakdown.model_validate(quote.model_dump(exclude={"quote_id"}))
