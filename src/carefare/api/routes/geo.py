"""Distance, ETA and geohash endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Query

from ...config import settings
from ...models.domain import GeoPoint
from ...schemas.geo import EtaRequest, EtaResponse, GeohashResponse
from ...services.eta import estimate_distance_and_eta, format_distance, format_eta
from ...services.geohash import encode_geohash

router = APIRouter(prefix="/geo", tags=["geo"])


@router.post("/eta", response_model=EtaResponse)
def estimate_eta(payload: EtaRequest) -> EtaResponse:
    estimate = estimate_distance_and_eta(
        payload.patient.to_domain(),
        payload.provider.to_domain(),
        payload.service_type,
    )
    return EtaResponse(
        distance_km=estimate.distance_km,
        billable_distance_km=estimate.billable_distance_km,
        eta_minutes=estimate.eta_minutes,
        distance_text=format_distance(estimate.distance_km),
        eta_text=format_eta(estimate.eta_minutes),
    )


@router.get("/geohash", response_model=GeohashResponse)
def geohash(
    lat: float = Query(..., ge=-90.0, le=90.0),
    lng: float = Query(..., ge=-180.0, le=180.0),
    precision: int | None = Query(default=None, ge=1, le=12),
) -> GeohashResponse:
    precision = precision or settings.default_geohash_precision
    return GeohashResponse(
        lat=lat,
        lng=lng,
        precision=precision,
        geohash=encode_geohash(GeoPoint(lat=lat, lng=lng), precision),
    )
