"""Geo request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..models.domain import GeoPoint


class GeoPointModel(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)

    def to_domain(self) -> GeoPoint:
        return GeoPoint(lat=self.lat, lng=self.lng)


class EtaRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    patient: GeoPointModel
    provider: GeoPointModel
    service_type: str = Field("", alias="serviceType")


class EtaResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    distance_km: float = Field(..., alias="distanceKm")
    billable_distance_km: float = Field(..., alias="billableDistanceKm")
    eta_minutes: int = Field(..., alias="etaMinutes")
    distance_text: str = Field(..., alias="distanceText")
    eta_text: str = Field(..., alias="etaText")


class GeohashResponse(BaseModel):
    lat: float
    lng: float
    precision: int
    geohash: str
