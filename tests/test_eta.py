import math

import pytest

from carefare.models.domain import GeoPoint
from carefare.services.eta import estimate_distance_and_eta, format_distance, format_eta
from carefare.services.geospatial import great_circle_distance_km

ORIGIN = GeoPoint(lat=0.0, lng=0.0)
EAST = GeoPoint(lat=0.0, lng=0.1)


def test_estimate_rounds_only_at_the_boundary():
    estimate = estimate_distance_and_eta(ORIGIN, EAST, "Wound Care")

    assert estimate.distance_km == 11.1
    assert estimate.billable_distance_km == 9.1
    assert estimate.eta_minutes == 34


def test_emergency_uses_faster_travel_speed():
    emergency = estimate_distance_and_eta(ORIGIN, EAST, "Emergency")
    default = estimate_distance_and_eta(ORIGIN, EAST)

    assert emergency.eta_minutes == 23
    assert emergency.eta_minutes < default.eta_minutes


def test_unknown_service_falls_back_to_default_speed():
    patient = GeoPoint(lat=12.9716, lng=77.5946)
    nurse = GeoPoint(lat=12.9352, lng=77.6245)
    raw_km = great_circle_distance_km(patient, nurse)

    estimate = estimate_distance_and_eta(patient, nurse, "Reiki")

    assert estimate.eta_minutes == math.ceil(raw_km / 20 * 60)


def test_same_location_has_zero_eta():
    estimate = estimate_distance_and_eta(ORIGIN, ORIGIN)
    assert estimate.distance_km == 0.0
    assert estimate.billable_distance_km == 0.0
    assert estimate.eta_minutes == 0


@pytest.mark.parametrize(("km", "text"), [(0.85, "850m"), (0.0, "0m"), (1.0, "1.0 km"), (3.44, "3.4 km")])
def test_format_distance(km, text):
    assert format_distance(km) == text


@pytest.mark.parametrize(
    ("minutes", "text"),
    [(0, "< 1 min"), (1, "1 min"), (25, "25 min"), (60, "1h"), (65, "1h 5m"), (120, "2h")],
)
def test_format_eta(minutes, text):
    assert format_eta(minutes) == text
