from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from carefare.main import create_app
from carefare.persistence.filesystem import FileStorage

ELDERLY_CARE_REQUEST = {
    "serviceType": "Elderly Care",
    "distanceKm": 5,
    "durationHours": 2,
    "nurseExperience": 8,
    "isEmergency": False,
    "scheduledTime": "2026-10-20T11:00:00",
}


@pytest.fixture
def api_client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    app = create_app()
    client = TestClient(app)

    # keep quote writes inside the test's tmpdir
    from carefare.services import quotes as quote_service

    monkeypatch.setattr(quote_service, "FileStorage", lambda: FileStorage(root=tmp_path))

    return client


def test_root_and_health(api_client: TestClient):
    assert api_client.get("/").json()["status"] == "running"
    health = api_client.get("/api/health")
    assert health.status_code == 200
    assert health.json() == {"status": "ok", "pricingVersion": "v1"}


def test_pricing_config_endpoint(api_client: TestClient):
    response = api_client.get("/api/pricing/config")

    assert response.status_code == 200
    payload = response.json()
    assert payload["version"] == "v1"
    assert payload["base_fares"]["Elderly Care"] == 400


def test_estimate_endpoint_returns_stable_shape(api_client: TestClient, tmp_path: Path):
    response = api_client.post("/api/pricing/estimate", json=ELDERLY_CARE_REQUEST)

    assert response.status_code == 200
    payload = response.json()
    assert set(payload) == {"pricingVersion", "inputs", "breakdown", "clientEstimate", "quoteId"}
    assert payload["clientEstimate"] == 825.5
    assert payload["quoteId"] is None
    assert payload["inputs"]["nurseExperienceLevel"] == "senior"
    assert payload["breakdown"]["coreCost"] == 470
    assert payload["breakdown"]["surgeLabel"] is None
    assert not list((tmp_path / "outputs" / "quotes").glob("*.json"))


def test_estimate_accepts_tier_key(api_client: TestClient):
    request = {**ELDERLY_CARE_REQUEST, "nurseExperience": "mid"}
    payload = api_client.post("/api/pricing/estimate", json=request).json()

    assert payload["breakdown"]["experienceLabel"] == "Mid-Level"
    assert payload["breakdown"]["afterExperience"] == 564


def test_estimate_rejects_non_numeric_distance(api_client: TestClient):
    request = {**ELDERLY_CARE_REQUEST, "distanceKm": "far"}
    assert api_client.post("/api/pricing/estimate", json=request).status_code == 422


@pytest.mark.parametrize(
    "body",
    [
        '{"serviceType": "Elderly Care", "distanceKm": Infinity}',
        '{"serviceType": "Elderly Care", "durationHours": Infinity}',
        '{"serviceType": "Elderly Care", "distanceKm": NaN}',
    ],
)
def test_estimate_rejects_non_finite_numbers(api_client: TestClient, body: str):
    response = api_client.post("/api/pricing/estimate", content=body, headers={"content-type": "application/json"})
    assert response.status_code == 422


def test_persisted_quote_round_trip(api_client: TestClient, tmp_path: Path):
    created = api_client.post("/api/pricing/estimate", json={**ELDERLY_CARE_REQUEST, "persist": True}).json()
    quote_id = created["quoteId"]

    assert quote_id
    assert (tmp_path / "outputs" / "quotes" / f"{quote_id}.json").exists()

    fetched = api_client.get(f"/api/quotes/{quote_id}")
    assert fetched.status_code == 200
    assert fetched.json() == created

    assert api_client.get("/api/quotes").json() == [quote_id]

    report = api_client.post(f"/api/quotes/{quote_id}/validate")
    assert report.status_code == 200
    assert report.json()["valid"] is True


def test_unknown_quote_returns_404(api_client: TestClient):
    assert api_client.get("/api/quotes/q_20261020T110000Z_deadbeef").status_code == 404
    assert api_client.post("/api/quotes/missing/validate").status_code == 404


def test_validate_endpoint(api_client: TestClient):
    quote = api_client.post("/api/pricing/estimate", json=ELDERLY_CARE_REQUEST).json()
    quote.pop("quoteId")

    accepted = api_client.post("/api/pricing/validate", json={"quote": quote}).json()
    assert accepted["valid"] is True
    assert accepted["recomputed"]["clientEstimate"] == 825.5

    quote["clientEstimate"] = 500.0
    rejected = api_client.post("/api/pricing/validate", json={"quote": quote, "tolerance": 1.0}).json()
    assert rejected["valid"] is False
    assert rejected["difference"] == 325.5


def test_validate_rejects_malformed_scheduled_time(api_client: TestClient):
    quote = api_client.post("/api/pricing/estimate", json=ELDERLY_CARE_REQUEST).json()
    quote.pop("quoteId")
    quote["inputs"]["scheduledTime"] = "not-a-time"

    response = api_client.post("/api/pricing/validate", json={"quote": quote})

    assert response.status_code == 422


def test_eta_endpoint(api_client: TestClient):
    response = api_client.post(
        "/api/geo/eta",
        json={"patient": {"lat": 0.0, "lng": 0.0}, "provider": {"lat": 0.0, "lng": 0.1}, "serviceType": "Emergency"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "distanceKm": 11.1,
        "billableDistanceKm": 9.1,
        "etaMinutes": 23,
        "distanceText": "11.1 km",
        "etaText": "23 min",
    }


def test_geohash_endpoint(api_client: TestClient):
    response = api_client.get("/api/geo/geohash", params={"lat": 57.64911, "lng": 10.40744})

    assert response.status_code == 200
    assert response.json()["geohash"] == "u4pru"
    assert response.json()["precision"] == 5

    assert api_client.get("/api/geo/geohash", params={"lat": 95, "lng": 0}).status_code == 422
