import json
import math

import pytest

from carefare.services.pricing.rates import (
    BASE_FARES,
    PRICING_VERSION,
    RATE_TABLE,
    SERVICE_CATALOGUE,
    base_fare,
    get_tier,
    is_emergency_service,
    rate_table_snapshot,
    resolve_experience_tier,
    travel_speed_kmh,
)


def test_every_offered_service_has_a_base_fare():
    for service in SERVICE_CATALOGUE:
        assert service["name"] in BASE_FARES


def test_base_fare_falls_back_to_general_care():
    assert base_fare("Elderly Care") == 400
    assert base_fare("Aromatherapy") == BASE_FARES["General Care"]
    assert base_fare("") == BASE_FARES["General Care"]
    assert base_fare(None) == BASE_FARES["General Care"]


def test_alias_keys_share_the_canonical_rate():
    assert base_fare("Post Surgery Care") == base_fare("Post-Surgery")
    assert base_fare("Home Care") == base_fare("General Care")
    assert base_fare("Medication Management") == base_fare("General Care")


@pytest.mark.parametrize(
    ("years", "expected"),
    [
        (-3, "junior"),
        (0, "junior"),
        (1, "junior"),
        (2, "junior"),
        (2.5, "mid"),
        (5, "mid"),
        (6, "senior"),
        (40, "senior"),
        (math.inf, "senior"),
        (math.nan, "junior"),
    ],
)
def test_resolve_experience_tier(years, expected):
    assert resolve_experience_tier(years) == expected


def test_tiers_partition_years_without_gaps():
    bounds = [tier.max_years for tier in RATE_TABLE.experience_tiers]
    assert bounds == sorted(bounds)
    assert math.isinf(bounds[-1])
    for tenth in range(0, 200):
        years = tenth / 10
        matches = [
            tier.key
            for index, tier in enumerate(RATE_TABLE.experience_tiers)
            if years <= tier.max_years
            and (index == 0 or years > RATE_TABLE.experience_tiers[index - 1].max_years)
        ]
        assert matches == [resolve_experience_tier(years)]


def test_get_tier_unknown_key():
    assert get_tier("mid").multiplier == 1.2
    assert get_tier("principal") is None


def test_travel_speed_and_emergency_service():
    assert travel_speed_kmh("Emergency") == 30
    assert travel_speed_kmh("Wound Care") == 20
    assert travel_speed_kmh(None) == 20
    assert is_emergency_service("Emergency")
    assert not is_emergency_service("emergency")


def test_rate_table_snapshot_is_json_ready():
    snapshot = rate_table_snapshot()

    assert snapshot["version"] == PRICING_VERSION
    assert snapshot["experience_tiers"][-1]["max_years"] is None
    assert [window["label"] for window in snapshot["surge_windows"]] == [
        "Late Night",
        "Morning Rush",
        "Evening Rush",
        "Weekend Rush",
    ]
    assert len(snapshot["services"]) == len(SERVICE_CATALOGUE)
    json.dumps(snapshot)
