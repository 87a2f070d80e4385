import pytest

from models.activity import ActivityType
from services.eat import (
    bmr_share_during,
    compute_eat_for_activity,
    compute_eat_jog,
    compute_eat_walk,
    estimate_distance_km,
    intensity_scale,
    sum_eat_from_activities,
)

PROFILE = {"weight_kg": 80, "bmr": 1800}


def test_bmr_share_during() -> None:
    assert bmr_share_during(1800, 30) == pytest.approx(37.5)
    assert bmr_share_during(None, 30) == 0
    assert bmr_share_during(1440, "abc") == 0


def test_walk_with_distance(walk: dict) -> None:
    result = compute_eat_walk(walk, PROFILE)
    assert result.gross == 125
    assert result.bmr_share == 38
    assert result.net == 87


def test_jog_estimates_distance_when_absent() -> None:
    # 8 km/h for 30 min = 4 km
    result = compute_eat_jog(
        {"type": "jog", "duration_min": 30, "intensity": 50}, {"weight_kg": 70, "bmr": 1680}
    )
    assert result.gross == 280
    assert result.bmr_share == 35
    assert result.net == 245


def test_estimated_walk_without_bmr() -> None:
    result = compute_eat_walk({"durationMin": 60, "intensity": 100}, {"weightKg": 80})
    assert result.gross == 374
    assert result.net == 374
    assert result.bmr_share == 0


def test_jog_distance_is_intensity_scaled() -> None:
    result = compute_eat_jog(
        {"distance_km": 5, "duration_min": 30, "intensity": 80}, {"weight_kg": 60, "bmr": 1440}
    )
    assert result.gross == 330
    assert result.net == 300


@pytest.mark.parametrize(
    ("activity_type", "intensity", "expected"),
    [
        (ActivityType.WALK, 50, 1.0),
        (ActivityType.WALK, 0, 0.875),
        (ActivityType.WALK, 100, 1.125),
        (ActivityType.WALK, 500, 1.30),
        (ActivityType.WALK, -500, 0.75),
        (ActivityType.JOG, 0, 0.8333),
        (ActivityType.JOG, 100, 1.1667),
        (ActivityType.JOG, 500, 1.35),
        (ActivityType.JOG, None, 1.0),
    ],
)
def test_intensity_scale(activity_type: ActivityType, intensity, expected: float) -> None:
    scale = intensity_scale(activity_type, intensity)
    assert scale == pytest.approx(expected, rel=1e-3)
    assert 0.75 <= scale <= 1.35


@pytest.mark.parametrize(
    ("activity_type", "intensity", "expected_km"),
    [
        (ActivityType.WALK, 0, 1.5),
        (ActivityType.WALK, 100, 3.0),
        (ActivityType.JOG, 50, 4.0),
        (ActivityType.JOG, 250, 5.0),
    ],
)
def test_estimate_distance_km(activity_type, intensity, expected_km: float) -> None:
    assert estimate_distance_km(activity_type, 30, intensity) == pytest.approx(expected_km)


@pytest.mark.parametrize("intensity", [0, 100])
@pytest.mark.parametrize("activity_type", ["walk", "jog"])
def test_intensity_bounds_never_negative(activity_type: str, intensity: int) -> None:
    for distance in (None, 0, 3):
        activity = {"type": activity_type, "distance_km": distance, "duration_min": 45, "intensity": intensity}
        result = compute_eat_for_activity(activity, PROFILE)
        assert result.gross >= 0
        assert result.net >= 0


@pytest.mark.parametrize(
    ("gross_distance", "duration_min", "bmr"),
    [(0.1, 120, 2000), (0, 600, 2500), (1, 0, 0), (0.5, 1440, 1800)],
)
def test_net_is_never_negative(gross_distance: float, duration_min: int, bmr: int) -> None:
    result = compute_eat_walk(
        {"distance_km": gross_distance, "duration_min": duration_min},
        {"weight_kg": 50, "bmr": bmr},
    )
    assert result.net >= 0


def test_negative_inputs_are_floored() -> None:
    result = compute_eat_walk({"distance_km": -3, "duration_min": -10}, PROFILE)
    assert result.gross == 0
    assert result.net == 0
    assert result.bmr_share == 0


@pytest.mark.parametrize("label", ["swim", None, "", "WALK"])
def test_unknown_or_missing_type_uses_walk_model(label) -> None:
    result = compute_eat_for_activity({"type": label, "distance_km": 1}, {"weight_kg": 100})
    assert result.gross == 78


@pytest.mark.parametrize("label", ["jog", "Jogging", "run"])
def test_jog_aliases(label: str) -> None:
    result = compute_eat_for_activity({"type": label, "distance_km": 1}, {"weight_kg": 100})
    assert result.gross == 100


def test_missing_weight_defaults_to_70kg() -> None:
    assert compute_eat_jog({"distance_km": 1}, {}).gross == 70


def test_profile_override_changes_per_km_constant() -> None:
    profile = {"weight_kg": 100, "walkKcalPerKgPerKm": 1.0}
    assert compute_eat_walk({"distance_km": 1}, profile).gross == 100


def test_sum_over_activities(walk: dict) -> None:
    jog = {"id": "a2", "type": "jog", "duration_min": 30, "intensity": 50}
    summary = sum_eat_from_activities([walk, jog], PROFILE)
    assert summary.total_gross == 125 + 320
    assert summary.total_net == 87 + 283
    assert summary.total_bmr_share == 76
    assert [(d.id, d.type) for d in summary.details] == [("a1", "walk"), ("a2", "jog")]
    assert summary.details[1].net == 283


def test_sum_unwraps_activities_and_profile(walk: dict) -> None:
    summary = sum_eat_from_activities({"activities": [walk], "profile": PROFILE})
    assert summary.total_net == 87


def test_sum_accepts_single_activity(walk: dict) -> None:
    summary = sum_eat_from_activities(walk, PROFILE)
    assert len(summary.details) == 1


@pytest.mark.parametrize("activities", [None, "garbage", 42, [], [1, "x", None]])
def test_sum_degrades_to_empty(activities) -> None:
    summary = sum_eat_from_activities(activities, PROFILE)
    assert summary.total_gross == 0
    assert summary.total_net == 0
    assert summary.details == []


def test_detail_serializes_with_camel_case_keys(walk: dict) -> None:
    detail = sum_eat_from_activities([walk], PROFILE).details[0]
    assert detail.model_dump(by_alias=True) == {
        "gross": 125,
        "net": 87,
        "bmrShare": 38,
        "id": "a1",
        "type": "walk",
    }
