import pytest

from services.tdee import (
    calculate_effective_workout,
    compute_advanced_activity_factor,
    compute_tdee_from_af_and_tef,
)
from utils.coercion import round_half_up


def test_advanced_activity_factor_composes_bmr_neat_eat(walk: dict) -> None:
    result = compute_advanced_activity_factor(
        bmr=1800,
        weight_kg=80,
        activities=[walk],
        steps=3000,
        survey={"subjective": 60},
    )
    assert result.eat == 87
    assert result.neat == 161
    assert result.af_advanced == pytest.approx(1.138)
    assert result.af_advanced > 1.0
    assert result.maintenance_plus_activity == 2048
    assert [d.id for d in result.eat_details] == ["a1"]


def test_legacy_workout_fields_do_not_leak_into_advanced_factor() -> None:
    result = compute_advanced_activity_factor(
        bmr=1800,
        weight_kg=80,
        activities=[],
        steps=4000,
        survey={"subjective": 50},
        workoutCalories=800,
        intensityFactor=2,
    )
    assert result.eat == 0
    assert result.neat == compute_advanced_activity_factor(
        bmr=1800, weight_kg=80, steps=4000, survey={"subjective": 50}
    ).neat


def test_advanced_factor_without_bmr_is_one() -> None:
    result = compute_advanced_activity_factor(bmr=0, weight_kg=80, steps=5000)
    assert result.af_advanced == 1.0
    assert result.neat == 228


def test_advanced_factor_uses_profile_step_constant() -> None:
    result = compute_advanced_activity_factor(
        bmr=1800, weight_kg=80, steps=3000, profile={"stepKcalConst": 0.001}
    )
    assert result.neat == 240


@pytest.mark.parametrize(
    ("bmr", "af"),
    [(1800, 1.0), (1800, 1.2), (1543, 1.375), (2100.5, 1.55), (1200, 2.5), (1650, 1.138)],
)
def test_maintenance_is_rounded_bmr_times_af(bmr: float, af: float) -> None:
    result = compute_tdee_from_af_and_tef(bmr=bmr, activity_factor=af, intake_kcal=0)
    assert result.maintenance_plus_activity == round_half_up(bmr * af)
    assert result.tef == 0
    assert result.tdee == round_half_up(bmr * af)


def test_tdee_adds_tef_from_intake() -> None:
    result = compute_tdee_from_af_and_tef(bmr=1800, activity_factor=1.2, intake_kcal=2000)
    assert result.maintenance_plus_activity == 2160
    assert result.tef == 200
    assert result.tdee == 2360


def test_tdee_with_custom_tef_ratio() -> None:
    result = compute_tdee_from_af_and_tef(
        bmr=1800, activity_factor=1.2, intake_kcal=2000, tef_ratio=0.15
    )
    assert result.tef == 300


@pytest.mark.parametrize("af", [0, -1, None, "abc"])
def test_unusable_activity_factor_falls_back_to_one(af) -> None:
    assert compute_tdee_from_af_and_tef(bmr=1800, activity_factor=af).tdee == 1800


def test_effective_workout() -> None:
    assert calculate_effective_workout({"workoutCalories": 400, "intensityFactor": 1.5}) == 600
    assert calculate_effective_workout({"workoutKcal": 250}) == 250
    assert calculate_effective_workout({}) == 0
    assert calculate_effective_workout(None) == 0


def test_advanced_factor_rounds_ties_upwards() -> None:
    # 1700 / 1600 is exactly 1.0625.
    result = compute_advanced_activity_factor(
        bmr=1600, weight_kg=50, steps=2000, profile={"stepKcalConst": 0.001}
    )
    assert result.neat == 100
    assert result.af_advanced == 1.063
