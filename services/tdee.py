from typing import Any, Optional

import config
from models.day_record import DayRecord
from models.energy import AdvancedActivityFactor, TDEEResult
from models.profile import Profile
from services.eat import sum_eat_from_activities
from services.neat import compute_neat
from services.unit_constants import resolve_unit_constants
from utils.coercion import (
    finite_or_none,
    round_half_up,
    round_half_up_to,
    to_num,
    validate_soft,
)


def activity_ratio(bmr: float, neat: float, eat: float) -> float:
    """(BMR + NEAT + EAT) / BMR, or 1.0 when there is no BMR to scale."""
    return (bmr + neat + eat) / bmr if bmr > 0 else 1.0


def compute_advanced_activity_factor(
    bmr: Any = None,
    weight_kg: Any = None,
    activities: Any = None,
    steps: Any = None,
    survey: Any = None,
    profile: Any = None,
    **_ignored: Any,
) -> AdvancedActivityFactor:
    """
    Composes BMR, NEAT and net EAT into an activity factor.

    Only logged activities count as EAT. Legacy manual workout fields passed
    as extra keywords are ignored.
    """
    bmr = to_num(bmr)
    profile = validate_soft(Profile, profile).model_copy(
        update={"bmr": bmr, "weight_kg": finite_or_none(weight_kg)}
    )
    constants = resolve_unit_constants(profile)

    eat_result = sum_eat_from_activities(activities or [], profile)
    eat = eat_result.total_net
    neat = compute_neat(
        steps=steps,
        weight_kg=weight_kg,
        survey=survey,
        bmr=bmr,
        step_kcal_const=constants.step_kcal_const,
    )

    return AdvancedActivityFactor(
        af_advanced=round_half_up_to(activity_ratio(bmr, neat, eat), 3),
        neat=neat,
        eat=eat,
        maintenance_plus_activity=round_half_up(bmr + neat + eat),
        eat_details=eat_result.details,
    )


def compute_tdee_from_af_and_tef(
    bmr: Any = None,
    activity_factor: Any = 1.0,
    intake_kcal: Any = None,
    tef_ratio: Optional[float] = None,
) -> TDEEResult:
    """
    TDEE = round(BMR * AF) + round(intake * TEF ratio).

    The activity factor excludes TEF, whichever source produced it.
    """
    bmr = to_num(bmr)
    af = to_num(activity_factor)
    if af <= 0:
        af = 1.0
    ratio = to_num(tef_ratio, config.DEFAULT_TEF_RATIO)

    maintenance_plus_activity = round_half_up(bmr * af)
    tef = round_half_up(to_num(intake_kcal) * ratio)
    return TDEEResult(
        maintenance_plus_activity=maintenance_plus_activity,
        tef=tef,
        tdee=maintenance_plus_activity + tef,
    )


def calculate_effective_workout(day: Any = None) -> int:
    """Legacy manual workout kcal scaled by the day's intensity factor."""
    day = validate_soft(DayRecord, day)
    raw = to_num(day.workout_calories)
    intensity_factor = day.intensity_factor if day.intensity_factor else 1.0
    return round_half_up(raw * intensity_factor)
