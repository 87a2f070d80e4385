import logging
from typing import Any, Optional

import config
from models.day_record import ActivityMode, DayRecord
from models.energy import DayDerived, TDEEBreakdown
from models.profile import Profile
from services.meals import compute_day_meal_totals
from services.tdee import (
    activity_ratio,
    calculate_effective_workout,
    compute_advanced_activity_factor,
    compute_tdee_from_af_and_tef,
)
from services.unit_constants import resolve_unit_constants
from utils.bmr_calculator import estimate_profile_bmr
from utils.coercion import round_half_up, validate_soft


def effective_bmr(day: DayRecord, profile: Profile) -> float:
    """Day snapshot first, then the profile value, then Mifflin-St Jeor."""
    if day.bmr_snapshot is not None:
        return day.bmr_snapshot
    if profile.bmr is not None:
        return profile.bmr
    estimated = estimate_profile_bmr(
        profile.sex,
        profile.age,
        profile.height_cm,
        effective_weight_kg(day, profile),
    )
    return estimated if estimated is not None else 0.0


def effective_weight_kg(day: DayRecord, profile: Profile) -> Optional[float]:
    return day.weight_kg if day.weight_kg is not None else profile.weight_kg


def manual_activity_factor(day: DayRecord, profile: Profile) -> float:
    if day.activity_factor is not None and day.activity_factor > 0:
        return day.activity_factor
    if profile.default_activity_factor is not None and profile.default_activity_factor > 0:
        return profile.default_activity_factor
    if profile.activity_level is not None:
        return config.ACTIVITY_LEVEL_MAPPING_NO_TEF[profile.activity_level.value]
    return config.DEFAULT_ACTIVITY_FACTOR


def get_day_derived(day_record: Any = None, profile: Any = None) -> DayDerived:
    """
    Computes TDEE, intake and net balance for one day.

    The day's activity mode decides where the activity factor comes from:
    `manual` uses the logged factor, `advanced_neat` builds it from steps and
    the survey, `advanced_full` also adds net exercise energy.
    """
    day = validate_soft(DayRecord, day_record)
    profile = validate_soft(Profile, profile)
    constants = resolve_unit_constants(profile)

    bmr = effective_bmr(day, profile)
    weight_kg = effective_weight_kg(day, profile)
    meals = compute_day_meal_totals(day)
    intake = meals.total

    neat = 0
    eat = 0
    eat_details = []
    if day.activity_mode == ActivityMode.MANUAL:
        activity_factor = manual_activity_factor(day, profile)
        af_reported = activity_factor
    else:
        activities = day.activities if day.activity_mode == ActivityMode.ADVANCED_FULL else []
        advanced = compute_advanced_activity_factor(
            bmr=bmr,
            weight_kg=weight_kg,
            activities=activities,
            steps=day.steps,
            survey=day.survey,
            profile=profile,
        )
        neat = advanced.neat
        eat = advanced.eat
        eat_details = advanced.eat_details
        # The unrounded ratio keeps BMR * AF equal to BMR + NEAT + EAT.
        activity_factor = activity_ratio(bmr, neat, eat)
        af_reported = advanced.af_advanced

    result = compute_tdee_from_af_and_tef(
        bmr=bmr,
        activity_factor=activity_factor,
        intake_kcal=intake,
        tef_ratio=constants.default_tef_ratio,
    )
    net_kcal = round_half_up(intake - result.tdee)

    logging.debug(
        f"Day {day.date}: mode={day.activity_mode.value} af={af_reported} "
        f"tdee={result.tdee} intake={intake} net={net_kcal}"
    )

    return DayDerived(
        tdee=result.tdee,
        total_intake=intake,
        net_kcal=net_kcal,
        activity_mode=day.activity_mode.value,
        tdee_breakdown=TDEEBreakdown(
            bmr=round_half_up(bmr),
            af_computed=af_reported,
            neat=neat,
            eat=eat,
            maintenance_plus_activity=result.maintenance_plus_activity,
            tef=result.tef,
            tdee=result.tdee,
            eat_details=eat_details,
        ),
        meals=meals,
        workout_calories=day.workout_calories,
        intensity_factor=day.intensity_factor,
        effective_workout=calculate_effective_workout(day),
    )
