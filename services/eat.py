from collections.abc import Mapping
from typing import Any, Optional

import config
from models.activity import Activity, ActivityType, resolve_activity_type
from models.energy import EATDetail, EATResult, EATSummary, UnitConstants
from models.profile import Profile
from services.unit_constants import resolve_unit_constants
from utils.coercion import (
    as_record_list,
    clamp,
    clamp01,
    round_half_up,
    to_num,
    validate_soft,
)


def bmr_share_during(bmr: Optional[float], duration_min: Optional[float]) -> float:
    """kcal of BMR the body burns anyway over `duration_min` minutes."""
    return to_num(bmr) * to_num(duration_min) / config.MINUTES_PER_DAY


def intensity_scale(activity_type: ActivityType, intensity: Optional[float]) -> float:
    """Scale factor for distance-based kcal, 1.0 at intensity 50."""
    params = config.INTENSITY_SCALE[ActivityType(activity_type).value]
    i = to_num(intensity, config.DEFAULT_INTENSITY)
    return clamp(1 + (i - 50) / params["slope"], params["low"], params["high"])


def estimate_distance_km(
    activity_type: ActivityType, duration_min: Optional[float], intensity: Optional[float]
) -> float:
    base, top = config.SPEED_RANGES[ActivityType(activity_type).value]
    s = clamp01(to_num(intensity, config.DEFAULT_INTENSITY) / 100)
    speed_kmh = base + s * (top - base)
    return speed_kmh * (max(0.0, to_num(duration_min)) / 60.0)


def gross_kcal_from_distance(
    distance_km: Optional[float], weight_kg: Optional[float], kcal_per_kg_per_km: float
) -> float:
    d = max(0.0, to_num(distance_km))
    w = to_num(weight_kg, config.DEFAULT_WEIGHT_KG)
    return d * w * kcal_per_kg_per_km


def _net_from_gross_and_bmr(gross: float, bmr: float, duration_min: float) -> int:
    return max(0, round_half_up(gross - bmr_share_during(bmr, duration_min)))


def _compute_eat(
    activity_type: ActivityType,
    activity: Activity,
    profile: Profile,
    constants: UnitConstants,
) -> EATResult:
    per_km = (
        constants.run_kcal_per_kg_per_km
        if activity_type == ActivityType.JOG
        else constants.walk_kcal_per_kg_per_km
    )
    weight_kg = to_num(profile.weight_kg, config.DEFAULT_WEIGHT_KG)
    bmr = to_num(profile.bmr)
    duration_min = to_num(activity.duration_min)

    if activity.distance_km is not None:
        gross = gross_kcal_from_distance(activity.distance_km, weight_kg, per_km)
        gross *= intensity_scale(activity_type, activity.intensity)
    else:
        # Intensity is already reflected in the estimated speed.
        distance = estimate_distance_km(activity_type, duration_min, activity.intensity)
        gross = gross_kcal_from_distance(distance, weight_kg, per_km)

    return EATResult(
        gross=round_half_up(gross),
        net=_net_from_gross_and_bmr(gross, bmr, duration_min),
        bmr_share=round_half_up(bmr_share_during(bmr, duration_min)),
    )


def compute_eat_walk(
    activity: Any = None, profile: Any = None, constants: Optional[UnitConstants] = None
) -> EATResult:
    profile = validate_soft(Profile, profile)
    constants = constants or resolve_unit_constants(profile)
    return _compute_eat(
        ActivityType.WALK, validate_soft(Activity, activity), profile, constants
    )


def compute_eat_jog(
    activity: Any = None, profile: Any = None, constants: Optional[UnitConstants] = None
) -> EATResult:
    profile = validate_soft(Profile, profile)
    constants = constants or resolve_unit_constants(profile)
    return _compute_eat(
        ActivityType.JOG, validate_soft(Activity, activity), profile, constants
    )


def compute_eat_for_activity(
    activity: Any = None, profile: Any = None, constants: Optional[UnitConstants] = None
) -> EATResult:
    """Dispatches on the activity type. Unknown or missing types use the walk model."""
    activity = validate_soft(Activity, activity)
    if resolve_activity_type(activity.type) == ActivityType.JOG:
        return compute_eat_jog(activity, profile, constants)
    return compute_eat_walk(activity, profile, constants)


def sum_eat_from_activities(activities: Any = None, profile: Any = None) -> EATSummary:
    """
    Sums gross, net and BMR-share kcal over a day's activities.

    `activities` may also be a `{"activities": [...], "profile": {...}}`
    wrapper (its profile is used when none is passed) or a single activity.
    """
    if isinstance(activities, Mapping) and "activities" in activities and profile is None:
        profile = activities.get("profile")
    profile = validate_soft(Profile, profile)
    constants = resolve_unit_constants(profile)

    total_gross = 0
    total_net = 0
    total_bmr_share = 0
    details = []
    for raw in as_record_list(activities, wrapper_key="activities"):
        activity = validate_soft(Activity, raw)
        result = compute_eat_for_activity(activity, profile, constants)
        total_gross += result.gross
        total_net += result.net
        total_bmr_share += result.bmr_share
        details.append(
            EATDetail(id=activity.id, type=activity.type, **result.model_dump())
        )

    return EATSummary(
        total_gross=total_gross,
        total_net=total_net,
        total_bmr_share=total_bmr_share,
        details=details,
    )
