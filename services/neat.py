from collections.abc import Mapping
from typing import Any, Optional

import config
from models.activity import Survey
from utils.coercion import clamp, finite_or_none, round_half_up, to_num, validate_soft


def neat_percent_from_survey(survey: Any = None) -> float:
    """
    Maps survey answers to NEAT as a fraction of BMR (0.13 means 13 %).

    The subjective score picks a base band; long standing hours and an
    active commute add to it.
    """
    survey = validate_soft(Survey, survey)
    s = clamp(to_num(survey.subjective, config.DEFAULT_SURVEY_SUBJECTIVE), 0, 100)

    base_pct = config.NEAT_SURVEY_MAX_PCT
    for upper, pct in config.NEAT_SURVEY_THRESHOLDS:
        if s <= upper:
            base_pct = pct
            break

    standing_hours = to_num(survey.standing_hours)
    if standing_hours >= config.NEAT_STANDING_LONG_HOURS:
        standing_adj = config.NEAT_STANDING_LONG_ADJ
    elif standing_hours >= config.NEAT_STANDING_SHORT_HOURS:
        standing_adj = config.NEAT_STANDING_SHORT_ADJ
    else:
        standing_adj = 0.0
    commute_adj = config.NEAT_ACTIVE_COMMUTE_ADJ if survey.active_commute else 0.0

    low, high = config.NEAT_PCT_BOUNDS
    return clamp(base_pct + standing_adj + commute_adj, low, high)


def neat_from_steps(
    steps: Any, weight_kg: Any, step_kcal_const: float = config.STEP_KCAL_CONST
) -> Optional[int]:
    steps = finite_or_none(steps)
    weight_kg = finite_or_none(weight_kg)
    if steps is None or weight_kg is None:
        return None
    return round_half_up(steps * step_kcal_const * weight_kg)


def neat_from_survey(survey: Any, bmr: Any) -> Optional[int]:
    bmr = finite_or_none(bmr)
    if not isinstance(survey, (Mapping, Survey)) or bmr is None:
        return None
    return round_half_up(neat_percent_from_survey(survey) * bmr)


def compute_neat(
    steps: Any = None,
    weight_kg: Any = None,
    survey: Any = None,
    bmr: Any = None,
    step_kcal_const: float = config.STEP_KCAL_CONST,
) -> int:
    """
    Estimates NEAT in kcal from steps and/or the survey.

    Both available: weighted blend favouring steps. One available: that
    estimate. Neither: 0.
    """
    neat_steps = neat_from_steps(steps, weight_kg, step_kcal_const)
    neat_survey = neat_from_survey(survey, bmr)

    if neat_steps is not None and neat_survey is not None:
        return round_half_up(
            config.NEAT_STEPS_WEIGHT * neat_steps + config.NEAT_SURVEY_WEIGHT * neat_survey
        )
    if neat_steps is not None:
        return neat_steps
    if neat_survey is not None:
        return neat_survey
    return 0
