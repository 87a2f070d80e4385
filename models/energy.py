from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UnitConstants(BaseModel):
    """Physiological constants in effect for one profile."""

    walk_kcal_per_kg_per_km: float
    run_kcal_per_kg_per_km: float
    step_kcal_const: float
    default_tef_ratio: float

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class EATResult(BaseModel):
    """Exercise energy for a single activity, in whole kcal."""

    gross: int
    net: int = Field(..., ge=0, description="Gross kcal minus the BMR share, never negative.")
    bmr_share: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class EATDetail(EATResult):
    id: Optional[Union[int, str]] = None
    type: Optional[str] = None


class EATSummary(BaseModel):
    total_gross: int = 0
    total_net: int = 0
    total_bmr_share: int = 0
    details: List[EATDetail] = Field(default_factory=list)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class AdvancedActivityFactor(BaseModel):
    """Activity factor built from BMR, NEAT and net EAT."""

    af_advanced: float
    neat: int
    eat: int
    maintenance_plus_activity: int
    eat_details: List[EATDetail] = Field(default_factory=list)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class TDEEResult(BaseModel):
    maintenance_plus_activity: int
    tef: int
    tdee: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class MealTotals(BaseModel):
    """Rounded kcal per meal category plus macro totals."""

    lunch: int = 0
    dinner: int = 0
    extras: int = 0
    total: int = 0
    protein_g: int = 0
    carbs_g: int = 0
    fat_g: int = 0

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class TDEEBreakdown(BaseModel):
    bmr: int
    af_computed: float
    neat: int = 0
    eat: int = 0
    maintenance_plus_activity: int
    tef: int
    tdee: int
    eat_details: List[EATDetail] = Field(default_factory=list)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class DayDerived(BaseModel):
    """
    Everything the day, trend and dashboard views read for one day.

    A positive `net_kcal` is a surplus (intake above expenditure).
    """

    tdee: int
    total_intake: int
    net_kcal: int
    activity_mode: str
    tdee_breakdown: TDEEBreakdown
    meals: MealTotals
    workout_calories: Optional[float] = None
    intensity_factor: Optional[float] = None
    effective_workout: int = 0

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
