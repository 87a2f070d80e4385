from collections.abc import Mapping
from datetime import date as date_type
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from models.activity import Activity, Survey
from models.meal import MealEntry
from utils.coercion import as_record_list, finite_or_none


class ActivityMode(str, Enum):
    """Source of the day's activity factor."""

    MANUAL = "manual"
    ADVANCED_NEAT = "advanced_neat"
    ADVANCED_FULL = "advanced_full"


class DayRecord(BaseModel):
    """
    Everything logged for one calendar day.

    `workout_calories` and `intensity_factor` belong to the legacy manual
    workout entry and are never read by the advanced activity model.
    """

    date: Optional[date_type] = Field(
        default=None, validation_alias=AliasChoices("date", "dateKey", "date_key")
    )
    activities: List[Activity] = Field(default_factory=list)
    steps: Optional[float] = None
    survey: Optional[Survey] = None
    meals: List[MealEntry] = Field(default_factory=list)
    activity_factor: Optional[float] = None
    activity_mode: ActivityMode = ActivityMode.MANUAL
    bmr_snapshot: Optional[float] = None
    weight_kg: Optional[float] = None
    workout_calories: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices(
            "workoutCalories", "workout_calories", "workoutKcal", "workout_kcal"
        ),
    )
    intensity_factor: Optional[float] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, value):
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date_type):
            return value
        if isinstance(value, str):
            try:
                return date_type.fromisoformat(value.strip()[:10])
            except ValueError:
                return None
        return None

    @field_validator("activities", mode="before")
    @classmethod
    def coerce_activities(cls, value):
        return as_record_list(value, wrapper_key="activities")

    @field_validator("meals", mode="before")
    @classmethod
    def coerce_meals(cls, value):
        return as_record_list(value, wrapper_key="meals")

    @field_validator("survey", mode="before")
    @classmethod
    def coerce_survey(cls, value):
        if isinstance(value, (Mapping, Survey)):
            return value
        return None

    @field_validator(
        "steps",
        "activity_factor",
        "bmr_snapshot",
        "weight_kg",
        "workout_calories",
        "intensity_factor",
        mode="before",
    )
    @classmethod
    def coerce_number(cls, value):
        return finite_or_none(value)

    @field_validator("activity_mode", mode="before")
    @classmethod
    def coerce_mode(cls, value):
        if isinstance(value, str):
            value = value.strip().lower()
        try:
            return ActivityMode(value)
        except ValueError:
            return ActivityMode.MANUAL
