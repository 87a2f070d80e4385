from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from utils.coercion import finite_or_none


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTRA_ACTIVE = "extra_active"


class Profile(BaseModel):
    """
    Physiological and goal settings shared by every day calculation.

    Constant overrides left unset (or set to something that is not a finite
    number) fall back to the defaults in config.
    """

    bmr: Optional[float] = Field(default=None, description="Basal metabolic rate in kcal/day.")
    weight_kg: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("weightKg", "weight_kg", "weight")
    )
    default_activity_factor: Optional[float] = None
    daily_kcal_target: Optional[float] = None

    walk_kcal_per_kg_per_km: Optional[float] = None
    run_kcal_per_kg_per_km: Optional[float] = None
    step_kcal_const: Optional[float] = None
    default_tef_ratio: Optional[float] = None

    sex: Optional[Sex] = None
    age: Optional[int] = None
    height_cm: Optional[float] = None
    activity_level: Optional[ActivityLevel] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @field_validator(
        "bmr",
        "weight_kg",
        "default_activity_factor",
        "daily_kcal_target",
        "walk_kcal_per_kg_per_km",
        "run_kcal_per_kg_per_km",
        "step_kcal_const",
        "default_tef_ratio",
        "height_cm",
        mode="before",
    )
    @classmethod
    def coerce_number(cls, value):
        return finite_or_none(value)

    @field_validator("age", mode="before")
    @classmethod
    def coerce_age(cls, value):
        number = finite_or_none(value)
        return None if number is None else int(number)

    @field_validator("sex", "activity_level", mode="before")
    @classmethod
    def coerce_choice(cls, value, info):
        enum_cls = Sex if info.field_name == "sex" else ActivityLevel
        if isinstance(value, str):
            value = value.strip().lower()
        try:
            return enum_cls(value)
        except ValueError:
            return None
