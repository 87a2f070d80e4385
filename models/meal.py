from collections.abc import Mapping
from enum import Enum
from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from utils.coercion import finite_or_none


class MealType(str, Enum):
    """Categories meal totals are grouped under."""

    LUNCH = "lunch"
    DINNER = "dinner"
    EXTRAS = "extras"


MEAL_TYPE_ALIASES = {
    "lunch": MealType.LUNCH,
    "dinner": MealType.DINNER,
    "extra": MealType.EXTRAS,
    "extras": MealType.EXTRAS,
    "snack": MealType.EXTRAS,
}

# Keys a stored entry total has been saved under, in order of preference.
TOTAL_KCAL_KEYS = ("totalKcal", "total_kcal", "kcal", "kcalPerServing", "kcal_per_serving")


class MealEntry(BaseModel):
    """One food log line."""

    id: Optional[Union[int, str]] = None
    meal_type: Optional[str] = None
    food_name_snapshot: Optional[str] = None
    quantity: Optional[float] = None
    kcal_per_unit: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices(
            "kcalPerUnit", "kcal_per_unit", "kcalPerUnitSnapshot", "kcal_per_unit_snapshot"
        ),
    )
    total_kcal: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("totalKcal", "total_kcal")
    )
    protein_g: Optional[float] = None
    carbs_g: Optional[float] = None
    fat_g: Optional[float] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def pick_total_kcal(cls, data):
        if not isinstance(data, Mapping):
            return data
        total = next((data[k] for k in TOTAL_KCAL_KEYS if data.get(k) is not None), None)
        data = {k: v for k, v in data.items() if k not in TOTAL_KCAL_KEYS}
        data["totalKcal"] = total
        return data

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        if value is None or (isinstance(value, (int, str)) and not isinstance(value, bool)):
            return value
        return str(value)

    @field_validator(
        "quantity", "kcal_per_unit", "total_kcal", "protein_g", "carbs_g", "fat_g", mode="before"
    )
    @classmethod
    def coerce_number(cls, value):
        return finite_or_none(value)

    @field_validator("meal_type", "food_name_snapshot", mode="before")
    @classmethod
    def coerce_text(cls, value):
        return None if value is None else str(value)

    @property
    def category(self) -> Optional[MealType]:
        """Category the entry is totalled under, None for unknown labels."""
        if not self.meal_type:
            return None
        return MEAL_TYPE_ALIASES.get(self.meal_type.strip().lower())

    @property
    def kcal(self) -> float:
        """Stored total, falling back to quantity times kcal per unit."""
        if self.total_kcal is not None:
            return self.total_kcal
        if self.quantity is None or self.kcal_per_unit is None:
            return 0.0
        return self.quantity * self.kcal_per_unit
