from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from utils.coercion import finite_or_none


class ActivityType(str, Enum):
    WALK = "walk"
    JOG = "jog"


# Labels accepted for each energy model. Anything else is costed as a walk.
ACTIVITY_TYPE_ALIASES = {
    "walk": ActivityType.WALK,
    "walking": ActivityType.WALK,
    "jog": ActivityType.JOG,
    "jogging": ActivityType.JOG,
    "run": ActivityType.JOG,
    "running": ActivityType.JOG,
}


def resolve_activity_type(label: Optional[str]) -> ActivityType:
    if not label:
        return ActivityType.WALK
    return ACTIVITY_TYPE_ALIASES.get(label.strip().lower(), ActivityType.WALK)


class Activity(BaseModel):
    """A single logged exercise bout."""

    id: Optional[Union[int, str]] = None
    type: Optional[str] = None
    duration_min: Optional[float] = None
    distance_km: Optional[float] = Field(
        default=None, description="Absent when the distance should be estimated."
    )
    intensity: Optional[float] = Field(default=None, description="0-100, 50 when unset.")
    notes: str = ""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        if value is None or (isinstance(value, (int, str)) and not isinstance(value, bool)):
            return value
        return str(value)

    @field_validator("duration_min", "distance_km", mode="before")
    @classmethod
    def coerce_non_negative(cls, value):
        number = finite_or_none(value)
        return None if number is None else max(0.0, number)

    @field_validator("intensity", mode="before")
    @classmethod
    def coerce_intensity(cls, value):
        return finite_or_none(value)

    @field_validator("type", "notes", mode="before")
    @classmethod
    def coerce_text(cls, value, info):
        if value is None:
            return None if info.field_name == "type" else ""
        return str(value)

    @property
    def activity_type(self) -> ActivityType:
        return resolve_activity_type(self.type)


class Survey(BaseModel):
    """Subjective NEAT signal for one day."""

    subjective: Optional[float] = None
    standing_hours: Optional[float] = None
    active_commute: bool = False

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @field_validator("subjective", "standing_hours", mode="before")
    @classmethod
    def coerce_number(cls, value):
        return finite_or_none(value)

    @field_validator("active_commute", mode="before")
    @classmethod
    def coerce_flag(cls, value):
        if isinstance(value, str):
            return value.strip().lower() in ("true", "1", "yes", "on")
        return bool(value)
