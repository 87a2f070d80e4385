from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TrendPoint(BaseModel):
    """One day of the trends and stats matrix."""

    date: date
    tdee: int
    intake: int
    net_kcal: int
    deficit: int = Field(..., description="TDEE minus intake, positive is a deficit.")
    est_delta_kg: float = Field(
        ..., description="Weight change implied by the deficit, negative is a loss."
    )
    activity_factor: float
    neat: int
    eat: int
    tef: int
    lunch: int
    dinner: int
    extras: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class TrendSummary(BaseModel):
    """Totals and averages over a range of days."""

    days: int
    logged_days: int
    total_intake: int
    total_tdee: int
    net_deficit: int
    avg_intake: float
    avg_tdee: float
    est_total_delta_kg: float
    latest_activity_factor: Optional[float] = None
    current_streak: int = Field(
        default=0, description="Most recent consecutive logged days in deficit."
    )

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
