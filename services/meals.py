from collections.abc import Mapping
from typing import Any, Optional

from models.day_record import DayRecord
from models.energy import MealTotals
from models.meal import MealEntry, MealType
from utils.coercion import as_record_list, round_half_up, to_num, validate_soft


def _meal_list(day_or_meals: Any, date_key: Optional[str]) -> list:
    if isinstance(day_or_meals, DayRecord):
        return list(day_or_meals.meals)
    if isinstance(day_or_meals, Mapping):
        if "meals" in day_or_meals:
            return as_record_list(day_or_meals["meals"])
        if date_key is not None:
            logs = day_or_meals.get(date_key)
            if isinstance(logs, (DayRecord, Mapping)):
                return _meal_list(logs, None)
            return as_record_list(logs)
        return []
    return as_record_list(day_or_meals)


def compute_day_meal_totals(day_or_meals: Any = None, date_key: Optional[str] = None) -> MealTotals:
    """
    Totals a day's meal entries per category.

    Accepts a list of entries, a day record holding `meals`, or a mapping of
    date keys to either (with `date_key` selecting the day). Entries with an
    unrecognised meal type only count toward the grand total.
    """
    sums = {MealType.LUNCH: 0.0, MealType.DINNER: 0.0, MealType.EXTRAS: 0.0}
    total = 0.0
    protein_g = carbs_g = fat_g = 0.0

    for raw in _meal_list(day_or_meals, date_key):
        entry = validate_soft(MealEntry, raw)
        kcal = entry.kcal
        total += kcal
        if entry.category is not None:
            sums[entry.category] += kcal
        protein_g += to_num(entry.protein_g)
        carbs_g += to_num(entry.carbs_g)
        fat_g += to_num(entry.fat_g)

    return MealTotals(
        lunch=round_half_up(sums[MealType.LUNCH]),
        dinner=round_half_up(sums[MealType.DINNER]),
        extras=round_half_up(sums[MealType.EXTRAS]),
        total=round_half_up(total),
        protein_g=round_half_up(protein_g),
        carbs_g=round_half_up(carbs_g),
        fat_g=round_half_up(fat_g),
    )
