from typing import Optional, Union

from models.profile import Sex


def calculate_mifflin_st_jeor_bmr(
    sex: Union[Sex, str], age: int, height_cm: float, weight_kg: float
) -> float:
    """Calculates BMR using the Mifflin-St Jeor equation."""
    base = (10.0 * weight_kg) + (6.25 * height_cm) - (5.0 * age)
    if Sex(sex) == Sex.MALE:
        return base + 5
    else:
        return base - 161


def estimate_profile_bmr(
    sex: Optional[Sex],
    age: Optional[int],
    height_cm: Optional[float],
    weight_kg: Optional[float],
) -> Optional[float]:
    """Returns Mifflin-St Jeor BMR when every input is known, otherwise None."""
    if sex is None or age is None or height_cm is None or weight_kg is None:
        return None
    return calculate_mifflin_st_jeor_bmr(sex, age, height_cm, weight_kg)
