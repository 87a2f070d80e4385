import config
from models.energy import UnitConstants
from models.profile import Profile
from utils.coercion import validate_soft


def resolve_unit_constants(profile=None) -> UnitConstants:
    """
    Resolves the unit constants for a profile.

    Each override is taken from the profile when it holds a finite number
    (camelCase or snake_case key), otherwise the config default applies.
    """
    profile = validate_soft(Profile, profile)

    def pick(override, default):
        return default if override is None else override

    return UnitConstants(
        walk_kcal_per_kg_per_km=pick(
            profile.walk_kcal_per_kg_per_km, config.WALK_KCAL_PER_KG_PER_KM
        ),
        run_kcal_per_kg_per_km=pick(
            profile.run_kcal_per_kg_per_km, config.RUN_KCAL_PER_KG_PER_KM
        ),
        step_kcal_const=pick(profile.step_kcal_const, config.STEP_KCAL_CONST),
        default_tef_ratio=pick(profile.default_tef_ratio, config.DEFAULT_TEF_RATIO),
    )
