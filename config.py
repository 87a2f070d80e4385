# energy_balance/config.py

# --- Unit Constants (overridable per profile) ---

# Gross energy cost of covering one kilometre, per kilogram of body weight.
WALK_KCAL_PER_KG_PER_KM = 0.78
RUN_KCAL_PER_KG_PER_KM = 1.00

# Step-to-kcal constant. kcal per step = STEP_KCAL_CONST * weight_kg,
# which is roughly 0.04 kcal per step at 70 kg.
STEP_KCAL_CONST = 0.00057

# Fraction of intake spent on digesting it (thermic effect of food).
DEFAULT_TEF_RATIO = 0.10

# --- Activity Energy Model ---

MINUTES_PER_DAY = 1440

# Used when neither the day nor the profile carries a weight.
DEFAULT_WEIGHT_KG = 70.0
DEFAULT_INTENSITY = 50.0

# Speed ranges (km/h) used to estimate distance from duration and intensity.
SPEED_RANGES = {
    "walk": (3.0, 6.0),
    "jog": (6.0, 10.0),
}

# Intensity scale applied to distance-based gross kcal:
# scale = 1 + (intensity - 50) / slope, clamped to (low, high).
INTENSITY_SCALE = {
    "walk": {"slope": 400.0, "low": 0.75, "high": 1.30},
    "jog": {"slope": 300.0, "low": 0.75, "high": 1.35},
}

# --- NEAT Estimator ---

# (upper bound of subjective score, fraction of BMR), checked in order.
NEAT_SURVEY_THRESHOLDS = [
    (20, 0.06),
    (40, 0.09),
    (60, 0.13),
    (80, 0.20),
]
NEAT_SURVEY_MAX_PCT = 0.30
NEAT_STANDING_LONG_HOURS = 5
NEAT_STANDING_LONG_ADJ = 0.03
NEAT_STANDING_SHORT_HOURS = 2
NEAT_STANDING_SHORT_ADJ = 0.01
NEAT_ACTIVE_COMMUTE_ADJ = 0.02
NEAT_PCT_BOUNDS = (0.03, 0.50)
DEFAULT_SURVEY_SUBJECTIVE = 50.0

# Weights used when both a step count and a survey are available.
NEAT_STEPS_WEIGHT = 0.75
NEAT_SURVEY_WEIGHT = 0.25

# --- Activity Factor Presets ---

# Maps user-reported activity level to a standard multiplier (TEF included).
ACTIVITY_LEVEL_MAPPING = {
    "sedentary": 1.2,
    "lightly_active": 1.375,
    "moderately_active": 1.55,
    "very_active": 1.725,
    "extra_active": 1.9,
}
# TEF is added separately from intake, so manual factors exclude it.
ACTIVITY_LEVEL_MAPPING_NO_TEF = {
    level: round(factor * 0.9, 3) for level, factor in ACTIVITY_LEVEL_MAPPING.items()
}
DEFAULT_ACTIVITY_FACTOR = ACTIVITY_LEVEL_MAPPING_NO_TEF["moderately_active"]

# --- Constants ---
KCAL_PER_KG_BODY_WEIGHT = 7700.0
