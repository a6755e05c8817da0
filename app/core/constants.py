"""Application constants."""

from app.core.enums import BodyRegion, MuscleGroupName, WeightUnit

# Session limits (workout builder)
MAX_EXERCISES_PER_SESSION = 20
MAX_SETS_PER_EXERCISE_PER_SESSION = 10

# Plate denominations per side, largest first
PLATES_LBS: tuple[float, ...] = (45, 35, 25, 10, 5, 2.5)
PLATES_KG: tuple[float, ...] = (25, 20, 15, 10, 5, 2.5, 1.25)

PLATES_BY_UNIT: dict[WeightUnit, tuple[float, ...]] = {
    WeightUnit.LBS: PLATES_LBS,
    WeightUnit.KG: PLATES_KG,
}

# Bar weights; smith bars vary and are often counterbalanced
BAR_WEIGHTS: dict[WeightUnit, dict[str, float]] = {
    WeightUnit.LBS: {"olympic": 45, "womens": 35, "ez": 25, "smith": 15},
    WeightUnit.KG: {"olympic": 20, "womens": 15, "ez": 10, "smith": 7},
}

# Float tolerances for plate math
PLATE_FIT_TOLERANCE = 0.001
EXACT_MATCH_TOLERANCE = 0.01

MUSCLE_REGIONS: dict[MuscleGroupName, BodyRegion] = {
    MuscleGroupName.CHEST: BodyRegion.UPPER,
    MuscleGroupName.SHOULDERS: BodyRegion.UPPER,
    MuscleGroupName.BACK: BodyRegion.UPPER,
    MuscleGroupName.BICEPS: BodyRegion.UPPER,
    MuscleGroupName.TRICEPS: BodyRegion.UPPER,
    MuscleGroupName.CORE: BodyRegion.LOWER,
    MuscleGroupName.QUADS: BodyRegion.LOWER,
    MuscleGroupName.HAMSTRINGS: BodyRegion.LOWER,
    MuscleGroupName.GLUTES: BodyRegion.LOWER,
    MuscleGroupName.CALVES: BodyRegion.LOWER,
}

# Hours until a muscle group counts as fully recovered.
# Chest is slowest; small muscles (core, calves) recover fastest.
MUSCLE_RECOVERY_HOURS: dict[MuscleGroupName, float] = {
    MuscleGroupName.CHEST: 84,
    MuscleGroupName.SHOULDERS: 72,
    MuscleGroupName.BACK: 72,
    MuscleGroupName.BICEPS: 48,
    MuscleGroupName.TRICEPS: 48,
    MuscleGroupName.QUADS: 48,
    MuscleGroupName.HAMSTRINGS: 60,
    MuscleGroupName.GLUTES: 60,
    MuscleGroupName.CORE: 36,
    MuscleGroupName.CALVES: 36,
}
DEFAULT_RECOVERY_HOURS = 72.0

# Recovery fraction a muscle needs to count as fresh for today's suggestion
FRESHNESS_THRESHOLD = 0.7

# Intensity levels for body map colouring: 0 fresh, 1 moderate, 2 fatigued
INTENSITY_FRESH_MIN = 0.7
INTENSITY_MODERATE_MIN = 0.4

# Numpad input limits
NUMPAD_MAX_DIGITS = 6
NUMPAD_MAX_DECIMAL_PLACES = 2

# Unit conversion
LBS_TO_KG = 0.45359237
KG_TO_LBS = 2.20462262
