"""Shared enums for models and API."""

from enum import Enum


class WeightUnit(str, Enum):
    """Unit system for plate loading and display."""

    LBS = "lbs"
    KG = "kg"


class BarType(str, Enum):
    """Barbell variants (custom uses a caller supplied weight)."""

    OLYMPIC = "olympic"
    WOMENS = "womens"
    EZ = "ez"
    SMITH = "smith"
    CUSTOM = "custom"


class BodyRegion(str, Enum):
    UPPER = "upper"
    LOWER = "lower"


class MuscleGroupName(str, Enum):
    """Tracked muscle groups. Order here is the display order."""

    CHEST = "Chest"
    SHOULDERS = "Shoulders"
    BACK = "Back"
    BICEPS = "Biceps"
    TRICEPS = "Triceps"
    CORE = "Core"
    QUADS = "Quads"
    HAMSTRINGS = "Hamstrings"
    GLUTES = "Glutes"
    CALVES = "Calves"


class SuggestionType(str, Enum):
    UPPER = "upper"
    LOWER = "lower"
    FULL = "full"
    REST = "rest"


class NumpadMode(str, Enum):
    """Which set field the numpad is editing."""

    WEIGHT = "weight"
    REPS = "reps"


class SetLabel(str, Enum):
    """Smart set labeling."""

    WARMUP = "warmup"
    WORKING = "working"
    FAILURE = "failure"
    DROP_SET = "drop_set"
