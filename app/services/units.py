"""Unit conversion. Weights are stored in kg and shown in the user's unit."""

from __future__ import annotations

from app.core.constants import KG_TO_LBS, LBS_TO_KG
from app.core.enums import WeightUnit


def format_number(value: float, decimals: int = 2) -> str:
    """Plain decimal without trailing zeros: 102.50 -> "102.5", 100.0 -> "100"."""
    text = f"{round(value, decimals):.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def to_kg(value: float, from_unit: WeightUnit | str) -> float:
    """Display unit -> kg (call when saving user input)."""
    if WeightUnit(from_unit) == WeightUnit.KG:
        return value
    return value * LBS_TO_KG


def from_kg(value_kg: float, to_unit: WeightUnit | str) -> float:
    """kg -> display unit (call when showing stored values)."""
    if WeightUnit(to_unit) == WeightUnit.KG:
        return value_kg
    return value_kg * KG_TO_LBS


def format_volume(volume_kg: float, to_unit: WeightUnit | str) -> str:
    """Compact volume, e.g. "1.2k" above a thousand."""
    converted = from_kg(volume_kg, to_unit)
    if converted >= 1000:
        return f"{converted / 1000:.1f}k"
    return f"{round(converted):,}"
