"""Plate calculator: which plates go on each side of the bar to reach a target weight.

Greedy allocation from the largest plate down. For the standard plate sets
(every plate a multiple of the smallest one) greedy gives the fewest plates;
anything left over below the smallest plate is simply not loaded and the
result is flagged approximate.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable
from decimal import Decimal

from app.core.constants import (
    BAR_WEIGHTS,
    EXACT_MATCH_TOLERANCE,
    PLATE_FIT_TOLERANCE,
    PLATES_BY_UNIT,
)
from app.core.enums import BarType, WeightUnit
from app.schemas.plates import LoadingResult, PlateCount
from app.services.units import format_number


def denominations_for(unit: WeightUnit | str) -> tuple[float, ...]:
    """Standard plate set for the unit, largest first."""
    return PLATES_BY_UNIT[WeightUnit(unit)]


def get_bar_weight(
    bar_type: BarType | str,
    unit: WeightUnit | str,
    custom_weight: float | None = None,
) -> float:
    """Bar weight for a bar type. Custom without a weight falls back to olympic."""
    bar_type = BarType(bar_type)
    bars = BAR_WEIGHTS[WeightUnit(unit)]
    if bar_type == BarType.CUSTOM:
        if custom_weight is not None:
            return float(custom_weight)
        return float(bars[BarType.OLYMPIC.value])
    return float(bars[bar_type.value])


def _is_valid_target(target: object) -> bool:
    if isinstance(target, bool) or not isinstance(target, (numbers.Real, Decimal)):
        return False
    if isinstance(target, Decimal) and not target.is_finite():
        return False
    value = float(target)
    return math.isfinite(value) and value >= 0


def _normalise_plates(denominations: Iterable[float]) -> list[float]:
    """Distinct positive plates, largest first. Never mutates the caller's sequence."""
    return sorted({float(p) for p in denominations if p > 0}, reverse=True)


def solve_plates(
    target: float | Decimal | None,
    bar_weight: float | Decimal,
    denominations: Iterable[float],
) -> LoadingResult | None:
    """
    Plates to load per side to get as close to ``target`` as possible without going over.

    Returns None when ``target`` is not a usable number (missing, NaN, infinite, negative);
    callers show a prompt instead of a diagram in that case. A target at or below the bar
    gives a bar-only result.
    """
    if not _is_valid_target(target):
        return None
    target = float(target)
    bar_weight = float(bar_weight)

    weight_to_add = target - bar_weight
    if weight_to_add <= 0:
        is_approximate = target < bar_weight - EXACT_MATCH_TOLERANCE
        return LoadingResult(
            plates_per_side=(),
            weight_per_side=0.0,
            total_weight=bar_weight,
            bar_weight=bar_weight,
            is_approximate=is_approximate,
            difference=round(bar_weight - target, 2) if is_approximate else 0.0,
        )

    remaining = weight_to_add / 2
    plates_per_side: list[PlateCount] = []
    for plate in _normalise_plates(denominations):
        count = math.floor((remaining + PLATE_FIT_TOLERANCE) / plate)
        if count > 0:
            remaining -= plate * count
            plates_per_side.append(PlateCount(plate=plate, count=count))

    weight_per_side = round(sum(p.plate * p.count for p in plates_per_side), 2)
    total = round(bar_weight + weight_per_side * 2, 2)
    difference = round(total - target, 2)
    is_approximate = abs(difference) > EXACT_MATCH_TOLERANCE

    return LoadingResult(
        plates_per_side=tuple(plates_per_side),
        weight_per_side=weight_per_side,
        total_weight=total,
        bar_weight=bar_weight,
        is_approximate=is_approximate,
        difference=difference if is_approximate else 0.0,
    )


def format_plate_count(plate: float, count: int, unit: WeightUnit | str) -> str:
    """e.g. "2 × 45lbs" or "1 × 2.5kg"."""
    return f"{count} × {format_number(plate)}{WeightUnit(unit).value}"
