"""Today's workout suggestion from per-muscle recovery."""

from __future__ import annotations

from collections.abc import Mapping

from app.core.constants import FRESHNESS_THRESHOLD, MUSCLE_REGIONS
from app.core.enums import BodyRegion, MuscleGroupName, SuggestionType
from app.schemas.recovery import RecoveryStatus, Suggestion

REGION_MUSCLES: dict[BodyRegion, tuple[MuscleGroupName, ...]] = {
    region: tuple(mg for mg in MuscleGroupName if MUSCLE_REGIONS[mg] == region)
    for region in BodyRegion
}


def fresh_muscles(
    statuses: Mapping[MuscleGroupName, RecoveryStatus],
    threshold: float = FRESHNESS_THRESHOLD,
) -> tuple[MuscleGroupName, ...]:
    """Muscle groups at or above the threshold, in display order. Missing groups count as recovered."""
    return tuple(
        mg
        for mg in MuscleGroupName
        if (statuses[mg].recovery if mg in statuses else 1.0) >= threshold
    )


def _is_majority(fresh: list[MuscleGroupName], region: BodyRegion) -> bool:
    return len(fresh) * 2 > len(REGION_MUSCLES[region])


def _names(muscles: list[MuscleGroupName] | tuple[MuscleGroupName, ...]) -> str:
    return ", ".join(mg.value for mg in muscles)


def suggest_workout(
    statuses: Mapping[MuscleGroupName, RecoveryStatus],
    threshold: float = FRESHNESS_THRESHOLD,
) -> Suggestion:
    """
    Pick upper / lower / full / rest.

    First match wins:
    1. fresh muscles cover a majority of both regions -> full
    2. some upper fresh, lower not a majority -> upper
    3. some lower fresh, upper not a majority -> lower
    4. nothing fresh -> rest
    """
    fresh = fresh_muscles(statuses, threshold)
    upper = [mg for mg in fresh if MUSCLE_REGIONS[mg] == BodyRegion.UPPER]
    lower = [mg for mg in fresh if MUSCLE_REGIONS[mg] == BodyRegion.LOWER]
    upper_majority = _is_majority(upper, BodyRegion.UPPER)
    lower_majority = _is_majority(lower, BodyRegion.LOWER)

    if upper_majority and lower_majority:
        return Suggestion(
            type=SuggestionType.FULL,
            message="Full Body Day",
            reason=f"All muscle groups are ready. Fresh: {_names(fresh)}",
            fresh_muscles=fresh,
        )
    if upper and not lower_majority:
        return Suggestion(
            type=SuggestionType.UPPER,
            message="Train Upper Body",
            reason=f"Your legs are still recovering. Fresh: {_names(upper)}",
            fresh_muscles=fresh,
        )
    if lower and not upper_majority:
        return Suggestion(
            type=SuggestionType.LOWER,
            message="Train Lower Body",
            reason=f"Your upper body is still recovering. Fresh: {_names(lower)}",
            fresh_muscles=fresh,
        )
    return Suggestion(
        type=SuggestionType.REST,
        message="Rest Day",
        reason="Most muscles are still recovering",
        fresh_muscles=fresh,
    )
