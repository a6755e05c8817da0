"""Muscle recovery and today's workout suggestion."""

from datetime import datetime

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_now, get_set_logs
from app.core.config import Settings, get_settings
from app.core.constants import MUSCLE_REGIONS
from app.schemas.recovery import MuscleRecoveryRead, RecoveryRead, SetLog, SuggestionRead
from app.services.recovery import compute_recovery, overall_recovery
from app.services.suggestion import suggest_workout
from app.services.units import format_volume

router = APIRouter()


@router.get("", response_model=RecoveryRead)
async def muscle_recovery(
    now: datetime = Depends(get_now),
    history: list[SetLog] = Depends(get_set_logs),
    settings: Settings = Depends(get_settings),
):
    """
    Per-muscle recovery (0.0-1.0) for the body map, least recovered first.
    Linear recovery from the most recent session over each muscle's recovery window.
    """
    windows = settings.recovery_windows
    statuses = compute_recovery(history, now, windows)
    muscles = [
        MuscleRecoveryRead(
            name=mg,
            region=MUSCLE_REGIONS[mg],
            window_hours=windows[mg],
            volume_display=format_volume(status.volume_in_window, settings.weight_unit),
            **status.model_dump(),
        )
        for mg, status in statuses.items()
    ]
    muscles.sort(key=lambda m: m.recovery)
    return RecoveryRead(
        computed_at=now,
        overall_recovery=overall_recovery(statuses),
        muscles=muscles,
    )


@router.get("/suggestion", response_model=SuggestionRead)
async def today_suggestion(
    threshold: float | None = Query(None, ge=0, le=1, description="Freshness threshold override"),
    now: datetime = Depends(get_now),
    history: list[SetLog] = Depends(get_set_logs),
    settings: Settings = Depends(get_settings),
):
    """Upper / lower / full body or rest, based on which muscle groups are fresh."""
    threshold = settings.freshness_threshold if threshold is None else threshold
    statuses = compute_recovery(history, now, settings.recovery_windows)
    suggestion = suggest_workout(statuses, threshold)
    return SuggestionRead(computed_at=now, threshold=threshold, **suggestion.model_dump())
