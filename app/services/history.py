"""Load logged sets as SetLog stimuli for the recovery model."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timedelta
from typing import Any

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enums import SetLabel
from app.models.exercise import Exercise
from app.models.workout import Workout, WorkoutSet
from app.schemas.recovery import SetLog
from app.services.recovery import as_utc

logger = logging.getLogger(__name__)


def build_set_logs(rows: Iterable[tuple[Any, Any, Any]]) -> list[SetLog]:
    """
    Group (WorkoutSet, Exercise, Workout) rows into one SetLog per workout and exercise.

    Warm-up sets are skipped. The stimulus time is when the workout ended, or when it
    started for workouts still in progress. Exercises without muscle groups are ignored.
    """
    grouped: dict[tuple[Any, Any], dict[str, Any]] = {}
    for s, ex, workout in rows:
        if s.set_label == SetLabel.WARMUP:
            continue
        muscles = ex.muscle_groups
        if not muscles:
            logger.debug("Exercise %s has no muscle groups; skipped for recovery", ex.id)
            continue
        ts = workout.ended_at or workout.started_at
        if ts is None:
            continue
        key = (workout.id, ex.id)
        entry = grouped.setdefault(
            key,
            {"exercise_id": ex.id, "muscle_groups": muscles, "timestamp": as_utc(ts), "volume": 0.0},
        )
        entry["volume"] += float(s.weight or 0) * int(s.reps or 0)

    return sorted(
        (SetLog(**entry) for entry in grouped.values()),
        key=lambda log: log.timestamp,
    )


async def load_set_logs(db: AsyncSession, now: datetime, lookback_hours: float) -> list[SetLog]:
    """SetLogs from workouts touching the last ``lookback_hours`` (the longest recovery window)."""
    cutoff = now - timedelta(hours=lookback_hours)
    stmt = (
        select(WorkoutSet, Exercise, Workout)
        .join(Exercise, Exercise.id == WorkoutSet.exercise_id)
        .join(Workout, Workout.id == WorkoutSet.workout_id)
        .where(or_(Workout.ended_at >= cutoff, Workout.started_at >= cutoff))
    )
    result = await db.execute(stmt)
    logs = build_set_logs(result.all())
    logger.info("Loaded %d training stimuli since %s", len(logs), cutoff.isoformat())
    return logs
