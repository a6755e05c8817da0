"""Workout logging: sessions and their sets. This is the history the recovery model reads."""

from __future__ import annotations

import uuid
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.constants import (
    MAX_EXERCISES_PER_SESSION,
    MAX_SETS_PER_EXERCISE_PER_SESSION,
)
from app.db.session import get_db
from app.models.exercise import Exercise
from app.models.workout import Workout, WorkoutSet
from app.schemas.workout import (
    WorkoutCreate,
    WorkoutRead,
    WorkoutSetCreate,
    WorkoutSetRead,
    WorkoutSetUpdate,
    WorkoutUpdate,
)
from app.services.units import to_kg

router = APIRouter()


def _set_values(payload: WorkoutSetCreate | WorkoutSetUpdate, **dump_kwargs) -> dict:
    """Payload fields for the model, weight converted to kg when entered in another unit."""
    values = payload.model_dump(exclude={"unit"}, **dump_kwargs)
    if payload.unit is not None and values.get("weight") is not None:
        values["weight"] = round(to_kg(values["weight"], payload.unit), 2)
    return values


def _summary(workout: Workout) -> WorkoutRead:
    # Never touch workout.sets here (async lazy-load error)
    return WorkoutRead(
        id=workout.id,
        started_at=workout.started_at,
        ended_at=workout.ended_at,
        notes=workout.notes,
        sets=[],
    )


async def _get_workout_or_404(db: AsyncSession, workout_id: uuid.UUID) -> Workout:
    result = await db.execute(select(Workout).where(Workout.id == workout_id))
    workout = result.scalar_one_or_none()
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(
    db: AsyncSession = Depends(get_db),
    skip: int = 0,
    limit: int = 50,
    from_date: datetime | None = None,
    to_date: datetime | None = None,
):
    """List workouts (without sets), newest first, optionally filtered by date range."""
    stmt = select(Workout)
    if from_date:
        stmt = stmt.where(Workout.started_at >= from_date)
    if to_date:
        stmt = stmt.where(Workout.started_at <= to_date)
    stmt = stmt.order_by(Workout.started_at.desc()).offset(skip).limit(limit)
    result = await db.execute(stmt)
    return [_summary(w) for w in result.scalars().all()]


@router.post("", response_model=WorkoutRead, status_code=201)
async def create_workout(
    payload: WorkoutCreate,
    db: AsyncSession = Depends(get_db),
):
    """Start a new workout (started_at defaults to now)."""
    workout = Workout(**payload.model_dump(exclude_none=True))
    db.add(workout)
    await db.flush()
    await db.refresh(workout)
    return _summary(workout)


@router.get("/{workout_id}", response_model=WorkoutRead)
async def get_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a workout with all sets (and exercise names)."""
    result = await db.execute(
        select(Workout)
        .where(Workout.id == workout_id)
        .options(selectinload(Workout.sets).selectinload(WorkoutSet.exercise))
    )
    workout = result.scalar_one_or_none()
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")

    # Order sets by set_order then id (stable order per exercise).
    sorted_sets = sorted(workout.sets, key=lambda s: (s.set_order, str(s.id)))
    summary = _summary(workout)
    summary.sets = [WorkoutSetRead.model_validate(s) for s in sorted_sets]
    return summary


@router.patch("/{workout_id}", response_model=WorkoutRead)
async def update_workout(
    workout_id: uuid.UUID,
    payload: WorkoutUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update workout (e.g. set ended_at to complete it)."""
    workout = await _get_workout_or_404(db, workout_id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(workout, k, v)
    await db.flush()
    await db.refresh(workout)
    return _summary(workout)


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a workout and its sets."""
    workout = await _get_workout_or_404(db, workout_id)
    await db.delete(workout)
    return None


@router.post("/{workout_id}/sets", response_model=WorkoutSetRead, status_code=201)
async def add_set_to_workout(
    workout_id: uuid.UUID,
    payload: WorkoutSetCreate,
    db: AsyncSession = Depends(get_db),
):
    """Add a set (max 20 exercises per session, 10 sets per exercise)."""
    await _get_workout_or_404(db, workout_id)
    exercise = await db.get(Exercise, payload.exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")

    # One query: distinct exercise count and sets count for this exercise
    counts_row = await db.execute(
        select(
            func.count(func.distinct(WorkoutSet.exercise_id)).label("n_exercises"),
            func.count(case((WorkoutSet.exercise_id == payload.exercise_id, 1))).label("n_sets_this_ex"),
        ).where(WorkoutSet.workout_id == workout_id)
    )
    row = counts_row.one_or_none()
    n_exercises = int(row.n_exercises or 0) if row else 0
    n_sets_this_ex = int(row.n_sets_this_ex or 0) if row else 0

    if n_sets_this_ex >= MAX_SETS_PER_EXERCISE_PER_SESSION:
        raise HTTPException(
            status_code=400,
            detail=f"Maximum {MAX_SETS_PER_EXERCISE_PER_SESSION} sets per exercise per session.",
        )
    if n_exercises >= MAX_EXERCISES_PER_SESSION and n_sets_this_ex == 0:
        raise HTTPException(
            status_code=400,
            detail=f"Maximum {MAX_EXERCISES_PER_SESSION} exercises per session.",
        )

    set_ = WorkoutSet(workout_id=workout_id, **_set_values(payload))
    db.add(set_)
    await db.flush()

    # Reload with exercise for display
    result = await db.execute(
        select(WorkoutSet)
        .where(WorkoutSet.id == set_.id)
        .options(selectinload(WorkoutSet.exercise))
    )
    return result.scalar_one()


@router.patch("/{workout_id}/sets/{set_id}", response_model=WorkoutSetRead)
async def update_set(
    workout_id: uuid.UUID,
    set_id: uuid.UUID,
    payload: WorkoutSetUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update an existing set (weight, reps, notes, label)."""
    result = await db.execute(
        select(WorkoutSet)
        .where(WorkoutSet.id == set_id, WorkoutSet.workout_id == workout_id)
        .options(selectinload(WorkoutSet.exercise))
    )
    set_ = result.scalar_one_or_none()
    if not set_:
        raise HTTPException(status_code=404, detail="Set not found")
    for k, v in _set_values(payload, exclude_unset=True).items():
        setattr(set_, k, v)
    await db.flush()
    return set_


@router.delete("/{workout_id}/sets/{set_id}", status_code=204)
async def delete_set(
    workout_id: uuid.UUID,
    set_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a set from a workout."""
    result = await db.execute(
        select(WorkoutSet).where(WorkoutSet.id == set_id, WorkoutSet.workout_id == workout_id)
    )
    set_ = result.scalar_one_or_none()
    if not set_:
        raise HTTPException(status_code=404, detail="Set not found")
    await db.delete(set_)
    return None
