"""Exercise CRUD endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enums import MuscleGroupName
from app.db.session import get_db
from app.models.exercise import Exercise
from app.schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseUpdate

router = APIRouter()


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    db: AsyncSession = Depends(get_db),
    muscle_group: MuscleGroupName | None = None,
    skip: int = 0,
    limit: int = 100,
):
    """List exercises, optionally only those whose primary target is muscle_group."""
    stmt = select(Exercise)
    if muscle_group:
        stmt = stmt.where(Exercise.primary_muscle_group == muscle_group)
    result = await db.execute(stmt.order_by(Exercise.name).offset(skip).limit(limit))
    return list(result.scalars().all())


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new exercise (with optional muscle hierarchy)."""
    exercise = Exercise(**payload.model_dump())
    db.add(exercise)
    await db.flush()
    await db.refresh(exercise)
    return exercise


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a single exercise by id."""
    result = await db.execute(select(Exercise).where(Exercise.id == exercise_id))
    exercise = result.scalar_one_or_none()
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.patch("/{exercise_id}", response_model=ExerciseRead)
async def update_exercise(
    exercise_id: uuid.UUID,
    payload: ExerciseUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update an exercise (partial)."""
    result = await db.execute(select(Exercise).where(Exercise.id == exercise_id))
    exercise = result.scalar_one_or_none()
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(exercise, k, v)
    await db.flush()
    await db.refresh(exercise)
    return exercise


@router.delete("/{exercise_id}", status_code=204)
async def delete_exercise(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete an exercise (and its logged sets)."""
    result = await db.execute(select(Exercise).where(Exercise.id == exercise_id))
    exercise = result.scalar_one_or_none()
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    await db.delete(exercise)
    return None
