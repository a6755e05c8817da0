"""Workout and WorkoutSet schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.core.enums import SetLabel, WeightUnit


class ExerciseRef(BaseModel):
    """Minimal exercise info for embedding in set responses (id + name only)."""

    id: UUID
    name: str

    model_config = ConfigDict(from_attributes=True)


class WorkoutSetBase(BaseModel):
    exercise_id: UUID
    set_order: int = 0
    weight: float | None = Field(None, ge=0)  # kg
    reps: int | None = Field(None, ge=0)
    notes: str | None = None
    set_label: SetLabel | None = None


class WorkoutSetCreate(WorkoutSetBase):
    unit: WeightUnit | None = None  # unit the weight was entered in; stored as kg


class WorkoutSetUpdate(BaseModel):
    weight: float | None = Field(None, ge=0)
    unit: WeightUnit | None = None
    reps: int | None = Field(None, ge=0)
    notes: str | None = None
    set_label: SetLabel | None = None


class WorkoutSetRead(WorkoutSetBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    workout_id: UUID
    exercise: ExerciseRef | None = None


class WorkoutBase(BaseModel):
    notes: str | None = None


class WorkoutCreate(WorkoutBase):
    started_at: datetime | None = None


class WorkoutUpdate(BaseModel):
    started_at: datetime | None = None
    ended_at: datetime | None = None
    notes: str | None = None


class WorkoutRead(WorkoutBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    started_at: datetime
    ended_at: datetime | None = None
    sets: list[WorkoutSetRead] = []
