"""Exercise schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.core.enums import MuscleGroupName


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    unit: str = Field(default="kg", max_length=20)
    rest_seconds_preset: int | None = None
    primary_muscle_group: MuscleGroupName | None = None
    secondary_muscle_group: MuscleGroupName | None = None
    tertiary_muscle_group: MuscleGroupName | None = None


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    unit: str | None = None
    rest_seconds_preset: int | None = None
    primary_muscle_group: MuscleGroupName | None = None
    secondary_muscle_group: MuscleGroupName | None = None
    tertiary_muscle_group: MuscleGroupName | None = None


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
