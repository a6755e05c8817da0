"""Recovery and workout suggestion schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.core.enums import BodyRegion, MuscleGroupName, SuggestionType


class SetLog(BaseModel):
    """One training stimulus: an exercise's working sets within a workout."""

    model_config = ConfigDict(frozen=True)

    exercise_id: UUID | str
    muscle_groups: frozenset[MuscleGroupName]
    timestamp: datetime
    volume: float = 0.0  # weight * reps summed over the sets


class RecoveryStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    recovery: float = Field(1.0, ge=0, le=1)  # 1.0 = fully recovered
    last_trained: datetime | None = None
    volume_in_window: float = 0.0
    intensity: int = Field(0, ge=0, le=2)  # 0 fresh, 1 moderate, 2 fatigued


class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: SuggestionType
    message: str
    reason: str
    fresh_muscles: tuple[MuscleGroupName, ...] = ()


class MuscleRecoveryRead(RecoveryStatus):
    name: MuscleGroupName
    region: BodyRegion
    window_hours: float
    volume_display: str = "0"  # volume_in_window in the display unit, e.g. "8.8k"


class RecoveryRead(BaseModel):
    computed_at: datetime
    overall_recovery: int  # percent
    muscles: list[MuscleRecoveryRead]


class SuggestionRead(Suggestion):
    computed_at: datetime
    threshold: float


class MuscleGroupRead(BaseModel):
    name: MuscleGroupName
    region: BodyRegion
    recovery_hours: float
