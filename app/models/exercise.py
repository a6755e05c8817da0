"""Exercise model - trackable exercise types with the muscle groups they train."""

from __future__ import annotations

import uuid

from sqlalchemy import Enum, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.enums import MuscleGroupName
from app.db.base import Base

MuscleGroupEnum = Enum(MuscleGroupName, name="muscle_group_name")


class Exercise(Base):
    """Exercise definition with Primary/Secondary/Tertiary muscle groups."""

    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    unit: Mapped[str] = mapped_column(String(20), default="kg")
    rest_seconds_preset: Mapped[int | None] = mapped_column(nullable=True)  # Rest timer preset

    primary_muscle_group: Mapped[MuscleGroupName | None] = mapped_column(MuscleGroupEnum, nullable=True, index=True)
    secondary_muscle_group: Mapped[MuscleGroupName | None] = mapped_column(MuscleGroupEnum, nullable=True)
    tertiary_muscle_group: Mapped[MuscleGroupName | None] = mapped_column(MuscleGroupEnum, nullable=True)

    workout_sets: Mapped[list["WorkoutSet"]] = relationship(
        "WorkoutSet", back_populates="exercise", cascade="all, delete-orphan"
    )

    @property
    def muscle_groups(self) -> frozenset[MuscleGroupName]:
        """Every muscle group this exercise stimulates."""
        return frozenset(
            mg
            for mg in (self.primary_muscle_group, self.secondary_muscle_group, self.tertiary_muscle_group)
            if mg is not None
        )
