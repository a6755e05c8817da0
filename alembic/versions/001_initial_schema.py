"""Initial schema: exercises (with muscle groups), workouts, workout_sets.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

MUSCLE_GROUPS = (
    "CHEST", "SHOULDERS", "BACK", "BICEPS", "TRICEPS",
    "CORE", "QUADS", "HAMSTRINGS", "GLUTES", "CALVES",
)
SET_LABELS = ("WARMUP", "WORKING", "FAILURE", "DROP_SET")


def upgrade() -> None:
    muscle_group = postgresql.ENUM(*MUSCLE_GROUPS, name="muscle_group_name")
    set_label = postgresql.ENUM(*SET_LABELS, name="setlabel")
    muscle_group.create(op.get_bind(), checkfirst=True)
    set_label.create(op.get_bind(), checkfirst=True)
    muscle_group_col = postgresql.ENUM(*MUSCLE_GROUPS, name="muscle_group_name", create_type=False)

    op.create_table(
        "exercises",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.String(length=1000), nullable=True),
        sa.Column("unit", sa.String(length=20), nullable=True),
        sa.Column("rest_seconds_preset", sa.Integer(), nullable=True),
        sa.Column("primary_muscle_group", muscle_group_col, nullable=True),
        sa.Column("secondary_muscle_group", muscle_group_col, nullable=True),
        sa.Column("tertiary_muscle_group", muscle_group_col, nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_exercises_name"), "exercises", ["name"], unique=False)
    op.create_index(
        op.f("ix_exercises_primary_muscle_group"), "exercises", ["primary_muscle_group"], unique=False
    )

    op.create_table(
        "workouts",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("ended_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workouts_started_at", "workouts", ["started_at"], unique=False)

    op.create_table(
        "workout_sets",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("workout_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("exercise_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("set_order", sa.Integer(), nullable=True),
        sa.Column("weight", sa.Numeric(precision=8, scale=2), nullable=True),
        sa.Column("reps", sa.Integer(), nullable=True),
        sa.Column("notes", sa.String(length=500), nullable=True),
        sa.Column("set_label", postgresql.ENUM(*SET_LABELS, name="setlabel", create_type=False), nullable=True),
        sa.ForeignKeyConstraint(["exercise_id"], ["exercises.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["workout_id"], ["workouts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workout_sets_workout_id", "workout_sets", ["workout_id"], unique=False)
    op.create_index("ix_workout_sets_exercise_id", "workout_sets", ["exercise_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_workout_sets_exercise_id", table_name="workout_sets")
    op.drop_index("ix_workout_sets_workout_id", table_name="workout_sets")
    op.drop_table("workout_sets")
    op.drop_index("ix_workouts_started_at", table_name="workouts")
    op.drop_table("workouts")
    op.drop_index(op.f("ix_exercises_primary_muscle_group"), table_name="exercises")
    op.drop_index(op.f("ix_exercises_name"), table_name="exercises")
    op.drop_table("exercises")
    postgresql.ENUM(name="setlabel").drop(op.get_bind(), checkfirst=True)
    postgresql.ENUM(name="muscle_group_name").drop(op.get_bind(), checkfirst=True)
