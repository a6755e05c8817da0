"""Muscle group catalogue (fixed set, classified upper/lower)."""

from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from app.core.constants import MUSCLE_REGIONS
from app.core.enums import MuscleGroupName
from app.schemas.recovery import MuscleGroupRead

router = APIRouter()


@router.get("", response_model=list[MuscleGroupRead])
async def list_muscle_groups(settings: Settings = Depends(get_settings)):
    """All tracked muscle groups with their region and recovery window (hours)."""
    windows = settings.recovery_windows
    return [
        MuscleGroupRead(name=mg, region=MUSCLE_REGIONS[mg], recovery_hours=windows[mg])
        for mg in MuscleGroupName
    ]
