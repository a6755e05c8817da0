"""Shared request dependencies."""

from datetime import datetime, timezone

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings, get_settings
from app.db.session import get_db
from app.schemas.recovery import SetLog
from app.services.history import load_set_logs


def get_now() -> datetime:
    """Current time, sampled once per request."""
    return datetime.now(timezone.utc)


async def get_set_logs(
    now: datetime = Depends(get_now),
    settings: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_db),
) -> list[SetLog]:
    """Training history covering the longest recovery window."""
    lookback = max(settings.recovery_windows.values(), default=settings.default_recovery_hours)
    return await load_set_logs(db, now, lookback)
