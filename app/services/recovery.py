"""Muscle recovery: how fresh each muscle group is since it was last trained.

Linear model: a muscle group recovers from 0 to 1 over its recovery window,
counted from its most recent stimulus only. Earlier sessions inside the window
neither extend nor shorten it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone

from app.core.constants import (
    DEFAULT_RECOVERY_HOURS,
    INTENSITY_FRESH_MIN,
    INTENSITY_MODERATE_MIN,
    MUSCLE_RECOVERY_HOURS,
)
from app.core.enums import MuscleGroupName
from app.schemas.recovery import RecoveryStatus, SetLog

logger = logging.getLogger(__name__)


def as_utc(ts: datetime) -> datetime:
    """Treat naive timestamps as UTC so they compare with aware ones."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def recovery_to_intensity(recovery: float) -> int:
    """Body map level: 0 fresh (green), 1 moderate (yellow), 2 fatigued (red)."""
    if recovery >= INTENSITY_FRESH_MIN:
        return 0
    if recovery >= INTENSITY_MODERATE_MIN:
        return 1
    return 2


def recovery_fraction(elapsed_hours: float, window_hours: float) -> float:
    """min(1, elapsed / window), clamped at 0 for stimuli stamped in the future."""
    if window_hours <= 0:
        return 1.0
    return min(1.0, max(0.0, elapsed_hours / window_hours))


def compute_recovery(
    history: Iterable[SetLog],
    now: datetime,
    windows: Mapping[MuscleGroupName, float] | None = None,
) -> dict[MuscleGroupName, RecoveryStatus]:
    """
    Recovery status for every tracked muscle group.

    ``now`` must be sampled once by the caller. ``windows`` maps muscle group to
    recovery window in hours (MUSCLE_RECOVERY_HOURS when omitted); missing entries
    use DEFAULT_RECOVERY_HOURS. Stimuli stamped after ``now`` count as just trained.
    Never-trained muscle groups are fully recovered.
    """
    now = as_utc(now)
    windows = MUSCLE_RECOVERY_HOURS if windows is None else windows

    last_trained: dict[MuscleGroupName, datetime] = {}
    entries: list[tuple[datetime, SetLog]] = []
    for log in history:
        ts = as_utc(log.timestamp)
        entries.append((ts, log))
        for mg in log.muscle_groups:
            if mg not in last_trained or ts > last_trained[mg]:
                last_trained[mg] = ts

    statuses: dict[MuscleGroupName, RecoveryStatus] = {}
    for mg in MuscleGroupName:
        lt = last_trained.get(mg)
        if lt is None:
            statuses[mg] = RecoveryStatus()
            continue

        window = float(windows.get(mg, DEFAULT_RECOVERY_HOURS))
        hours_since = (now - lt).total_seconds() / 3600
        recovery = recovery_fraction(hours_since, window)

        # Volume of every stimulus on this muscle that is still inside its window
        volume = sum(
            log.volume
            for ts, log in entries
            if mg in log.muscle_groups and max(0.0, (now - ts).total_seconds() / 3600) < window
        )

        statuses[mg] = RecoveryStatus(
            recovery=round(recovery, 4),
            last_trained=lt,
            volume_in_window=round(volume, 2),
            intensity=recovery_to_intensity(recovery),
        )
        logger.debug(
            "Recovery %s: %.0f%% (%.1fh/%.0fh, volume %.0f)",
            mg.value,
            recovery * 100,
            hours_since,
            window,
            volume,
        )

    return statuses


def overall_recovery(statuses: Mapping[MuscleGroupName, RecoveryStatus]) -> int:
    """Mean recovery across muscle groups as a whole percentage (100 when empty)."""
    if not statuses:
        return 100
    return round(sum(s.recovery for s in statuses.values()) / len(statuses) * 100)
