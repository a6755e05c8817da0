"""Recompute recovery and today's suggestion whenever their inputs change.

The calculations in app.services.recovery / app.services.suggestion stay pure;
RecoveryMonitor owns the inputs (history, windows, threshold, clock) and tells
subscribers about every new result.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict

from app.core.constants import FRESHNESS_THRESHOLD, MUSCLE_RECOVERY_HOURS
from app.core.enums import MuscleGroupName
from app.schemas.recovery import RecoveryStatus, SetLog, Suggestion
from app.services.recovery import compute_recovery
from app.services.suggestion import suggest_workout

logger = logging.getLogger(__name__)


class RecoverySnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    now: datetime
    recovery: dict[MuscleGroupName, RecoveryStatus]
    suggestion: Suggestion


Subscriber = Callable[[RecoverySnapshot], None]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RecoveryMonitor:
    """Observer hub: record sets, tick the clock or change settings and subscribers get a fresh snapshot."""

    def __init__(
        self,
        history: Iterable[SetLog] = (),
        windows: Mapping[MuscleGroupName, float] | None = None,
        threshold: float = FRESHNESS_THRESHOLD,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._history: list[SetLog] = list(history)
        self._windows: dict[MuscleGroupName, float] = dict(windows if windows is not None else MUSCLE_RECOVERY_HOURS)
        self._threshold = threshold
        self._clock = clock
        self._subscribers: list[Subscriber] = []
        self._snapshot: RecoverySnapshot | None = None

    @property
    def history(self) -> tuple[SetLog, ...]:
        return tuple(self._history)

    @property
    def snapshot(self) -> RecoverySnapshot:
        """Latest result; computed on first access."""
        if self._snapshot is None:
            self._snapshot = self._compute(self._clock())
        return self._snapshot

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback; returns a function that unsubscribes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def record(self, set_log: SetLog) -> RecoverySnapshot:
        """A new set was logged."""
        self._history.append(set_log)
        return self._refresh()

    def replace_history(self, history: Iterable[SetLog]) -> RecoverySnapshot:
        """History was reloaded (e.g. after an edit or delete)."""
        self._history = list(history)
        return self._refresh()

    def update_settings(
        self,
        windows: Mapping[MuscleGroupName, float] | None = None,
        threshold: float | None = None,
    ) -> RecoverySnapshot:
        if windows is not None:
            self._windows.update(windows)
        if threshold is not None:
            self._threshold = threshold
        return self._refresh()

    def tick(self, now: datetime | None = None) -> RecoverySnapshot:
        """The clock advanced."""
        return self._refresh(now)

    def _compute(self, now: datetime) -> RecoverySnapshot:
        recovery = compute_recovery(self._history, now, self._windows)
        return RecoverySnapshot(
            now=now,
            recovery=recovery,
            suggestion=suggest_workout(recovery, self._threshold),
        )

    def _refresh(self, now: datetime | None = None) -> RecoverySnapshot:
        # Sample the clock once so every subscriber sees the same instant
        snapshot = self._compute(now or self._clock())
        self._snapshot = snapshot
        for callback in list(self._subscribers):
            callback(snapshot)
        logger.debug(
            "Recovery refreshed for %d subscriber(s): %s",
            len(self._subscribers),
            snapshot.suggestion.type.value,
        )
        return snapshot
