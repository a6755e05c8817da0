from datetime import datetime, timedelta, timezone

import pytest

from app.core.enums import MuscleGroupName as MG
from app.core.enums import SuggestionType
from app.schemas.recovery import SetLog
from app.services.recovery_monitor import RecoveryMonitor

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)
LEG_DAY = frozenset({MG.QUADS, MG.HAMSTRINGS, MG.GLUTES, MG.CALVES, MG.CORE})


class FakeClock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock(NOW)


@pytest.fixture
def monitor(clock):
    return RecoveryMonitor(windows={mg: 48.0 for mg in MG}, threshold=0.7, clock=clock)


def _leg_day(at):
    return SetLog(exercise_id="squat", muscle_groups=LEG_DAY, timestamp=at, volume=5000)


def test_initial_snapshot_is_full_body(monitor):
    assert monitor.snapshot.suggestion.type == SuggestionType.FULL
    assert monitor.snapshot.now == NOW


def test_record_notifies_subscribers(monitor):
    received = []
    monitor.subscribe(received.append)

    snapshot = monitor.record(_leg_day(NOW))

    assert received == [snapshot]
    assert snapshot.suggestion.type == SuggestionType.UPPER
    assert snapshot.recovery[MG.QUADS].recovery == 0.0
    assert monitor.history == (_leg_day(NOW),)


def test_tick_advances_recovery(monitor, clock):
    monitor.record(_leg_day(NOW))
    clock.now = NOW + timedelta(hours=24)
    snapshot = monitor.tick()
    assert snapshot.now == clock.now
    assert snapshot.recovery[MG.QUADS].recovery == pytest.approx(0.5)

    snapshot = monitor.tick(NOW + timedelta(hours=48))
    assert snapshot.suggestion.type == SuggestionType.FULL


def test_update_settings_recomputes(monitor):
    monitor.record(_leg_day(NOW - timedelta(hours=36)))
    assert monitor.snapshot.recovery[MG.QUADS].recovery == pytest.approx(0.75)
    # 0.75 is fresh at 0.7 but not at 0.8
    assert monitor.snapshot.suggestion.type == SuggestionType.FULL

    snapshot = monitor.update_settings(threshold=0.8)
    assert snapshot.suggestion.type == SuggestionType.UPPER

    snapshot = monitor.update_settings(windows={MG.QUADS: 36.0})
    assert snapshot.recovery[MG.QUADS].recovery == 1.0


def test_unsubscribe(monitor):
    received = []
    unsubscribe = monitor.subscribe(received.append)
    monitor.tick()
    unsubscribe()
    monitor.tick()
    unsubscribe()  # second call is a no-op
    assert len(received) == 1


def test_replace_history(monitor):
    monitor.record(_leg_day(NOW))
    snapshot = monitor.replace_history([])
    assert snapshot.suggestion.type == SuggestionType.FULL
    assert monitor.history == ()


def test_all_subscribers_see_the_same_instant(monitor, clock):
    seen = []
    monitor.subscribe(lambda s: seen.append(s.now))
    monitor.subscribe(lambda s: seen.append(s.now))
    monitor.tick()
    assert seen == [NOW, NOW]
