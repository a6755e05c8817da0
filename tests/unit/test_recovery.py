from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from app.core.constants import MUSCLE_RECOVERY_HOURS
from app.core.enums import MuscleGroupName as MG
from app.schemas.recovery import SetLog
from app.services.recovery import (
    compute_recovery,
    overall_recovery,
    recovery_fraction,
    recovery_to_intensity,
)

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)
WINDOWS = {mg: 48.0 for mg in MG}


def _log(hours_ago, *muscles, volume=1000.0):
    return SetLog(
        exercise_id=uuid4(),
        muscle_groups=frozenset(muscles),
        timestamp=NOW - timedelta(hours=hours_ago),
        volume=volume,
    )


def test_empty_history_is_fully_recovered():
    statuses = compute_recovery([], NOW, WINDOWS)
    assert set(statuses) == set(MG)
    for status in statuses.values():
        assert status.recovery == 1.0
        assert status.last_trained is None
        assert status.intensity == 0


def test_half_recovered_after_half_window():
    statuses = compute_recovery([_log(24, MG.CHEST)], NOW, WINDOWS)
    assert statuses[MG.CHEST].recovery == pytest.approx(0.5)
    assert statuses[MG.CHEST].last_trained == NOW - timedelta(hours=24)
    assert statuses[MG.CHEST].intensity == 1
    # Untouched muscles stay fresh
    assert statuses[MG.QUADS].recovery == 1.0


@pytest.mark.parametrize("hours_ago", [48, 49, 200])
def test_recovery_caps_at_one(hours_ago):
    statuses = compute_recovery([_log(hours_ago, MG.BACK)], NOW, WINDOWS)
    assert statuses[MG.BACK].recovery == 1.0


def test_only_most_recent_stimulus_counts():
    history = [_log(40, MG.QUADS), _log(12, MG.QUADS), _log(30, MG.QUADS)]
    statuses = compute_recovery(history, NOW, WINDOWS)
    assert statuses[MG.QUADS].recovery == pytest.approx(12 / 48)
    assert statuses[MG.QUADS].last_trained == NOW - timedelta(hours=12)


def test_history_order_does_not_matter():
    history = [_log(12, MG.CHEST, MG.TRICEPS), _log(36, MG.CHEST)]
    assert compute_recovery(history, NOW, WINDOWS) == compute_recovery(list(reversed(history)), NOW, WINDOWS)


def test_multi_muscle_log_updates_each_group():
    statuses = compute_recovery([_log(12, MG.CHEST, MG.SHOULDERS, MG.TRICEPS)], NOW, WINDOWS)
    for mg in (MG.CHEST, MG.SHOULDERS, MG.TRICEPS):
        assert statuses[mg].recovery == pytest.approx(0.25)
        assert statuses[mg].intensity == 2


def test_per_muscle_windows():
    history = [_log(36, MG.CHEST, MG.CORE)]
    statuses = compute_recovery(history, NOW, MUSCLE_RECOVERY_HOURS)
    assert statuses[MG.CHEST].recovery == pytest.approx(36 / 84, abs=1e-4)
    assert statuses[MG.CORE].recovery == 1.0


def test_missing_window_uses_default():
    statuses = compute_recovery([_log(36, MG.GLUTES)], NOW, {})
    assert statuses[MG.GLUTES].recovery == pytest.approx(0.5)


def test_future_timestamp_counts_as_just_trained():
    statuses = compute_recovery([_log(-5, MG.BICEPS, volume=750)], NOW, WINDOWS)
    assert statuses[MG.BICEPS].recovery == 0.0
    assert statuses[MG.BICEPS].volume_in_window == pytest.approx(750)


def test_omitted_windows_use_per_muscle_defaults():
    history = [_log(36, MG.CHEST, MG.CORE)]
    assert compute_recovery(history, NOW) == compute_recovery(history, NOW, MUSCLE_RECOVERY_HOURS)
    assert compute_recovery(history, NOW)[MG.CORE].recovery == 1.0


def test_naive_timestamps_are_utc():
    log = SetLog(
        exercise_id="bench",
        muscle_groups=frozenset({MG.CHEST}),
        timestamp=datetime(2026, 10, 16, 12, 0),
    )
    statuses = compute_recovery([log], NOW, WINDOWS)
    assert statuses[MG.CHEST].recovery == pytest.approx(0.5)


def test_volume_in_window_sums_recent_sessions_only():
    history = [
        _log(10, MG.HAMSTRINGS, volume=2000),
        _log(30, MG.HAMSTRINGS, volume=500),
        _log(60, MG.HAMSTRINGS, volume=9999),  # outside the 48h window
    ]
    statuses = compute_recovery(history, NOW, WINDOWS)
    assert statuses[MG.HAMSTRINGS].volume_in_window == pytest.approx(2500)


def test_recovery_fraction_edge_cases():
    assert recovery_fraction(0, 48) == 0.0
    assert recovery_fraction(12, 48) == pytest.approx(0.25)
    assert recovery_fraction(100, 48) == 1.0
    assert recovery_fraction(-3, 48) == 0.0
    assert recovery_fraction(5, 0) == 1.0


@pytest.mark.parametrize(
    "recovery,level",
    [(1.0, 0), (0.7, 0), (0.69, 1), (0.4, 1), (0.39, 2), (0.0, 2)],
)
def test_recovery_to_intensity(recovery, level):
    assert recovery_to_intensity(recovery) == level


def test_overall_recovery():
    statuses = compute_recovery([_log(24, MG.CHEST), _log(0, MG.QUADS)], NOW, WINDOWS)
    # 8 fresh + 0.5 + 0.0 over 10 groups
    assert overall_recovery(statuses) == 85
    assert overall_recovery({}) == 100
