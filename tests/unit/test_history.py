from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from uuid import uuid4

import pytest

from app.core.enums import MuscleGroupName as MG
from app.core.enums import SetLabel
from app.services.history import build_set_logs

STARTED = datetime(2026, 10, 16, 18, 0, tzinfo=timezone.utc)
ENDED = STARTED + timedelta(hours=1)


def _exercise(*muscles):
    return SimpleNamespace(id=uuid4(), muscle_groups=frozenset(muscles))


def _workout(started=STARTED, ended=ENDED):
    return SimpleNamespace(id=uuid4(), started_at=started, ended_at=ended)


def _set(weight, reps, label=None):
    return SimpleNamespace(weight=weight, reps=reps, set_label=label)


def test_groups_sets_per_workout_and_exercise():
    bench = _exercise(MG.CHEST, MG.TRICEPS)
    workout = _workout()
    rows = [
        (_set(100, 5), bench, workout),
        (_set(100, 5), bench, workout),
        (_set(90, 8), bench, workout),
    ]
    logs = build_set_logs(rows)
    assert len(logs) == 1
    assert logs[0].exercise_id == bench.id
    assert logs[0].muscle_groups == frozenset({MG.CHEST, MG.TRICEPS})
    assert logs[0].timestamp == ENDED
    assert logs[0].volume == pytest.approx(1720)


def test_warmups_are_skipped():
    squat = _exercise(MG.QUADS)
    workout = _workout()
    rows = [
        (_set(60, 10, SetLabel.WARMUP), squat, workout),
        (_set(140, 5, SetLabel.WORKING), squat, workout),
    ]
    logs = build_set_logs(rows)
    assert logs[0].volume == pytest.approx(700)


def test_only_warmups_produce_no_stimulus():
    squat = _exercise(MG.QUADS)
    assert build_set_logs([(_set(60, 10, SetLabel.WARMUP), squat, _workout())]) == []


def test_in_progress_workout_uses_start_time():
    logs = build_set_logs([(_set(20, 10), _exercise(MG.BICEPS), _workout(ended=None))])
    assert logs[0].timestamp == STARTED


def test_exercise_without_muscles_is_ignored():
    assert build_set_logs([(_set(20, 10), _exercise(), _workout())]) == []


def test_missing_weight_counts_as_zero_volume():
    logs = build_set_logs([(_set(None, 15), _exercise(MG.CORE), _workout())])
    assert logs[0].volume == 0.0


def test_sorted_by_time_and_naive_times_become_utc():
    earlier = _workout(started=datetime(2026, 10, 10, 9, 0), ended=None)
    later = _workout()
    row_late = (_set(50, 10), _exercise(MG.BACK), later)
    row_early = (_set(50, 10), _exercise(MG.BACK), earlier)
    logs = build_set_logs([row_late, row_early])
    assert [log.timestamp for log in logs] == [
        datetime(2026, 10, 10, 9, 0, tzinfo=timezone.utc),
        ENDED,
    ]
