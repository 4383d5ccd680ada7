from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from countdown_timer.shared import TimerState

NOW = datetime(2024, 5, 1, 9, 30, 0)

def test_default():
    state = TimerState.Default()
    assert state.start_time is None
    assert state.end_time is None
    assert state.remaining_time == timedelta(0)
    assert not state.is_running

def test_timestamps_come_in_pairs():
    with pytest.raises(ValidationError):
        TimerState(start_time=NOW)
    with pytest.raises(ValidationError):
        TimerState(end_time=NOW)

def test_remaining_time_is_not_negative():
    with pytest.raises(ValidationError):
        TimerState(remaining_time=timedelta(seconds=-1))

def test_running_needs_timestamps():
    with pytest.raises(ValidationError):
        TimerState(is_running=True)

def test_frozen():
    state = TimerState.Default()
    with pytest.raises(ValidationError):
        state.is_running = True  # type: ignore

def test_with_running_only_touches_the_flag():
    state = TimerState(
        start_time=NOW,
        end_time=NOW + timedelta(seconds=30),
        remaining_time=timedelta(seconds=12),
        is_running=True,
    )
    stopped = state.withRunning(False)
    assert not stopped.is_running
    assert stopped.start_time == state.start_time
    assert stopped.end_time == state.end_time
    assert stopped.remaining_time == state.remaining_time

def test_remaining_seconds_truncates():
    state = TimerState(remaining_time=timedelta(seconds=29.7))
    assert state.remainingSeconds() == 29
