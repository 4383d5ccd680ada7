from datetime import datetime, timezone

import pytest

from countdown_timer.clock_dummy import ClockDummy
from countdown_timer.storage_dummy import StorageDummy
from countdown_timer.store import TimerStore

T0 = datetime(2024, 5, 1, 9, 30, 0, tzinfo=timezone.utc)

@pytest.fixture
def clock() -> ClockDummy:
    return ClockDummy(T0)

@pytest.fixture
def storage() -> StorageDummy:
    return StorageDummy()

@pytest.fixture
def store(storage: StorageDummy, clock: ClockDummy) -> TimerStore:
    return TimerStore(storage, clock)
