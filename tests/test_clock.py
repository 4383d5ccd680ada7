import asyncio
from datetime import datetime, timedelta, timezone

from countdown_timer.clock_asyncio import ClockAsyncio
from countdown_timer.clock_dummy import ClockDummy

def test_dummy_fires_in_due_order():
    clock = ClockDummy(datetime(2024, 1, 1))
    fired: list[str] = []
    clock.callLater(timedelta(seconds=2), lambda: fired.append('b'))
    clock.callLater(timedelta(seconds=1), lambda: fired.append('a'))
    clock.advance(timedelta(seconds=1))
    assert fired == ['a']
    clock.advance(timedelta(seconds=5))
    assert fired == ['a', 'b']
    assert clock.now() == datetime(2024, 1, 1, 0, 0, 6)

def test_dummy_runs_callbacks_scheduled_while_advancing():
    clock = ClockDummy(datetime(2024, 1, 1))
    times: list[datetime] = []
    def step() -> None:
        times.append(clock.now())
        if len(times) < 3:
            clock.callLater(timedelta(seconds=1), step)
    clock.callLater(timedelta(seconds=1), step)
    clock.advance(timedelta(seconds=10))
    assert times == [datetime(2024, 1, 1, 0, 0, s) for s in (1, 2, 3)]

def test_dummy_cancel():
    clock = ClockDummy()
    fired: list[int] = []
    handle = clock.callLater(timedelta(seconds=1), lambda: fired.append(1))
    assert clock.pending() == 1
    handle.cancel()
    assert clock.pending() == 0
    clock.advance(timedelta(seconds=2))
    assert fired == []

def test_asyncio_clock():
    async def main() -> tuple[list[str], list[str]]:
        clock = ClockAsyncio()
        fired: list[str] = []
        cancelled: list[str] = []
        clock.callLater(timedelta(milliseconds=10), lambda: fired.append('x'))
        handle = clock.callLater(
            timedelta(milliseconds=10), lambda: cancelled.append('y'),
        )
        handle.cancel()
        await asyncio.sleep(0.1)
        return fired, cancelled

    fired, cancelled = asyncio.run(main())
    assert fired == ['x']
    assert cancelled == []

def test_asyncio_clock_now_is_wall_time():
    before = datetime.now(timezone.utc)
    now = ClockAsyncio().now()
    assert now.tzinfo is not None
    assert before <= now <= datetime.now(timezone.utc)
