import heapq
import itertools
import typing as tp
from datetime import datetime, timedelta, timezone

from .clock_interface import ClockInterface, Cancellable

class _Handle:
    def __init__(self, due: datetime, callback: tp.Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
    
    def cancel(self) -> None:
        self.cancelled = True

class ClockDummy(ClockInterface):
    '''
    Virtual time. Nothing happens until `advance()` is called.
    An aware `start` is kept as UTC internally and `now()` reports it in
    the zone of `start`, so advancing across a DST change adds real time.
    '''

    def __init__(self, start: datetime | None = None) -> None:
        if start is None:
            start = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        self.tz = start.tzinfo
        self.current = (
            start if self.tz is None else start.astimezone(timezone.utc)
        )
        self.__queue: list[tuple[datetime, int, _Handle]] = []
        self.__seq = itertools.count()

    def now(self) -> datetime:
        if self.tz is None:
            return self.current
        return self.current.astimezone(self.tz)
    
    def callLater(
        self, delay: timedelta, callback: tp.Callable[[], None], 
    ) -> Cancellable:
        handle = _Handle(self.current + delay, callback)
        heapq.heappush(self.__queue, (handle.due, next(self.__seq), handle))
        return handle
    
    def advance(self, delta: timedelta) -> None:
        target = self.current + delta
        while self.__queue and self.__queue[0][0] <= target:
            due, _, handle = heapq.heappop(self.__queue)
            if handle.cancelled:
                continue
            self.current = due
            handle.callback()
        self.current = target
    
    def pending(self) -> int:
        return sum(1 for _, _, h in self.__queue if not h.cancelled)
