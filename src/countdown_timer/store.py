from __future__ import annotations

import typing as tp
import logging
from datetime import datetime, timedelta

from .shared import TimerState, START_TIME_KEY, END_TIME_KEY, TICK_INTERVAL, toUTC
from .storage_interface import StorageInterface
from .clock_interface import ClockInterface, Cancellable

log = logging.getLogger(__name__)

Listener = tp.Callable[[TimerState], None]

class TimerStore:
    '''
    Owns the one current `TimerState`.
    Every assignment to `state` notifies the listeners.
    '''

    def __init__(
        self,
        storage: StorageInterface,
        clock: ClockInterface,
        tick_interval: timedelta = TICK_INTERVAL,
    ) -> None:
        self.storage = storage
        self.clock = clock
        self.tick_interval = tick_interval

        self.__state = TimerState.Default()
        self.__listeners: list[Listener] = []
        self.__pending_tick: Cancellable | None = None

    @property
    def state(self) -> TimerState:
        return self.__state

    @state.setter
    def state(self, new_state: TimerState) -> None:
        self.__state = new_state
        for listener in [*self.__listeners]:
            listener(new_state)

    def subscribe(self, listener: Listener) -> tp.Callable[[], None]:
        self.__listeners.append(listener)
        def unsubscribe() -> None:
            if listener in self.__listeners:
                self.__listeners.remove(listener)
        return unsubscribe

    def restore(self) -> TimerState:
        start_str = self.storage.get(START_TIME_KEY)
        end_str   = self.storage.get(END_TIME_KEY)
        if start_str is None or end_str is None:
            return self.state
        start_time = toUTC(datetime.fromisoformat(start_str))
        end_time   = toUTC(datetime.fromisoformat(end_str))
        remaining = end_time - self.__now()
        self.__cancelTick()
        if remaining < timedelta(0):
            log.info('persisted timer ended at %s, discarding', end_str)
            self.state = TimerState.Default()
            return self.state
        log.info('resuming timer, %s left', remaining)
        self.__scheduleTick()
        self.state = TimerState(
            start_time=start_time,
            end_time=end_time,
            remaining_time=remaining,
            is_running=True,
        )
        return self.state

    def start(self, duration: timedelta) -> None:
        '''
        A negative `duration` starts an already-overdue timer, which the 
        first tick expires.  
        '''
        start_time = self.__now()
        new_state = TimerState(
            start_time=start_time,
            end_time=start_time + duration,
            remaining_time=max(duration, timedelta(0)),
            is_running=True,
        )
        log.info('started %s timer', duration)
        self.__save(new_state)
        self.__scheduleTick()
        self.state = new_state

    def stop(self) -> None:
        self.__cancelTick()
        new_state = self.state.withRunning(False)
        log.info('stopped with %s left', new_state.remaining_time)
        self.__save(new_state)
        self.state = new_state

    def reset(self) -> None:
        self.__cancelTick()
        log.info('reset')
        self.__clear()
        self.state = TimerState.Default()

    def close(self) -> None:
        '''
        Drop the pending tick. State and storage are left as they are,
        so a running timer is picked up again by the next `restore()`.
        '''
        self.__cancelTick()

    def __tick(self) -> None:
        self.__pending_tick = None
        if not self.state.is_running:
            return
        end_time = self.state.end_time
        assert end_time is not None
        remaining = end_time - self.__now()
        if remaining < timedelta(0):
            log.info('expired')
            self.__clear()
            self.state = TimerState(
                start_time=self.state.start_time,
                end_time=end_time,
                remaining_time=timedelta(0),
                is_running=False,
            )
            return
        log.debug('tick: %s left', remaining)
        self.__scheduleTick()
        self.state = TimerState(
            start_time=self.state.start_time,
            end_time=end_time,
            remaining_time=remaining,
            is_running=True,
        )

    def __now(self) -> datetime:
        return toUTC(self.clock.now())

    def __scheduleTick(self) -> None:
        self.__cancelTick()
        self.__pending_tick = self.clock.callLater(
            self.tick_interval, self.__tick,
        )

    def __cancelTick(self) -> None:
        if self.__pending_tick is not None:
            self.__pending_tick.cancel()
            self.__pending_tick = None

    def __save(self, state: TimerState) -> None:
        if state.start_time is None or state.end_time is None:
            return
        self.storage.set(START_TIME_KEY, state.start_time.isoformat())
        self.storage.set(END_TIME_KEY,   state.end_time  .isoformat())

    def __clear(self) -> None:
        self.storage.remove(START_TIME_KEY)
        self.storage.remove(END_TIME_KEY)
