from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, model_validator

START_TIME_KEY = 'start_time'
END_TIME_KEY = 'end_time'

DEFAULT_DURATION = timedelta(seconds=30)
TICK_INTERVAL = timedelta(seconds=1)

class TimerState(BaseModel):
    start_time: datetime | None = None
    end_time: datetime | None = None
    remaining_time: timedelta = timedelta(0)
    is_running: bool = False

    model_config = ConfigDict(
        frozen=True,
    )

    @model_validator(mode='after')
    def checkInvariants(self) -> TimerState:
        if (self.start_time is None) != (self.end_time is None):
            raise ValueError('start_time and end_time must be set together')
        if self.remaining_time < timedelta(0):
            raise ValueError(f'negative remaining_time: {self.remaining_time}')
        if self.is_running and self.end_time is None:
            raise ValueError('a running timer needs its timestamps')
        return self

    @classmethod
    def Default(cls) -> TimerState:
        return TimerState()

    def withRunning(self, is_running: bool) -> TimerState:
        return TimerState(
            start_time=self.start_time,
            end_time=self.end_time,
            remaining_time=self.remaining_time,
            is_running=is_running,
        )

    def remainingSeconds(self) -> int:
        '''
        Whole seconds, truncated.  
        '''
        return int(self.remaining_time.total_seconds())

def toUTC(t: datetime) -> datetime:
    '''
    Naive values are taken as local time.  
    Differences between the results are real elapsed time, DST or not.  
    '''
    return t.astimezone(timezone.utc)
