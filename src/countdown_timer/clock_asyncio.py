import asyncio
import typing as tp
from datetime import datetime, timedelta, timezone

from .clock_interface import ClockInterface, Cancellable

class ClockAsyncio(ClockInterface):
    '''
    UTC time; callbacks go on the running asyncio loop, which is 
    the loop Textual drives.  
    '''

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
    
    def callLater(
        self, delay: timedelta, callback: tp.Callable[[], None], 
    ) -> Cancellable:
        loop = asyncio.get_running_loop()
        return loop.call_later(delay.total_seconds(), callback)
