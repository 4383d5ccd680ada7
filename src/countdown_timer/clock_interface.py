import typing as tp
from abc import ABC, abstractmethod
from datetime import datetime, timedelta

class Cancellable(tp.Protocol):
    def cancel(self) -> None:
        ...

class ClockInterface(ABC):
    @abstractmethod
    def now(self) -> datetime:
        raise NotImplementedError
    
    @abstractmethod
    def callLater(
        self, delay: timedelta, callback: tp.Callable[[], None], 
    ) -> Cancellable:
        '''
        Single-shot. `callback` runs once after `delay` unless the 
        returned handle is cancelled first.  
        '''
        raise NotImplementedError
