from .UI import UI as TimerUI
from .store import TimerStore
from .shared import TimerState
from .storage_json import StorageJSON
from .storage_dummy import StorageDummy
from .clock_asyncio import ClockAsyncio
from .clock_dummy import ClockDummy
from .config import loadConfig

__all__ = [
    "TimerUI", "TimerStore", "TimerState", 
    "StorageJSON", "StorageDummy", "ClockAsyncio", "ClockDummy", 
    "loadConfig",
]
