import logging

from textual.logging import TextualHandler

from .config import loadConfig
from .storage_json import StorageJSON
from .clock_asyncio import ClockAsyncio
from .store import TimerStore
from .UI import UI

def main() -> None:
    config = loadConfig()
    logging.basicConfig(
        level=config.log_level_number, handlers=[TextualHandler()], 
    )
    store = TimerStore(StorageJSON(config.store_path), ClockAsyncio())
    UI(store, duration=config.duration).run()

if __name__ == '__main__':
    main()
