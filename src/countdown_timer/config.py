from __future__ import annotations

import os
import logging
from datetime import timedelta

import dotenv
from pydantic import BaseModel, ConfigDict, Field

from .shared import DEFAULT_DURATION

class Config(BaseModel):
    store_path: str
    duration_seconds: int = Field(gt=0)
    log_level: str

    model_config = ConfigDict(
        frozen=True,
    )

    @property
    def duration(self) -> timedelta:
        return timedelta(seconds=self.duration_seconds)

    @property
    def log_level_number(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f'Unknown log level: {self.log_level}')
        return level

def loadConfig() -> Config:
    dotenv.load_dotenv()

    return Config(
        store_path=os.path.expanduser(os.getenv(
            'COUNTDOWN_TIMER_STORE', '~/.countdown_timer.json', 
        )),
        duration_seconds=int(os.getenv(
            'COUNTDOWN_TIMER_SECONDS', 
            str(int(DEFAULT_DURATION.total_seconds())),
        )),
        log_level=os.getenv('COUNTDOWN_TIMER_LOG_LEVEL', 'INFO'),
    )
