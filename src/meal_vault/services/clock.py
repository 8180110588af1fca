"""Wall clock abstraction."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    """Source of the current date and instant."""

    def today(self) -> str:
        """Return the current calendar date as YYYY-MM-DD."""

    def now_ms(self) -> int:
        """Return milliseconds since the epoch."""


@dataclass
class SystemClock(Clock):
    """Clock backed by the system time in a configured timezone."""

    timezone_name: str = "UTC"

    def today(self) -> str:
        return datetime.now(tz=ZoneInfo(self.timezone_name)).date().isoformat()

    def now_ms(self) -> int:
        return int(datetime.now(tz=ZoneInfo(self.timezone_name)).timestamp() * 1000)
