import time
from typing import Callable

Clock = Callable[[], int]


def system_clock() -> int:
    """Current wall-clock time as unix seconds."""
    return int(time.time())


def fixed_clock(timestamp: int) -> Clock:
    """Clock frozen at the given unix timestamp, for deterministic reviews."""
    def _now() -> int:
        return timestamp
    return _now
