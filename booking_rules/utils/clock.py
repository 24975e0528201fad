from datetime import datetime
from typing import Callable, Optional
from booking_rules.utils.dates import to_datetime

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current local wall-clock time (naive)."""
    return datetime.now()


def read_clock(clock: Optional[Clock] = None) -> datetime:
    # Read on every call, results depending on "now" are never cached.
    # Aware clocks are brought to naive local time like every other timestamp.
    return to_datetime((clock or system_clock)())
