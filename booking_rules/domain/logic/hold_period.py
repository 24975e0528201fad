import math
from datetime import datetime, timedelta
from typing import Optional
from booking_rules.core.config import settings
from booking_rules.utils.clock import Clock, read_clock
from booking_rules.utils.dates import MS_PER_HOUR, milliseconds_between, to_datetime

DEFAULT_HOLD_DAYS = 3


def calculate_hold_period(cruise_duration: int) -> int:
    """
    Number of days a cruise booking is held unpaid.

    Args:
        cruise_duration: Cruise length in nights

    Returns:
        Hold days of the first policy rule whose threshold covers the duration
    """
    for rule in settings.hold_period_rules:
        if cruise_duration <= rule.duration_threshold_nights:
            return rule.hold_days
    # Unreachable while the table ends with an unbounded rule
    return DEFAULT_HOLD_DAYS


def calculate_hold_expiry(booking_date: datetime, cruise_duration: int) -> datetime:
    """
    Booking date plus the hold period in calendar days, time of day preserved.
    An aware booking date gives an aware expiry in the same offset.
    """
    return booking_date + timedelta(days=calculate_hold_period(cruise_duration))


def is_hold_valid(hold_expiry: datetime, *, clock: Optional[Clock] = None) -> bool:
    return read_clock(clock) < to_datetime(hold_expiry)


def get_remaining_hold_time(hold_expiry: datetime, *, clock: Optional[Clock] = None) -> int:
    """Hours left on the hold, rounded up; 0 once it has lapsed."""
    diff_ms = milliseconds_between(read_clock(clock), to_datetime(hold_expiry))
    return max(0, math.ceil(diff_ms / MS_PER_HOUR))


def format_hold_period(cruise_duration: int) -> str:
    hold_days = calculate_hold_period(cruise_duration)
    return f"{hold_days} day{'s' if hold_days > 1 else ''}"
