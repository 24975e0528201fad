from datetime import date, datetime
from typing import Union

DateInput = Union[str, date, datetime]

MS_PER_HOUR = 1000 * 60 * 60
MS_PER_DAY = MS_PER_HOUR * 24


def is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def to_datetime(value: DateInput) -> datetime:
    """
    Convert a calendar value to a naive datetime.
    Date-only input (a `date` or 'YYYY-MM-DD') lands on midnight.
    Raises ValueError when a string cannot be parsed.
    """
    if isinstance(value, datetime):
        # Aware timestamps are compared in local wall-clock terms like the rest of the module
        return value.astimezone().replace(tzinfo=None) if value.tzinfo else value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise ValueError(f"Not an ISO date: {value!r}")
        return to_datetime(parsed)
    raise TypeError(f"Unsupported date value type: {type(value).__name__}")


def milliseconds_between(start: datetime, end: datetime) -> float:
    """Signed milliseconds from `start` to `end`."""
    return (end - start).total_seconds() * 1000
