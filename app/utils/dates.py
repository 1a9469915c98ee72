from datetime import datetime, date, time, timezone
from typing import Any


def from_epoch_millis(value: Any) -> Any:
    """
    Read numbers as epoch milliseconds and plain dates as midnight.

    Strings and datetimes are left for pydantic to parse.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise ValueError("timestamp out of range")
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    return value


def to_utc(value: datetime) -> datetime:
    """Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    try:
        return value.astimezone(timezone.utc)
    except OverflowError:
        raise ValueError("date out of range")


def is_before(value: datetime, other: datetime) -> bool:
    return to_utc(value) < to_utc(other)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_long_date(value: datetime) -> str:
    """Render ``value`` as e.g. ``January 10, 2030``."""
    value = to_utc(value)
    return f"{value:%B} {value.day}, {value.year}"
