"""Date/time helpers used by the date-component filters."""

from datetime import date, datetime, time
from typing import Union

from repokit.errors import QueryConstructionError

DateInput = Union[str, date, datetime, None]
TimeInput = Union[str, time, datetime, None]


def now() -> datetime:
    """Current local time. Date-component filters default to its parts."""
    return datetime.now()


def to_date_string(value: DateInput) -> str:
    """
    Normalize a date input to 'YYYY-MM-DD'.

    Args:
        value: ISO 8601 date/datetime string, date, datetime, or None for today

    Raises:
        QueryConstructionError: If a string cannot be parsed

    Example:
        >>> to_date_string("2025-12-23T10:00:00")
        '2025-12-23'
    """
    if value is None:
        return now().date().isoformat()
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    try:
        return datetime.fromisoformat(value.strip()).date().isoformat()
    except ValueError as e:
        raise QueryConstructionError(f"Unparseable date: {value!r}") from e


def to_time_string(value: TimeInput) -> str:
    """
    Normalize a time input to 'HH:MM:SS'.

    Accepts 'HH:MM', 'HH:MM:SS', a full ISO datetime string, a time, a
    datetime, or None for the current time.
    """
    if value is None:
        return now().time().replace(microsecond=0).isoformat()
    if isinstance(value, datetime):
        return value.time().replace(microsecond=0).isoformat()
    if isinstance(value, time):
        return value.replace(microsecond=0).isoformat()

    text = value.strip()
    try:
        if "T" in text or " " in text:
            parsed = datetime.fromisoformat(text).time()
        else:
            parsed = time.fromisoformat(text)
    except ValueError as e:
        raise QueryConstructionError(f"Unparseable time: {value!r}") from e
    return parsed.replace(microsecond=0).isoformat()
