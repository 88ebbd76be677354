"""Time parsing and formatting helpers.

Entries are stored with canonical 'YYYY-MM-DD HH:MM:SS' timestamps. Users
type times in compact 'HHMM' form ("0900") and dates as today, yesterday,
tomorrow or an ISO date.
"""

from datetime import date, datetime, timedelta

from timecard.constants import DATE_FORMAT, WEEKDAYS
from timecard.errors import (
    InvalidDateInput,
    InvalidTimeInput,
    MalformedTimestamp,
)
from timecard.models import Entry

RELATIVE_DAYS = {
    "today": 0,
    "yesterday": -1,
    "tomorrow": 1,
}


def weekday_index(label: str) -> int:
    """Return the Sunday-based index (Sun=0..Sat=6) of a weekday label."""
    try:
        return WEEKDAYS.index(label)
    except ValueError:
        raise ValueError(f"Unknown weekday label: {label!r}") from None


def weekday_label(day: date) -> str:
    """Return the three-letter label for a date, e.g. 'Sun'."""
    # date.weekday() is Monday-based
    return WEEKDAYS[(day.weekday() + 1) % 7]


def parse_entry_time(value: str) -> tuple[int, int]:
    """Parse compact time input into (hour, minute).

    Args:
        value: One to four digits, e.g. "0900", "900" or "1730".

    Returns:
        Tuple of hour and minute.

    Raises:
        InvalidTimeInput: If the input is not numeric or out of range.
    """
    text = value.strip()
    if not text.isdigit() or len(text) > 4:
        raise InvalidTimeInput(value)

    number = int(text)
    hour, minute = number // 100, number % 100
    if hour > 23:
        raise InvalidTimeInput(value, "hour must be 00-23")
    if minute > 59:
        raise InvalidTimeInput(value, "minute must be 00-59")
    return hour, minute


def format_timestamp(day: date, hour: int, minute: int) -> str:
    """Build a canonical timestamp for a day and time (seconds are zero)."""
    return f"{day.year:04}-{day.month:02}-{day.day:02} {hour:02}:{minute:02}:00"


def parse_timestamp(value: str) -> datetime:
    """Parse a canonical timestamp.

    Raises:
        MalformedTimestamp: If value is not 'YYYY-MM-DD HH:MM:SS'.
    """
    try:
        return datetime.strptime(value, DATE_FORMAT)
    except (TypeError, ValueError):
        raise MalformedTimestamp(value) from None


def resolve_date(value: str, today: date) -> date:
    """Resolve a date argument relative to today.

    Args:
        value: 'today', 'yesterday', 'tomorrow' or 'YYYY-MM-DD'.
        today: The current date.

    Raises:
        InvalidDateInput: If the value is none of the above.
    """
    text = value.strip().lower()
    if text in RELATIVE_DAYS:
        return today + timedelta(days=RELATIVE_DAYS[text])
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise InvalidDateInput(value) from None


def elapsed_minutes(start: datetime, stop: datetime) -> int:
    """Whole minutes from start to stop, truncated toward zero."""
    return int((stop - start).total_seconds() / 60)


def elapsed_hours(start: datetime, stop: datetime) -> float:
    return elapsed_minutes(start, stop) / 60


def build_entry(day: date, start: str, stop: str, code: str, memo: str) -> Entry:
    """Create an Entry from compact start/stop input on a given day.

    The weekday label is derived from ``day`` so it always agrees with
    the start timestamp.
    """
    start_hour, start_minute = parse_entry_time(start)
    stop_hour, stop_minute = parse_entry_time(stop)
    return Entry(
        start=format_timestamp(day, start_hour, start_minute),
        stop=format_timestamp(day, stop_hour, stop_minute),
        week_day=weekday_label(day),
        code=code,
        memo=memo,
    )
