"""Week window resolution."""

from datetime import date, timedelta

from timecard.errors import InvalidOffset
from timecard.models import WeekWindow
from timecard.report.timefmt import weekday_index, weekday_label


def resolve_week(today: date, weeks_ago: int = 0) -> WeekWindow:
    """Compute the Sunday-to-Saturday week a report covers.

    Args:
        today: Reference date; the window for ``weeks_ago=0`` contains it.
        weeks_ago: Whole weeks back from the current week (0 = this week).

    Returns:
        WeekWindow whose begin is a Sunday and end is six days later.

    Raises:
        InvalidOffset: If weeks_ago is negative or reaches past the earliest
            representable date.
    """
    if weeks_ago < 0:
        raise InvalidOffset(weeks_ago)

    offset = weekday_index(weekday_label(today)) + 7 * weeks_ago
    try:
        begin = today - timedelta(days=offset)
    except OverflowError as e:
        raise InvalidOffset(weeks_ago) from e
    return WeekWindow(begin=begin, end=begin + timedelta(days=6))
