"""Entry source interface for the weekly report."""

from abc import ABC, abstractmethod
from datetime import datetime

from timecard.models import Entry


class EntrySource(ABC):
    """Anything that can supply the entries of a date range.

    The report pipeline only needs this one query, so a local database,
    a fixture list or a remote service can all back a report.
    """

    @abstractmethod
    def get_entries_between(self, start: datetime, end: datetime) -> list[Entry]:
        """Get entries whose start timestamp falls in [start, end).

        Args:
            start: Inclusive lower bound.
            end: Exclusive upper bound.

        Returns:
            Entries ordered by start time.
        """
        pass
