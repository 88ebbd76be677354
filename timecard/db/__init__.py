"""Storage for timecard."""

from timecard.db.base import EntrySource
from timecard.db.store import DataStore

__all__ = ["EntrySource", "DataStore"]
