"""Data models for timecard."""

from timecard.models.entry import Entry
from timecard.models.project import Project
from timecard.models.report import (
    AggregatedRow,
    ReportRow,
    ReportTable,
    SkippedEntry,
    WeekWindow,
)

__all__ = [
    "Entry",
    "Project",
    "WeekWindow",
    "AggregatedRow",
    "SkippedEntry",
    "ReportRow",
    "ReportTable",
]
