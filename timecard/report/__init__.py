"""Weekly report engine."""

from timecard.report.aggregate import aggregate, wrap_memo
from timecard.report.render import render
from timecard.report.week import resolve_week
from timecard.report.weekly import WeeklyReport, build_weekly_report

__all__ = [
    "resolve_week",
    "aggregate",
    "wrap_memo",
    "render",
    "build_weekly_report",
    "WeeklyReport",
]
