"""Shared constants for timecard."""

# Fixed report column order; index is the day offset from Sunday.
WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

# Canonical storage format for entry start/stop.
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_MEMO_WIDTH = 20
