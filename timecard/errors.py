"""Exception types for timecard."""


class TimecardError(Exception):
    """Base class for all timecard errors."""


class InvalidOffset(TimecardError):
    """The week resolver was given an offset it cannot resolve."""

    def __init__(self, weeks_ago: int):
        self.weeks_ago = weeks_ago
        if weeks_ago < 0:
            super().__init__(f"Week offset must be zero or positive, got {weeks_ago}")
        else:
            super().__init__(f"Week offset {weeks_ago} is out of the supported date range")


class MalformedTimestamp(TimecardError):
    """A stored timestamp is not in 'YYYY-MM-DD HH:MM:SS' form."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Malformed timestamp: {value!r}")


class EncodingError(TimecardError):
    """Memo chunking split a multi-byte character."""

    def __init__(self, memo: str, offset: int):
        self.memo = memo
        self.offset = offset
        super().__init__(f"Memo chunk at byte {offset} is not valid UTF-8")


class InvalidTimeInput(TimecardError):
    """Compact time input such as '0900' could not be parsed."""

    def __init__(self, value: str, reason: str = "expected HHMM"):
        self.value = value
        super().__init__(f"Invalid time {value!r}: {reason}")


class InvalidDateInput(TimecardError):
    """A date argument was not today/yesterday/tomorrow or YYYY-MM-DD."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"Invalid date {value!r}: use today, yesterday, tomorrow or YYYY-MM-DD"
        )


class EntryNotFound(TimecardError):
    """No entry matched the requested id."""

    def __init__(self, entry_id=None):
        self.entry_id = entry_id
        if entry_id is None:
            super().__init__("No entries recorded")
        else:
            super().__init__(f"Entry #{entry_id} not found")


class ProjectNotFound(TimecardError):
    """No project matched the requested code."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Project {code!r} not found")


class DuplicateProject(TimecardError):
    """A project with the same code already exists."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Project {code!r} already exists")


class ConfigError(TimecardError):
    """The configuration file could not be read."""


class CorruptEntry(TimecardError):
    """A stored entry row does not form a valid Entry."""

    def __init__(self, entry_id, reason: str):
        self.entry_id = entry_id
        self.reason = reason
        super().__init__(f"Stored entry #{entry_id} is invalid: {reason}")
