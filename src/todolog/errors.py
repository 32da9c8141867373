"""Errors raised while parsing, loading and saving a todo log.

File access failures are not wrapped: they surface as the built-in
``OSError`` family.
"""

import datetime


class TodoError(Exception):
    """Base class for todo log errors."""


class MalformedDateError(TodoError, ValueError):
    """A day block does not open with a valid ``[YYYY-MM-DD]`` line."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"Invalid date line: {line!r} (expected [YYYY-MM-DD])")


class MalformedTaskError(TodoError, ValueError):
    """A line expected to be a task does not start with the task marker."""

    def __init__(self, line: str, reason: str = "task must start with '-'") -> None:
        self.line = line
        super().__init__(f"Invalid task {line!r}: {reason}")


class ClockSkewError(TodoError):
    """The file holds a day later than today."""

    def __init__(self, last_date: datetime.date, today: datetime.date) -> None:
        self.last_date = last_date
        self.today = today
        super().__init__(
            f"Invalid date: date on file ({last_date.isoformat()}) "
            f"is ahead of today ({today.isoformat()})"
        )


class MalformedSectionError(TodoError, ValueError):
    """A section name that would not read back as the same section."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        super().__init__(f"Invalid section name {name!r}: {reason}")
