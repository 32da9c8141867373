"""Todo aggregate: the full log of days, kept consistent with its backing file.

Every operation that depends on the current date takes it as `today`, so
callers decide where it comes from (``todolog.clock.today`` in the CLI, a
fixed date in tests).
"""

from __future__ import annotations

import datetime
import logging
from pathlib import Path

from todolog import storage
from todolog.config import get_settings
from todolog.errors import ClockSkewError, MalformedTaskError
from todolog.grammar import parse_days, parse_task, serialize_days
from todolog.grammar.scanner import TASK_MARKER, is_task_line
from todolog.grammar.section import normalize_section_name
from todolog.models import Day, SaveOutcome, Task

logger = logging.getLogger(__name__)


def _check_clock(days: dict[datetime.date, Day], today: datetime.date) -> None:
    if days:
        last_date = max(days)
        if last_date > today:
            raise ClockSkewError(last_date, today)


class Todo:
    """All days of the log keyed by date, plus the file they live in.

    Two processes saving the same file race: the last save wins.
    """

    def __init__(self, file_path: Path, days: dict[datetime.date, Day] | None = None) -> None:
        self.file_path = Path(file_path)
        self.days: dict[datetime.date, Day] = days if days is not None else {}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Todo):
            return NotImplemented
        return self.days == other.days

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Todo(file_path={str(self.file_path)!r}, days={len(self.days)})"

    def __str__(self) -> str:
        return self.serialize()

    # --- Loading ---

    @classmethod
    def new(cls, path: Path | str | None = None, *, today: datetime.date) -> Todo:
        """Open `path`, creating it empty if missing.

        Without a path the configured default file is created, and it must
        not exist yet.
        """
        if path is None:
            file_path = get_settings().todo_file
            storage.ensure_file(file_path, exclusive=True)
        else:
            file_path = Path(path)
            storage.ensure_file(file_path)
        return cls.load(file_path, today=today)

    @classmethod
    def load(cls, path: Path | str, *, today: datetime.date) -> Todo:
        """Read and parse the file at `path`.

        Raises:
            MalformedDateError, MalformedTaskError: the file does not parse.
            ClockSkewError: the file's latest day is after `today`.
            OSError: the file cannot be read.
        """
        file_path = Path(path)
        todo = cls.parse(storage.read_text(file_path), path=file_path, today=today)
        logger.info("Loaded %d days from %s", len(todo.days), file_path)
        return todo

    @classmethod
    def parse(cls, text: str, *, path: Path | str, today: datetime.date) -> Todo:
        days = parse_days(text)
        _check_clock(days, today)
        return cls(Path(path), days)

    # --- Days ---

    def last_day(self) -> Day | None:
        if not self.days:
            return None
        return self.days[max(self.days)]

    def advance(self, *, today: datetime.date) -> Day:
        """Make sure a day for `today` exists and return it.

        The new day copies the latest day's sections with Done emptied. The
        latest day itself is left as it was. Does nothing if today exists.
        """
        existing = self.days.get(today)
        if existing is not None:
            return existing

        last = self.last_day()
        if last is None:
            new_day = Day(date=today)
        else:
            new_day = last.model_copy(update={"date": today}, deep=True)
        new_day.clear_done()
        self.days[today] = new_day
        logger.info("Started new day %s", today.isoformat())
        return new_day

    def today_day(self, today: datetime.date) -> Day:
        """Return the day for `today`, advancing to it first if needed."""
        return self.advance(today=today)

    def add(self, text: str, section_name: str, *, today: datetime.date) -> Task:
        """Append a task to `section_name` in today's day.

        `text` may carry the leading ``-`` or not. `section_name` is trimmed;
        a missing section is appended after the existing ones, except the
        anonymous section `""`, which always comes first. On invalid text or
        section name nothing changes.
        """
        if not text.strip():
            raise MalformedTaskError(text, "task text is empty")
        line = text if is_task_line(text) else f"{TASK_MARKER} {text}"
        task = parse_task(line)
        name = normalize_section_name(section_name)

        day = self.today_day(today)
        day.section(name).tasks.append(task)
        logger.debug("Added %r to section %r on %s", task.text, name, today)
        return task

    # --- Saving ---

    def serialize(self) -> str:
        return serialize_days(self.days)

    def save(self, *, today: datetime.date) -> SaveOutcome:
        """Write the log back to its file unless nothing changed.

        The file is up to date when it already holds exactly these days.
        Otherwise, days found on disk but missing in memory are merged in
        before writing, so a save never drops a day. Days present in both
        keep the in-memory version.

        Raises:
            ClockSkewError: the file, or this log, holds a day after `today`.
        """
        _check_clock(self.days, today)
        if self.file_path.exists():
            on_disk = Todo.load(self.file_path, today=today)
        else:
            on_disk = Todo(self.file_path)

        if on_disk == self:
            logger.info("File already up to date: %s", self.file_path)
            return SaveOutcome.UP_TO_DATE

        for date, day in on_disk.days.items():
            if date not in self.days:
                self.days[date] = day

        storage.write_atomic(self.file_path, self.serialize())
        logger.info("Saved %d days to %s", len(self.days), self.file_path)
        return SaveOutcome.SAVED
