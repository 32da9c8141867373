"""Task codec: one ``- text`` line."""

from todolog.errors import MalformedTaskError
from todolog.grammar.scanner import TASK_MARKER, is_task_line
from todolog.models import Task


def parse_task(line: str) -> Task:
    """Parse a task line, dropping the marker and the whitespace after it."""
    if "\n" in line:
        raise MalformedTaskError(line, "a task is a single line")
    if not is_task_line(line):
        raise MalformedTaskError(line)
    text = line.lstrip()[len(TASK_MARKER) :]
    return Task(text=text.lstrip(" \t").rstrip())


def serialize_task(task: Task) -> str:
    return f"{TASK_MARKER} {task.text}"
