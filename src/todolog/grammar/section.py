"""Section codec: an optional name line followed by task lines."""

from todolog.errors import MalformedSectionError
from todolog.grammar.scanner import DATE_OPEN, TASK_MARKER, is_blank, is_task_line, split_lines
from todolog.grammar.task import parse_task, serialize_task
from todolog.models import Section, Task


def parse_section(block: str) -> Section:
    """Parse one section block as produced by ``SectionScanner``.

    A block whose first line is already a task is the anonymous section:
    its name is empty and that line is its first task. Blank lines are
    ignored; any other line must be a task.
    """
    lines = [line for line in split_lines(block) if not is_blank(line)]
    if not lines:
        return Section()

    name = ""
    if not is_task_line(lines[0]):
        name = lines[0].strip()
        lines = lines[1:]

    tasks: list[Task] = [parse_task(line) for line in lines]
    return Section(name=name, tasks=tasks)


def serialize_section(section: Section) -> str:
    lines = [section.name] if section.name else []
    lines.extend(serialize_task(task) for task in section.tasks)
    return "\n".join(lines)


def normalize_section_name(name: str) -> str:
    """Trim `name` and check it reads back as a name line.

    The empty name is the anonymous section.
    """
    if "\n" in name:
        raise MalformedSectionError(name, "a section name is a single line")
    name = name.strip()
    if name.startswith(TASK_MARKER):
        raise MalformedSectionError(name, "would be read as a task")
    if name.startswith(DATE_OPEN):
        raise MalformedSectionError(name, "would be read as a date")
    return name
