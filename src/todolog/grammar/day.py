"""Day codec and the file-level day list built on it."""

import datetime
import logging
import re

from todolog.errors import MalformedDateError
from todolog.grammar.scanner import DayScanner, SectionScanner, split_lines
from todolog.grammar.section import parse_section, serialize_section
from todolog.models import Day

logger = logging.getLogger(__name__)

DATE_LINE_RE = re.compile(r"^\[(\d{4}-\d{2}-\d{2})\]$")


def parse_date_line(line: str) -> datetime.date:
    """Parse ``[YYYY-MM-DD]``; anything else, including impossible dates, is rejected."""
    match = DATE_LINE_RE.match(line.strip())
    if not match:
        raise MalformedDateError(line)
    try:
        return datetime.date.fromisoformat(match.group(1))
    except ValueError as e:
        raise MalformedDateError(line) from e


def format_date_line(date: datetime.date) -> str:
    return f"[{date.isoformat()}]"


def parse_day(block: str) -> Day:
    """Parse one day block: the date line, then its sections."""
    lines = split_lines(block.strip())
    if not lines:
        raise MalformedDateError(block)
    date = parse_date_line(lines[0])
    body = "\n".join(lines[1:])
    sections = [parse_section(section_block) for section_block in SectionScanner(body)]
    return Day(date=date, sections=sections)


def serialize_day(day: Day) -> str:
    parts = [serialize_section(section) for section in day.sections]
    body = "\n\n".join(part for part in parts if part)
    if not body:
        return format_date_line(day.date)
    return f"{format_date_line(day.date)}\n{body}"


def parse_days(text: str) -> dict[datetime.date, Day]:
    """Parse a whole file into days keyed by date.

    A date that appears twice keeps the later block. Any malformed block
    fails the whole parse.
    """
    days: dict[datetime.date, Day] = {}
    for block in DayScanner(text):
        day = parse_day(block)
        if day.date in days:
            logger.warning("Duplicate day %s in file, keeping the later one", day.date)
        days[day.date] = day
    logger.debug("Parsed %d days", len(days))
    return days


def serialize_days(days: dict[datetime.date, Day]) -> str:
    """Serialize days newest first, blank-line separated, newline terminated."""
    if not days:
        return ""
    ordered = sorted(days.values(), key=lambda d: d.date, reverse=True)
    return "\n\n".join(serialize_day(day) for day in ordered) + "\n"
