"""Text grammar for the todo log: task, section and day codecs."""

from todolog.grammar.day import parse_day, parse_days, serialize_day, serialize_days
from todolog.grammar.scanner import DayScanner, SectionScanner
from todolog.grammar.section import parse_section, serialize_section
from todolog.grammar.task import parse_task, serialize_task

__all__ = [
    "DayScanner",
    "SectionScanner",
    "parse_day",
    "parse_days",
    "parse_section",
    "parse_task",
    "serialize_day",
    "serialize_days",
    "serialize_section",
    "serialize_task",
]
