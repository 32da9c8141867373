"""Line classification and lazy block scanners.

Both grammar levels split text the same way: skip to the first line that
opens a block, then capture everything up to the next start line. Only the
start predicate differs between days and sections.
"""

import re
from abc import abstractmethod
from collections.abc import Iterator

TASK_MARKER = "-"
DATE_OPEN = "["

LINE_BREAK_RE = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    """Split on LF or CRLF only; form feeds, NEL and U+2028 stay inside the line."""
    return LINE_BREAK_RE.split(text)


def _first_char(line: str) -> str:
    stripped = line.strip()
    return stripped[0] if stripped else ""


def is_blank(line: str) -> bool:
    return not line.strip()


def is_task_line(line: str) -> bool:
    return _first_char(line) == TASK_MARKER


def is_day_start(line: str) -> bool:
    return _first_char(line) == DATE_OPEN


def is_section_start(line: str) -> bool:
    """A non-blank line that is neither a task nor a date line names a section."""
    return _first_char(line) not in ("", TASK_MARKER, DATE_OPEN)


class BlockScanner(Iterator[str]):
    """Forward-only iterator over raw text blocks, one per start line.

    Lines before the first opening line are skipped. Each block is the start
    line plus every following line up to, not including, the next start.
    """

    def __init__(self, text: str) -> None:
        self._lines = split_lines(text)
        self._index = 0

    @abstractmethod
    def is_start(self, line: str) -> bool:
        """Whether `line` starts a new block."""

    def opens_first_block(self, line: str) -> bool:
        """Whether `line` may open the first block; later blocks need a start line."""
        return self.is_start(line)

    def __iter__(self) -> "BlockScanner":
        return self

    def __next__(self) -> str:
        lines = self._lines
        first = self._index == 0
        while self._index < len(lines):
            line = lines[self._index]
            if self.is_start(line) or (first and self.opens_first_block(line)):
                break
            self._index += 1
        if self._index >= len(lines):
            raise StopIteration

        block = [lines[self._index]]
        self._index += 1
        while self._index < len(lines) and not self.is_start(lines[self._index]):
            block.append(lines[self._index])
            self._index += 1
        return "\n".join(block)


class DayScanner(BlockScanner):
    """Splits a whole file into day blocks, each opening with its date line."""

    def is_start(self, line: str) -> bool:
        return is_day_start(line)


class SectionScanner(BlockScanner):
    """Splits the body of a day (date line excluded) into section blocks.

    Tasks that come before any section name form a leading block, which the
    section codec reads as the anonymous section.
    """

    def is_start(self, line: str) -> bool:
        return is_section_start(line)

    def opens_first_block(self, line: str) -> bool:
        return is_section_start(line) or is_task_line(line)
