"""Pydantic models for the todo log: days of named sections of tasks."""

import datetime
from enum import StrEnum

from pydantic import BaseModel, Field

DONE_SECTION = "Done"


class SaveOutcome(StrEnum):
    """Result of saving an aggregate to its backing file."""

    SAVED = "saved"
    UP_TO_DATE = "up_to_date"


class Task(BaseModel):
    """A single task line, marker stripped."""

    text: str


class Section(BaseModel):
    """A named group of tasks within a day.

    An empty name marks the anonymous section a day may open with.
    """

    name: str = ""
    tasks: list[Task] = Field(default_factory=list)


class Day(BaseModel):
    """One calendar date's worth of sections, in display order."""

    date: datetime.date
    sections: list[Section] = Field(default_factory=list)

    def find_section(self, name: str) -> Section | None:
        """Return the first section called `name`.

        A later section with the same name is shadowed, never merged.
        """
        for section in self.sections:
            if section.name == name:
                return section
        return None

    def section(self, name: str) -> Section:
        """Return the first section called `name`, appending a new one if missing.

        A missing anonymous section goes first instead, since only the
        first section of a day can do without a name line.
        """
        found = self.find_section(name)
        if found is None:
            found = Section(name=name)
            if name:
                self.sections.append(found)
            else:
                self.sections.insert(0, found)
        return found

    def clear_done(self) -> None:
        """Empty the Done section, creating it at the end if absent."""
        self.section(DONE_SECTION).tasks = []
