"""Shared test fixtures."""

import datetime
from pathlib import Path

import pytest

TODAY = datetime.date(2024, 3, 7)

SAMPLE = """\
[2024-03-06]
Section 1
- task 1
- task 3
Done

[2024-03-07]
- task A
Done
- task 4
"""


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def todo_file(tmp_path: Path) -> Path:
    path = tmp_path / "todo.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory with no TODOLOG_* overrides, so defaults apply."""
    for key in ("TODOLOG_TODO_FILE", "TODOLOG_DEFAULT_SECTION", "TODOLOG_DEBUG"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
