"""Backing-file access for the todo log."""

import contextlib
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Read the whole file as UTF-8."""
    with open(path, encoding="utf-8") as f:
        return f.read()


def ensure_file(path: Path, *, exclusive: bool = False) -> None:
    """Create `path` empty if it does not exist.

    With `exclusive`, an existing file is an error (``FileExistsError``).
    """
    if path.exists() and not exclusive:
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "x", encoding="utf-8"):
        pass
    logger.info("Created todo file: %s", path)


def write_atomic(path: Path, content: str) -> None:
    """Replace the full contents of `path` using atomic write."""
    directory = path.parent
    directory.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=str(directory), suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.replace(tmp_path, str(path))
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        raise
