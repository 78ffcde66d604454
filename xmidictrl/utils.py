"""Small string, time and filesystem helpers."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xmidictrl.text_logger import TextLogger

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def ltrim(text: str) -> str:
    """Remove leading whitespace."""
    return text.lstrip()


def rtrim(text: str) -> str:
    """Remove trailing whitespace."""
    return text.rstrip()


def trim(text: str) -> str:
    """Remove leading and trailing whitespace."""
    return ltrim(rtrim(text))


def time_to_string(when: datetime) -> str:
    """Format a point in time as local 'YYYY-MM-DD HH:MM:SS'."""
    if when.tzinfo is not None:
        when = when.astimezone()
    return when.strftime(_TIME_FORMAT)


def create_directory(log: TextLogger, path: str | os.PathLike[str]) -> None:
    """Create a directory if it does not exist, logging what happens.

    Raises OSError when the directory cannot be created.
    """
    path = Path(path)
    if path.exists():
        return

    log.info(f"Directory '{path}' not found")
    try:
        path.mkdir()
    except OSError:
        log.error(f"Could not create directory '{path}'")
        raise
    log.info(f"Directory '{path}' created")