"""Backup file naming.

A rotated file keeps the stem and extension of the active file with a
``DD-MM-YYYYTHH-MM-SS`` token inserted between them::

    app.log  ->  app-04-05-2021T13-00-00.log

The token records the time of the last write that landed in the file
before it was rotated.

Example
-------
>>> from datetime import datetime
>>> backup_name("app.log", datetime(2021, 5, 4, 13, 0, 0))
'app-04-05-2021T13-00-00.log'
>>> parse_backup_name("app.log", "app-04-05-2021T13-00-00.log")
datetime.datetime(2021, 5, 4, 13, 0)
"""
from __future__ import annotations

import os
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

TIMESTAMP_FORMAT: str = "%d-%m-%YT%H-%M-%S"

_TOKEN_PATTERN: str = r"(\d{2}-\d{2}-\d{4}T\d{2}-\d{2}-\d{2})"


@dataclass(frozen=True)
class RotatedLogEntry:
    """A backup file found in the log directory.

    Attributes
    ----------
    path:
        Full path of the backup file.
    timestamp:
        Time parsed from the file name.
    """

    path: Path
    timestamp: datetime

    @property
    def name(self) -> str:
        return self.path.name


def split_filename(filename: str) -> tuple[str, str]:
    """Split ``filename`` into stem and extension (extension keeps its dot)."""
    return os.path.splitext(filename)


def backup_name(filename: str, timestamp: datetime) -> str:
    """Return the backup file name for ``filename`` rotated at ``timestamp``."""
    stem, ext = split_filename(filename)
    return f"{stem}-{timestamp.strftime(TIMESTAMP_FORMAT)}{ext}"


def backup_pattern(filename: str) -> re.Pattern[str]:
    """Compile the pattern matching every backup name of ``filename``."""
    stem, ext = split_filename(filename)
    return re.compile(re.escape(stem) + "-" + _TOKEN_PATTERN + re.escape(ext))


def parse_backup_name(
    filename: str,
    candidate: str,
    pattern: re.Pattern[str] | None = None,
) -> datetime | None:
    """Extract the rotation timestamp from ``candidate``.

    Parameters
    ----------
    filename:
        The active log file name the backups derive from.
    candidate:
        A directory entry name.
    pattern:
        A pre-compiled :func:`backup_pattern` to reuse across a scan.

    Returns
    -------
    datetime | None
        The embedded timestamp, or ``None`` when ``candidate`` is not a
        backup of ``filename`` (including when the token is not a real date).
    """
    match = (pattern or backup_pattern(filename)).fullmatch(candidate)
    if match is None:
        return None
    try:
        return datetime.strptime(match.group(1), TIMESTAMP_FORMAT)
    except ValueError:
        return None


def is_day_before(earlier: datetime, later: datetime) -> bool:
    """Return ``True`` when ``earlier`` falls on a strictly earlier calendar day.

    Only the year and the day of the year are compared; time of day and
    time zone are ignored.
    """
    if earlier.year != later.year:
        return earlier.year < later.year
    return earlier.timetuple().tm_yday < later.timetuple().tm_yday
