"""Retention of rotated backups.

Backups are discovered by parsing directory entry names against the
naming template of the active file; anything that does not match is left
alone.  Purging is best-effort: listing and deletion failures are logged
and never raised, so retention can never break the write path.

Example
-------
>>> from pathlib import Path
>>> from datetime import datetime
>>> removed = purge_expired(Path("/var/log/app"), "app.log", 30, datetime.now())
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta
from pathlib import Path

from rotalog.naming import RotatedLogEntry, backup_pattern, is_day_before, parse_backup_name

logger = logging.getLogger(__name__)


def scan_rotated(directory: Path, filename: str) -> list[RotatedLogEntry]:
    """Return every backup of ``filename`` found in ``directory``, oldest first.

    Raises
    ------
    OSError:
        When the directory cannot be listed.
    """
    pattern = backup_pattern(filename)
    entries: list[RotatedLogEntry] = []
    for path in directory.iterdir():
        timestamp = parse_backup_name(filename, path.name, pattern)
        if timestamp is not None:
            entries.append(RotatedLogEntry(path=path, timestamp=timestamp))
    entries.sort(key=lambda entry: entry.timestamp)
    return entries


def expiry_threshold(now: datetime, max_age_days: int) -> datetime:
    """Backups dated on a calendar day before this instant are expired."""
    return now - timedelta(days=max_age_days)


def is_expired(entry: RotatedLogEntry, now: datetime, max_age_days: int) -> bool:
    if max_age_days <= 0:
        return False
    return is_day_before(entry.timestamp, expiry_threshold(now, max_age_days))


def purge_expired(
    directory: Path,
    filename: str,
    max_age_days: int,
    now: datetime,
) -> list[Path]:
    """Delete backups older than the retention window.

    Parameters
    ----------
    directory:
        Log directory to scan.
    filename:
        Active log file name the backups derive from.
    max_age_days:
        Retention window.  ``0`` keeps everything.
    now:
        Reference instant for the window.

    Returns
    -------
    list[Path]
        Paths that were actually removed.
    """
    if max_age_days <= 0:
        return []

    try:
        entries = scan_rotated(directory, filename)
    except OSError as exc:
        logger.warning("Cannot list log directory %s: %s", directory, exc)
        return []

    removed: list[Path] = []
    for entry in entries:
        if not is_expired(entry, now, max_age_days):
            continue
        try:
            entry.path.unlink()
        except OSError as exc:
            logger.warning("Cannot remove expired log %s: %s", entry.path, exc)
            continue
        removed.append(entry.path)
        logger.info("Purged expired log: %s", entry.path)
    return removed
