"""Daily rotating byte-sink writer.

:class:`RotatingWriter` appends bytes to ``<directory>/<filename>``.  When
a write arrives on a later calendar day than the previous one, the active
file is renamed to a timestamped backup and a fresh file is opened before
the write lands.  Backups older than ``max_age_days`` are deleted by a
background thread after each rotation.

Thread-safety is achieved with a threading.Lock held for the whole of
``write``, ``rotate``, ``flush`` and ``close``, so one instance can be
shared by every thread of a process.

Example
-------
>>> from pathlib import Path
>>> with RotatingWriter(Path("/var/log/app"), "app.log", max_age_days=7) as sink:
...     sink.write(b"service started\\n")
16
"""
from __future__ import annotations

import logging
import os
import threading
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

from rotalog.clock import Clock, SystemClock
from rotalog.errors import BackupError, LogDirectoryError, LogOpenError, LogWriteError
from rotalog.naming import RotatedLogEntry, backup_name, is_day_before
from rotalog.retention import purge_expired, scan_rotated

if TYPE_CHECKING:
    from rotalog.config_loader import WriterConfig

logger = logging.getLogger(__name__)

_DIR_MODE = 0o700
_FILE_MODE = 0o600


class RotatingWriter:
    """Append-only log file that rotates once per calendar day.

    Parameters
    ----------
    directory:
        Directory holding the active file and its backups.  Created
        (owner-only permissions) on first use.
    filename:
        Name of the active file.  It should carry an extension so backups
        read ``<stem>-<timestamp><ext>``.
    max_age_days:
        Retention window for backups.  ``0`` keeps them forever.
    clock:
        Time source; defaults to :class:`~rotalog.clock.SystemClock`.
    """

    def __init__(
        self,
        directory: Path,
        filename: str,
        max_age_days: int = 0,
        clock: Clock | None = None,
    ) -> None:
        if max_age_days < 0:
            raise ValueError(f"max_age_days must be >= 0, got {max_age_days}")
        self._directory = Path(directory)
        self._filename = filename
        self._max_age_days = max_age_days
        self._clock: Clock = clock or SystemClock()
        self._file: BinaryIO | None = None
        self._last_write: datetime | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: "WriterConfig", clock: Clock | None = None) -> "RotatingWriter":
        """Build a writer from a validated :class:`WriterConfig`."""
        return cls(
            directory=config.directory,
            filename=config.filename,
            max_age_days=config.max_age_days,
            clock=clock,
        )

    # ------------------------------------------------------------------
    # Byte-sink API
    # ------------------------------------------------------------------

    def write(self, data: bytes | bytearray | memoryview) -> int:
        """Append ``data`` to the active file, rotating first if the day changed.

        Returns
        -------
        int
            Number of bytes written.

        Raises
        ------
        LogDirectoryError:
            The log directory could not be created.
        LogOpenError:
            The active file could not be inspected or opened.
        BackupError:
            A due rotation could not rename the active file.
        LogWriteError:
            The append itself failed; the handle stays open for a retry.
        """
        with self._lock:
            if self._file is None:
                self._open_existing_or_new()

            if is_day_before(self._last_write, self._clock.now()):
                self._rotate()

            try:
                written = self._file.write(data)
                self._file.flush()
            except OSError as exc:
                raise LogWriteError("Cannot write log file", self.active_path) from exc

            self._last_write = self._clock.now()
            return written

    def flush(self) -> None:
        """Push buffered bytes to the operating system."""
        with self._lock:
            if self._file is None:
                return
            try:
                self._file.flush()
            except OSError as exc:
                raise LogWriteError("Cannot flush log file", self.active_path) from exc

    def rotate(self) -> None:
        """Rotate now, whatever the calendar day.

        With no active file on disk the backup step is skipped and a fresh
        empty file is opened.
        """
        with self._lock:
            self._ensure_directory()
            self._rotate()

    def close(self) -> None:
        """Sync and release the active file.  Safe to call repeatedly."""
        with self._lock:
            self._close()

    def __enter__(self) -> "RotatingWriter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def max_age_days(self) -> int:
        return self._max_age_days

    @property
    def active_path(self) -> Path:
        """Canonical path of the active log file."""
        return self._directory / self._filename

    @property
    def closed(self) -> bool:
        """``True`` while no handle is open."""
        with self._lock:
            return self._file is None

    @property
    def last_write(self) -> datetime | None:
        """Time of the last successful write (or of the last open)."""
        with self._lock:
            return self._last_write

    def rotated_files(self) -> list[RotatedLogEntry]:
        """Return the backups currently in the log directory, oldest first."""
        return scan_rotated(self._directory, self._filename)

    # ------------------------------------------------------------------
    # Internal helpers (lock held by caller)
    # ------------------------------------------------------------------

    def _ensure_directory(self) -> None:
        try:
            self._directory.mkdir(mode=_DIR_MODE, parents=True, exist_ok=True)
        except OSError as exc:
            raise LogDirectoryError("Cannot create log directory", self._directory) from exc

    def _open_existing_or_new(self) -> None:
        self._ensure_directory()
        path = self.active_path
        try:
            stat = path.stat()
        except FileNotFoundError:
            self._open_new()
            return
        except OSError as exc:
            raise LogOpenError("Cannot inspect log file", path) from exc

        try:
            fd = os.open(path, os.O_WRONLY | os.O_APPEND)
        except OSError as exc:
            raise LogOpenError("Cannot open log file", path) from exc

        self._file = os.fdopen(fd, "ab")
        self._last_write = self._mtime(stat.st_mtime)
        logger.debug("Reopened log file %s (last written %s)", path, self._last_write)

    def _open_new(self) -> None:
        path = self.active_path
        try:
            fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, _FILE_MODE)
        except OSError as exc:
            raise LogOpenError("Cannot create log file", path) from exc

        self._file = os.fdopen(fd, "wb")
        self._last_write = self._clock.now()
        logger.debug("Opened new log file %s", path)

    def _close(self) -> None:
        if self._file is None:
            return
        fh, self._file = self._file, None
        try:
            fh.flush()
            os.fsync(fh.fileno())
        except OSError as exc:
            raise LogWriteError("Cannot sync log file", self.active_path) from exc
        finally:
            try:
                fh.close()
            except OSError as exc:
                logger.debug("Error closing log file %s: %s", self.active_path, exc)

    def _rotate(self) -> None:
        self._backup()
        if self._max_age_days > 0:
            self._start_cleanup()
        self._open_new()

    def _backup(self) -> None:
        """Rename the active file to its backup name, if there is one."""
        path = self.active_path
        if self._file is not None:
            self._close()
        else:
            try:
                stat = path.stat()
            except FileNotFoundError:
                return
            except OSError as exc:
                raise LogOpenError("Cannot inspect log file", path) from exc
            self._last_write = self._mtime(stat.st_mtime)

        target = self._directory / backup_name(self._filename, self._last_write)
        try:
            path.rename(target)
        except OSError as exc:
            logger.warning("Rotation of %s failed: %s", path, exc)
            raise BackupError("Cannot rename log file to backup", target) from exc

        logger.info("Rotated log %s to %s", path, target)

    def _start_cleanup(self) -> None:
        thread = threading.Thread(
            target=purge_expired,
            args=(self._directory, self._filename, self._max_age_days, self._clock.now()),
            daemon=True,
            name="rotalog-cleanup",
        )
        thread.start()

    def _mtime(self, timestamp: float) -> datetime:
        return datetime.fromtimestamp(timestamp, tz=self._clock.now().tzinfo)
