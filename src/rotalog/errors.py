"""Exception types raised by the rotating writer.

Every error carries the filesystem path involved and is raised from the
underlying :class:`OSError`, so ``exc.__cause__`` holds the original
failure.  Cleanup of expired backups never raises; its failures are only
logged.
"""
from __future__ import annotations

from pathlib import Path


class RotalogError(Exception):
    """Base class for all writer failures.

    Attributes
    ----------
    path:
        The file or directory the failed operation targeted.
    """

    def __init__(self, message: str, path: Path) -> None:
        self.path = path
        super().__init__(f"{message}: {path}")


class LogDirectoryError(RotalogError):
    """The log directory could not be created."""


class LogOpenError(RotalogError):
    """The active log file could not be inspected or opened."""


class LogWriteError(RotalogError):
    """Appending to the active log file failed.

    The open handle is kept, so retrying the write reuses it.
    """


class BackupError(RotalogError):
    """Renaming the active file to its timestamped backup failed.

    The writer is left without an open handle; the next write reopens the
    un-rotated file and retries the rotation.
    """
