"""rotalog: daily rotating log file writer with age-based retention.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> from pathlib import Path
>>> import rotalog
>>> rotalog.__version__
'0.1.0'
>>> sink = rotalog.RotatingWriter(Path("/tmp/rotalog-demo"), "app.log", max_age_days=7)
>>> sink.write(b"hello\\n")
6
>>> sink.close()
"""
from __future__ import annotations

__version__: str = "0.1.0"

from rotalog.clock import Clock, FixedClock, SystemClock
from rotalog.config_loader import ConfigLoader, RotalogConfig, WriterConfig
from rotalog.errors import (
    BackupError,
    LogDirectoryError,
    LogOpenError,
    LogWriteError,
    RotalogError,
)
from rotalog.naming import RotatedLogEntry, backup_name, is_day_before, parse_backup_name
from rotalog.retention import purge_expired, scan_rotated
from rotalog.writer import RotatingWriter

__all__ = [
    "__version__",
    "BackupError",
    "Clock",
    "ConfigLoader",
    "FixedClock",
    "LogDirectoryError",
    "LogOpenError",
    "LogWriteError",
    "RotalogConfig",
    "RotalogError",
    "RotatedLogEntry",
    "RotatingWriter",
    "SystemClock",
    "WriterConfig",
    "backup_name",
    "is_day_before",
    "parse_backup_name",
    "purge_expired",
    "scan_rotated",
]
