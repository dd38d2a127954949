"""Time sources for the rotating writer.

The writer never calls :func:`datetime.now` directly; it asks the
:class:`Clock` it was constructed with.  Production code uses
:class:`SystemClock`, tests use :class:`FixedClock` to step across day
boundaries deterministically.

Example
-------
>>> from datetime import datetime
>>> clock = FixedClock(datetime(2021, 5, 3, 23, 58))
>>> clock.advance(minutes=3)
>>> clock.now()
datetime.datetime(2021, 5, 4, 0, 1)
"""
from __future__ import annotations

import threading
from datetime import datetime, timedelta
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Anything that can report the current point in time."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Local wall-clock time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """A manually driven clock.

    Parameters
    ----------
    start:
        The instant reported by :meth:`now` until the clock is moved.
    """

    def __init__(self, start: datetime) -> None:
        self._current = start
        self._lock = threading.Lock()

    def now(self) -> datetime:
        with self._lock:
            return self._current

    def set(self, value: datetime) -> None:
        """Jump to an absolute instant."""
        with self._lock:
            self._current = value

    def advance(self, **delta: float) -> None:
        """Move forward by a :class:`timedelta` built from ``delta``."""
        with self._lock:
            self._current = self._current + timedelta(**delta)
