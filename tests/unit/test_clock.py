"""Tests for the clock implementations."""
from __future__ import annotations

from datetime import datetime

from rotalog.clock import Clock, FixedClock, SystemClock


class TestSystemClock:
    def test_is_a_clock(self) -> None:
        assert isinstance(SystemClock(), Clock)

    def test_now_is_current(self) -> None:
        before = datetime.now()
        value = SystemClock().now()
        assert before <= value <= datetime.now()


class TestFixedClock:
    def test_is_a_clock(self) -> None:
        assert isinstance(FixedClock(datetime(2021, 1, 1)), Clock)

    def test_now_is_frozen(self) -> None:
        clock = FixedClock(datetime(2021, 5, 3, 23, 58))
        assert clock.now() == clock.now() == datetime(2021, 5, 3, 23, 58)

    def test_set(self) -> None:
        clock = FixedClock(datetime(2021, 5, 3))
        clock.set(datetime(2022, 1, 1, 8, 0))
        assert clock.now() == datetime(2022, 1, 1, 8, 0)

    def test_advance_crosses_midnight(self) -> None:
        clock = FixedClock(datetime(2021, 5, 3, 23, 58))
        clock.advance(minutes=3)
        assert clock.now() == datetime(2021, 5, 4, 0, 1)

    def test_advance_days(self) -> None:
        clock = FixedClock(datetime(2021, 6, 30, 16, 0))
        clock.advance(days=4)
        assert clock.now() == datetime(2021, 7, 4, 16, 0)
