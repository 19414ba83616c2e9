"""Clock abstraction so "today" can be frozen in tests."""

import datetime as dt
from typing import Protocol


class Clock(Protocol):
    """Source of the current calendar day and timestamp."""

    def today(self) -> dt.date: ...

    def now(self) -> dt.datetime: ...


class SystemClock:
    """Clock backed by the host's local calendar and UTC wall time."""

    def today(self) -> dt.date:
        # Local calendar day boundary, not UTC
        return dt.date.today()

    def now(self) -> dt.datetime:
        return dt.datetime.now(dt.UTC)
