from __future__ import annotations

import datetime as _dt
from typing import Optional, Protocol


class Clock(Protocol):
    """Source of the current instant and the current calendar date."""

    def now(self) -> _dt.datetime: ...

    def today(self) -> _dt.date: ...


class SystemClock:
    """Reads the host wall clock, optionally in a fixed zone."""

    def __init__(self, tz: Optional[_dt.tzinfo] = None) -> None:
        self._tz = tz

    def now(self) -> _dt.datetime:
        return _dt.datetime.now(self._tz)

    def today(self) -> _dt.date:
        return self.now().date()

    def __repr__(self) -> str:
        return f"SystemClock(tz={self._tz!r})"


class FixedClock:
    """
    Clock frozen at a given instant.

    A bare ``date`` is taken as midnight of that day.
    """

    def __init__(self, instant: _dt.datetime | _dt.date) -> None:
        if not isinstance(instant, _dt.datetime):
            instant = _dt.datetime(instant.year, instant.month, instant.day)
        self._instant = instant

    def now(self) -> _dt.datetime:
        return self._instant

    def today(self) -> _dt.date:
        return self._instant.date()

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()!r})"


SYSTEM_CLOCK: Clock = SystemClock()
