# src/dthelpers/clock/__init__.py
"""
dthelpers.clock
~~~~~~~~~~~~~~~

Injectable "now"/"today" sources.  Operations that default to the current
date take a ``clock`` keyword; tests pass a FixedClock to stay deterministic.

Basic usage::

    import datetime as dt
    from dthelpers.clock import FixedClock
    from dthelpers.calendar import days_until

    clock = FixedClock(dt.date(2024, 1, 1))
    days_until(dt.date(2024, 1, 31), clock=clock)   # → 30

Public API
----------
Clock         Protocol with ``now()`` and ``today()``.
SystemClock   Host wall clock.
FixedClock    Clock frozen at one instant.
SYSTEM_CLOCK  Default SystemClock instance.
"""

from __future__ import annotations

from dthelpers.clock.clock import SYSTEM_CLOCK, Clock, FixedClock, SystemClock

__all__ = [
    "Clock",
    "FixedClock",
    "SYSTEM_CLOCK",
    "SystemClock",
]
