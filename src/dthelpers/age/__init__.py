# src/dthelpers/age/__init__.py
"""
dthelpers.age
~~~~~~~~~~~~~

Age from a birth date, either in whole years or as (years, months, days).

Basic usage::

    import datetime as dt
    from dthelpers.age import calculate_age, calculate_age_detailed

    calculate_age(dt.date(1990, 5, 20), dt.date(2024, 5, 19))            # → 33
    calculate_age_detailed(dt.date(1990, 1, 31), dt.date(2024, 3, 1))    # → AgeResult(34, 1, 1)

Without a reference date the clock's ``today()`` is used::

    from dthelpers.clock import FixedClock
    calculate_age(dt.date(1990, 5, 20), clock=FixedClock(dt.date(2024, 5, 20)))   # → 34

Public API
----------
AgeResult               NamedTuple (years, months, days).
calculate_age           Completed years.
calculate_age_detailed  Years, months and days.

Future birth dates raise ``dthelpers.calendar.InvalidArgumentError``.
"""

from __future__ import annotations

from dthelpers.age.age import AgeResult, calculate_age, calculate_age_detailed

__all__ = [
    "AgeResult",
    "calculate_age",
    "calculate_age_detailed",
]
