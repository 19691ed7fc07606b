# src/dthelpers/calendar/__init__.py
"""
dthelpers.calendar
~~~~~~~~~~~~~~~~~~

Calendar arithmetic on ``datetime`` values: weekend tests, start/end of
day/week/month, weekday search, ISO week counts and other calendar facts.
Every function is pure and returns a new value.

Basic usage::

    import datetime as dt
    from dthelpers.calendar import Weekday, end_of_month, next_weekday

    end_of_month(dt.datetime(2024, 2, 10))          # → 2024-02-29 23:59:59.999999
    next_weekday(dt.date(2024, 5, 6), Weekday.MONDAY)  # → 2024-05-13

NumPy ``datetime64`` arrays are accepted by the weekend predicates::

    import numpy as np
    is_weekend(np.array(["2023-10-06", "2023-10-07"], dtype="datetime64[D]"))
    # → array([False,  True])

Public API
----------
Weekday                 Monday..Sunday, numbered like ``date.weekday()``.
DateTimeHelpersError    Base exception for all dthelpers errors.
InvalidArgumentError    Raised for arguments outside an operation's domain.
TimeZoneNotFoundError   Raised for unknown timezone identifiers.
"""

from __future__ import annotations

from dthelpers.calendar._exceptions import (
    DateTimeHelpersError,
    InvalidArgumentError,
    TimeZoneNotFoundError,
)
from dthelpers.calendar.calendar import (
    Weekday,
    days_in_month,
    days_in_year,
    days_until,
    end_of_day,
    end_of_month,
    end_of_week,
    is_between,
    is_leap_year,
    is_same_date,
    is_weekday,
    is_weekend,
    next_weekday,
    previous_weekday,
    start_of_day,
    start_of_month,
    start_of_week,
    total_weeks_between,
    weeks_in_year,
)

__all__ = [
    "DateTimeHelpersError",
    "InvalidArgumentError",
    "TimeZoneNotFoundError",
    "Weekday",
    "days_in_month",
    "days_in_year",
    "days_until",
    "end_of_day",
    "end_of_month",
    "end_of_week",
    "is_between",
    "is_leap_year",
    "is_same_date",
    "is_weekday",
    "is_weekend",
    "next_weekday",
    "previous_weekday",
    "start_of_day",
    "start_of_month",
    "start_of_week",
    "total_weeks_between",
    "weeks_in_year",
]
