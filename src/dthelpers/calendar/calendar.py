import calendar as _calendar
import datetime as _dt
from enum import IntEnum
from typing import Union

import numpy as np
from dateutil.relativedelta import relativedelta

from dthelpers.clock import SYSTEM_CLOCK, Clock

Instant = Union[_dt.datetime, _dt.date]
ArrayLike = Union[Instant, "np.ndarray"]

# Mon–Fri, numpy weekmask order.
_WEEKMASK: str = "1111100"

_ONE_TICK = _dt.timedelta(microseconds=1)


class Weekday(IntEnum):
    """Days of the week, numbered like ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


# ── coercion helpers ─────────────────────────────────────────────────────

def _as_date(value: Instant) -> _dt.date:
    if isinstance(value, _dt.datetime):
        return value.date()
    return value


def _midnight(value: Instant) -> _dt.datetime:
    if isinstance(value, _dt.datetime):
        return value.replace(hour=0, minute=0, second=0, microsecond=0)
    return _dt.datetime.combine(value, _dt.time.min)


def _wall_clock(value):
    if isinstance(value, _dt.datetime) and value.tzinfo is not None:
        return value.replace(tzinfo=None)
    return value


def _as_datetime64(values) -> np.ndarray:
    # Aware datetimes keep their wall-clock fields; numpy would shift them to UTC.
    arr = np.asarray(_wall_clock(values))
    if arr.dtype.kind == "O":
        arr = np.array(
            [_wall_clock(v) for v in arr.ravel()], dtype=object
        ).reshape(arr.shape)
    if arr.dtype.kind != "M":
        arr = arr.astype("datetime64[us]")
    return arr


# ── weekend / weekday predicates ─────────────────────────────────────────

def is_weekend(instant: ArrayLike):
    """
    True on Saturday and Sunday.

    ``datetime64`` arrays (or anything ``np.asarray`` turns into one) are
    evaluated element-wise and return a boolean array.
    """
    if isinstance(instant, _dt.date):
        return instant.weekday() >= Weekday.SATURDAY
    days = _as_datetime64(instant).astype("datetime64[D]")
    result = ~np.is_busday(days, weekmask=_WEEKMASK)
    return bool(result) if np.ndim(result) == 0 else result


def is_weekday(instant: ArrayLike):
    result = is_weekend(instant)
    if isinstance(result, np.ndarray):
        return ~result
    return not result


# ── period boundaries ────────────────────────────────────────────────────

def start_of_day(instant: Instant) -> _dt.datetime:
    return _midnight(instant)


def end_of_day(instant: Instant) -> _dt.datetime:
    """Last representable microsecond of the instant's calendar day."""
    tzinfo = instant.tzinfo if isinstance(instant, _dt.datetime) else None
    return _dt.datetime.combine(_as_date(instant), _dt.time.max, tzinfo=tzinfo)


def start_of_week(instant: Instant) -> _dt.datetime:
    """Monday 00:00 of the ISO week containing ``instant``."""
    diff = (7 + (instant.weekday() - Weekday.MONDAY)) % 7
    return _midnight(instant) - _dt.timedelta(days=diff)


def end_of_week(instant: Instant) -> _dt.datetime:
    return end_of_day(start_of_week(instant) + _dt.timedelta(days=6))


def start_of_month(instant: Instant) -> _dt.datetime:
    return _midnight(instant).replace(day=1)


def end_of_month(instant: Instant) -> _dt.datetime:
    return start_of_month(instant) + relativedelta(months=1) - _ONE_TICK


def total_weeks_between(from_instant: Instant, to_instant: Instant) -> int:
    """Whole weeks from one date to another, floored; time of day is ignored."""
    return (_as_date(to_instant) - _as_date(from_instant)).days // 7


# ── weekday search ───────────────────────────────────────────────────────

def next_weekday(instant: Instant, target: Union[Weekday, int]) -> Instant:
    """
    Next occurrence of ``target`` strictly after ``instant``.

    When ``instant`` already falls on ``target`` the result is one week later.
    Time of day is kept.
    """
    days_to_add = (Weekday(target) - instant.weekday() + 7) % 7 or 7
    return instant + _dt.timedelta(days=days_to_add)


def previous_weekday(instant: Instant, target: Union[Weekday, int]) -> Instant:
    days_to_subtract = (instant.weekday() - Weekday(target) + 7) % 7 or 7
    return instant - _dt.timedelta(days=days_to_subtract)


# ── calendar facts ───────────────────────────────────────────────────────

def days_in_month(instant: Instant) -> int:
    return _calendar.monthrange(instant.year, instant.month)[1]


def is_leap_year(instant: Instant) -> bool:
    return _calendar.isleap(instant.year)


def days_in_year(instant: Instant) -> int:
    return 366 if is_leap_year(instant) else 365


def weeks_in_year(instant: Instant) -> int:
    """
    Number of ISO 8601 weeks in the instant's year (52 or 53).

    A year has 53 weeks when it starts on a Thursday, or when it is a leap
    year starting on a Wednesday.
    """
    jan1 = _dt.date(instant.year, 1, 1).weekday()
    if jan1 == Weekday.THURSDAY or (
        is_leap_year(instant) and jan1 == Weekday.WEDNESDAY
    ):
        return 53
    return 52


def is_same_date(a: Instant, b: Instant) -> bool:
    return _as_date(a) == _as_date(b)


def days_until(target: Instant, *, clock: Clock = SYSTEM_CLOCK) -> int:
    """Days from ``clock.today()`` to ``target``; negative for past dates."""
    return (_as_date(target) - clock.today()).days


# ── ranges ───────────────────────────────────────────────────────────────

def is_between(instant: Instant, start: Instant, end: Instant) -> bool:
    # An inverted range (start > end) contains nothing.
    return start <= instant <= end
