import datetime as _dt
import logging
from typing import Union

import numpy as np

from dthelpers.calendar import Weekday, is_weekday
from dthelpers.calendar.calendar import _WEEKMASK, ArrayLike, _as_datetime64

logger = logging.getLogger(__name__)

IntLike = Union[int, "np.ndarray"]

# Scalar walks longer than this are reported at DEBUG level.
_LOOP_LOG_THRESHOLD: int = 10_000


def is_business_day(instant: ArrayLike):
    """Monday through Friday; public holidays are not considered."""
    return is_weekday(instant)


def add_business_days(instant: ArrayLike, days: IntLike):
    """
    Move ``days`` business days forward (or backward when negative).

    The scalar path steps one calendar day at a time and only counts landings
    on Monday–Friday, so its cost grows with ``abs(days)``; ``days == 0``
    returns ``instant`` unchanged even on a weekend.

    ``datetime64`` arrays and integer arrays broadcast against each other and
    go through ``numpy.busday_offset`` with identical results.  Time of day
    carried by the input is kept on both paths.  Aware datetimes on the array
    path are counted in their own wall-clock time and come back as naive
    ``datetime64`` values.
    """
    if isinstance(instant, _dt.date) and np.ndim(days) == 0:
        return _add_scalar(instant, int(days))
    return _add_array(_as_datetime64(instant), np.asarray(days, dtype=np.int64))


def subtract_business_days(instant: ArrayLike, days: IntLike):
    return add_business_days(instant, np.negative(days))


# ── backends ─────────────────────────────────────────────────────────────

def _add_scalar(instant: _dt.date, days: int) -> _dt.date:
    if days == 0:
        return instant

    remaining = abs(days)
    if remaining > _LOOP_LOG_THRESHOLD:
        logger.debug(
            "Walking %d business days one day at a time; "
            "pass a datetime64 array to use numpy.busday_offset.",
            days,
        )

    step = _dt.timedelta(days=1 if days > 0 else -1)
    while remaining:
        instant = instant + step
        if instant.weekday() < Weekday.SATURDAY:
            remaining -= 1
    return instant


def _add_array(instants: np.ndarray, days: np.ndarray) -> np.ndarray:
    instants, days = np.broadcast_arrays(instants, days)
    dates = instants.astype("datetime64[D]")
    time_of_day = instants - dates

    # A weekend start counts its first landing as the first business day:
    # roll back before moving forward, roll forward before moving back.
    forward = np.busday_offset(dates, days, roll="backward", weekmask=_WEEKMASK)
    backward = np.busday_offset(dates, days, roll="forward", weekmask=_WEEKMASK)
    moved = np.where(days > 0, forward, np.where(days < 0, backward, dates))

    result = moved + time_of_day
    return result[()] if result.ndim == 0 else result
