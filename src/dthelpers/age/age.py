from __future__ import annotations

import datetime as _dt
from typing import NamedTuple, Optional

from dthelpers.calendar import InvalidArgumentError, days_in_month, is_leap_year
from dthelpers.calendar.calendar import Instant, _as_date
from dthelpers.clock import SYSTEM_CLOCK, Clock


class AgeResult(NamedTuple):
    years: int
    months: int
    days: int


def _resolve(
    birth: Instant, reference: Optional[Instant], clock: Clock
) -> tuple[_dt.date, _dt.date]:
    born = _as_date(birth)
    ref = clock.today() if reference is None else _as_date(reference)
    if born > ref:
        raise InvalidArgumentError(
            f"Birth date {born.isoformat()} is after the reference date "
            f"{ref.isoformat()}."
        )
    return born, ref


def calculate_age(
    birth: Instant,
    reference: Optional[Instant] = None,
    *,
    clock: Clock = SYSTEM_CLOCK,
) -> int:
    """
    Age in completed years at ``reference`` (default: ``clock.today()``).

    Both dates are compared at day granularity.  A Feb 29 birthday falls on
    Feb 28 in non-leap reference years.

    Raises InvalidArgumentError when ``birth`` is after ``reference``.
    """
    born, ref = _resolve(birth, reference, clock)

    anniversary = (born.month, born.day)
    if anniversary == (2, 29) and not is_leap_year(ref):
        anniversary = (2, 28)

    age = ref.year - born.year
    if (ref.month, ref.day) < anniversary:
        age -= 1
    return age


def calculate_age_detailed(
    birth: Instant,
    reference: Optional[Instant] = None,
    *,
    clock: Clock = SYSTEM_CLOCK,
) -> AgeResult:
    """
    Age as (years, months, days) at ``reference`` (default: ``clock.today()``).

    Field subtraction with borrowing: a negative day count borrows the length
    of the month before the reference month, a negative month count borrows
    twelve months.  When the birth day is past the end of that previous month
    the days are counted from its last day instead, so ``days`` stays within
    ``[0, days in previous month]``.  Feb 29 births use Feb 28 in non-leap
    reference years; ``years`` always equals ``calculate_age``.

    Raises InvalidArgumentError when ``birth`` is after ``reference``.
    """
    born, ref = _resolve(birth, reference, clock)
    born_day = born.day
    if (born.month, born_day) == (2, 29) and not is_leap_year(ref):
        born_day = 28

    years = ref.year - born.year
    months = ref.month - born.month
    days = ref.day - born_day

    if days < 0:
        months -= 1
        prev_len = days_in_month(ref.replace(day=1) - _dt.timedelta(days=1))
        days += prev_len
        if days < 0:
            # Birth day does not exist in the previous month; count from its last day.
            days = ref.day + prev_len - min(born_day, prev_len)

    if months < 0:
        years -= 1
        months += 12

    return AgeResult(years, months, days)
