# src/dthelpers/business/__init__.py
"""
dthelpers.business
~~~~~~~~~~~~~~~~~~

Business-day arithmetic.  Business days are Monday to Friday; public holidays
are not taken into account.

Basic usage::

    import datetime as dt
    from dthelpers.business import add_business_days

    add_business_days(dt.date(2023, 10, 6), 3)     # Fri → Wed 2023-10-11

NumPy arrays are accepted everywhere a scalar is::

    import numpy as np
    starts = np.array(["2023-10-06", "2023-10-07"], dtype="datetime64[D]")
    add_business_days(starts, np.array([3, -1]))
    # → array(['2023-10-11', '2023-10-06'], dtype='datetime64[D]')

Public API
----------
add_business_days        Move forward (or back) by business days.
subtract_business_days   add_business_days with the sign flipped.
is_business_day          Monday–Friday predicate.
"""

from __future__ import annotations

import logging

from dthelpers.business.business import (
    add_business_days,
    is_business_day,
    subtract_business_days,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "add_business_days",
    "is_business_day",
    "subtract_business_days",
]
