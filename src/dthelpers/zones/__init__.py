# src/dthelpers/zones/__init__.py
"""
dthelpers.zones
~~~~~~~~~~~~~~~

Timezone conversion backed by ``zoneinfo`` and the IANA database.

Basic usage::

    import datetime as dt
    from dthelpers.zones import convert_to_time_zone

    noon_utc = dt.datetime(2024, 7, 1, 12, tzinfo=dt.timezone.utc)
    convert_to_time_zone(noon_utc, "Europe/Amsterdam")   # → 14:00+02:00

Public API
----------
convert_to_time_zone   Re-express an instant in another zone.
resolve_time_zone      Identifier → ZoneInfo, or TimeZoneNotFoundError.

TimeZoneNotFoundError is defined with the other dthelpers errors and imported
from ``dthelpers.calendar``::

    from dthelpers.calendar import TimeZoneNotFoundError
"""

from __future__ import annotations

import logging

from dthelpers.zones.zones import convert_to_time_zone, resolve_time_zone

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "convert_to_time_zone",
    "resolve_time_zone",
]
