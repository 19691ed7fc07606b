# src/dthelpers/epoch/__init__.py
"""
dthelpers.epoch
~~~~~~~~~~~~~~~

Conversion between ``datetime`` values and Unix timestamps (signed whole
seconds since 1970-01-01T00:00:00 UTC).

Basic usage::

    import datetime as dt
    from dthelpers.epoch import from_unix_timestamp, to_unix_timestamp

    to_unix_timestamp(dt.datetime(2024, 1, 1, tzinfo=dt.timezone.utc))   # → 1704067200
    from_unix_timestamp(-86400)   # → 1969-12-31 00:00:00+00:00

Public API
----------
EPOCH                 1970-01-01T00:00:00 UTC.
to_unix_timestamp     datetime → int.
from_unix_timestamp   int → aware UTC datetime.
"""

from __future__ import annotations

from dthelpers.epoch.epoch import EPOCH, from_unix_timestamp, to_unix_timestamp

__all__ = [
    "EPOCH",
    "from_unix_timestamp",
    "to_unix_timestamp",
]
