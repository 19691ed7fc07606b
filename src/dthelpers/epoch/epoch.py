from __future__ import annotations

import datetime as _dt

EPOCH = _dt.datetime(1970, 1, 1, tzinfo=_dt.timezone.utc)

_ONE_SECOND = _dt.timedelta(seconds=1)


def to_unix_timestamp(instant: _dt.datetime) -> int:
    """
    Whole seconds between the Unix epoch and ``instant``.

    Aware values are converted to UTC; naive values are read as host-local
    time, as ``datetime.timestamp`` does.  Microseconds are dropped, so
    instants before 1970 floor towards the earlier second.
    """
    utc = instant.astimezone(_dt.timezone.utc)
    return (utc - EPOCH) // _ONE_SECOND


def from_unix_timestamp(seconds: int) -> _dt.datetime:
    """Aware UTC datetime ``seconds`` after the Unix epoch."""
    return EPOCH + _dt.timedelta(seconds=int(seconds))
