from __future__ import annotations

import datetime as _dt
import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dthelpers.calendar import TimeZoneNotFoundError

logger = logging.getLogger(__name__)


def resolve_time_zone(zone_id: str) -> ZoneInfo:
    """
    Look up an IANA zone identifier such as ``"Europe/Amsterdam"``.

    Raises TimeZoneNotFoundError when the database has no such zone, including
    keys ``zoneinfo`` rejects as malformed.
    """
    try:
        return ZoneInfo(zone_id)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        logger.debug("Time zone lookup failed for %r: %s", zone_id, exc)
        raise TimeZoneNotFoundError(zone_id) from exc


def convert_to_time_zone(instant: _dt.datetime, zone_id: str) -> _dt.datetime:
    """
    The same absolute instant as wall-clock time in ``zone_id``.

    Naive values are read as host-local time.
    """
    return instant.astimezone(resolve_time_zone(zone_id))
