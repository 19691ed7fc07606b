from __future__ import annotations


class DateTimeHelpersError(Exception):
    """Base class for every error raised by dthelpers."""


class InvalidArgumentError(DateTimeHelpersError, ValueError):
    """An argument is outside the domain of the operation."""


class TimeZoneNotFoundError(DateTimeHelpersError, LookupError):
    """The timezone database has no entry for the requested identifier."""

    def __init__(self, zone_id: str) -> None:
        super().__init__(f"Time zone {zone_id!r} was not found.")
        self.zone_id = zone_id
