"""Clocks."""

from datetime import datetime, tzinfo

from storefront.interfaces.clock import Clock

# pylint: disable=too-few-public-methods


class SystemClock(Clock):
    """The real wall clock, in the given time zone (local time when None)."""

    def __init__(self, tz: tzinfo | None = None) -> None:
        self._tz = tz

    def now(self) -> datetime:
        return datetime.now(self._tz)


class FixedClock(Clock):
    """A clock frozen at one instant until moved with `set`."""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def set(self, instant: datetime) -> None:
        """Move the clock to *instant*."""
        self._instant = instant

    def now(self) -> datetime:
        return self._instant
