"""Time-gated rules: opening hours and calendar-day discounts.

Both rules take the moment to evaluate as an argument; nothing in this
module reads the system clock. Use `storefront.service_layer.services` to
evaluate them against an injected `Clock`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time

from .errors import InvalidRuleParametersError
from .validation import is_number


@dataclass(frozen=True)
class BusinessHours:
    """Daily window during which the shop is online.

    The shop is online strictly after `opens` and strictly before `closes`.
    Windows that wrap past midnight are not supported.
    """

    opens: time = time(8, 0)
    closes: time = time(20, 0)

    def __post_init__(self) -> None:
        if self.opens >= self.closes:
            raise InvalidRuleParametersError(
                "business hours",
                f"opens at {self.opens:%H:%M} but closes at {self.closes:%H:%M}",
            )

    def contains(self, moment: time) -> bool:
        """Return True if *moment* falls inside the window."""
        return self.opens < moment < self.closes


@dataclass(frozen=True)
class CalendarDiscount:
    """A discount granted on one calendar day every year."""

    month: int = 12
    day: int = 25
    rate: float = 0.2

    def __post_init__(self) -> None:
        # 2000 is a leap year, so Feb 29 is accepted
        try:
            date(2000, self.month, self.day)
        except (TypeError, ValueError) as e:
            raise InvalidRuleParametersError(
                "calendar discount", f"no such day {self.month}/{self.day}"
            ) from e
        if not is_number(self.rate) or not 0 < self.rate < 1:
            raise InvalidRuleParametersError(
                "calendar discount", f"rate {self.rate!r} is not between 0 and 1"
            )

    def applies_on(self, day: date) -> bool:
        """Return True if *day* is the discounted calendar day."""
        return (day.month, day.day) == (self.month, self.day)


DEFAULT_HOURS = BusinessHours()
CHRISTMAS = CalendarDiscount()


def is_online(
    current_time: datetime | time, hours: BusinessHours = DEFAULT_HOURS
) -> bool:
    """Return True if the shop is online at *current_time*.

    Args:
        current_time: A datetime or a time. Only its wall-clock reading is
            used; any time zone is ignored.
        hours: The opening window.
    """
    if isinstance(current_time, datetime):
        current_time = current_time.time()
    return hours.contains(current_time.replace(tzinfo=None))


def get_discount(current_date: date, rule: CalendarDiscount = CHRISTMAS) -> float:
    """Return the discount rate that applies on *current_date*.

    Any moment of the discounted day qualifies, from 00:00 to 23:59.
    Accepts a `date` or a `datetime`.

    Returns:
        float: ``rule.rate`` on the discounted day, ``0`` on every other day.
    """
    if isinstance(current_date, datetime):
        current_date = current_date.date()
    return rule.rate if rule.applies_on(current_date) else 0
