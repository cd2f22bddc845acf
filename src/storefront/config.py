"""Configuration utilities for STOREFRONT.

Rule parameters live in one read-only structure, `RuleSettings`. The
built-in values are in `DEFAULT_SETTINGS`; `load_settings` applies the few
overrides that may come from the environment.

Environment variables
- ``STOREFRONT_BASE_CURRENCY``: currency prices are quoted in (e.g. ``USD``).
- ``STOREFRONT_OPENS`` / ``STOREFRONT_CLOSES``: opening hours as ``HH:MM``.
- ``STOREFRONT_TIMEZONE``: IANA zone name used by the system clock.
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import time
from types import MappingProxyType
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from storefront.domain.errors import DomainError
from storefront.domain.rules import (
    DEFAULT_COUPONS,
    DEFAULT_DRIVING_AGES,
    RuleBook,
    UserInputBounds,
)
from storefront.domain.schedules import BusinessHours, CalendarDiscount
from storefront.domain.validation import UsernamePolicy
from storefront.domain.value_objects import Coupon
from storefront.interfaces.shipping import ShippingQuote

ENV_BASE_CURRENCY = "STOREFRONT_BASE_CURRENCY"  # pragma: no mutate
ENV_OPENS = "STOREFRONT_OPENS"  # pragma: no mutate
ENV_CLOSES = "STOREFRONT_CLOSES"  # pragma: no mutate
ENV_TIMEZONE = "STOREFRONT_TIMEZONE"  # pragma: no mutate

CURRENCY_PATTERN = re.compile(r"^[A-Za-z]{3}$")
CLOCK_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")

DEFAULT_EXCHANGE_RATES: Mapping[tuple[str, str], float] = MappingProxyType(
    {
        ("USD", "AUD"): 1.5,
        ("USD", "EUR"): 0.92,
        ("USD", "GBP"): 0.79,
        ("USD", "NGN"): 1550.0,
    }
)

DEFAULT_SHIPPING_QUOTES: Mapping[str, ShippingQuote] = MappingProxyType(
    {
        "lagos": ShippingQuote(cost=14, estimated_days=3),
        "london": ShippingQuote(cost=9.5, estimated_days=2),
        "new york": ShippingQuote(cost=5, estimated_days=1),
    }
)


class InvalidSettingError(Exception):
    """Raised when an environment override cannot be parsed."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value for {name} ({value!r}): {reason}")
        self.name = name
        self.value = value


@dataclass(frozen=True)
class RuleSettings:  # pylint: disable=too-many-instance-attributes
    """Every tunable parameter of the shop's rules and collaborators."""

    coupons: tuple[Coupon, ...] = DEFAULT_COUPONS
    driving_ages: Mapping[str, int] = field(
        default_factory=lambda: DEFAULT_DRIVING_AGES
    )
    user_input: UserInputBounds = field(default_factory=UserInputBounds)
    username_policy: UsernamePolicy = field(default_factory=UsernamePolicy)
    business_hours: BusinessHours = field(default_factory=BusinessHours)
    calendar_discount: CalendarDiscount = field(default_factory=CalendarDiscount)
    base_currency: str = "USD"
    timezone: str | None = None
    exchange_rates: Mapping[tuple[str, str], float] = field(
        default_factory=lambda: DEFAULT_EXCHANGE_RATES
    )
    shipping_quotes: Mapping[str, ShippingQuote] = field(
        default_factory=lambda: DEFAULT_SHIPPING_QUOTES
    )

    def rule_book(self) -> RuleBook:
        """Build the `RuleBook` for these settings."""
        return RuleBook(
            coupons=self.coupons,
            driving_ages=self.driving_ages,
            user_input=self.user_input,
        )

    def tzinfo(self) -> ZoneInfo | None:
        """Return the configured zone, or None for local time."""
        return ZoneInfo(self.timezone) if self.timezone else None


DEFAULT_SETTINGS = RuleSettings()


def _parse_clock_time(name: str, value: str) -> time:
    if not (match := CLOCK_TIME_PATTERN.match(value.strip())):
        raise InvalidSettingError(name, value, "expected HH:MM")
    hour, minute = (int(part) for part in match.groups())
    try:
        return time(hour, minute)
    except ValueError as e:
        raise InvalidSettingError(name, value, str(e)) from e


def load_settings(
    environ: Mapping[str, str] | None = None,
    base: RuleSettings = DEFAULT_SETTINGS,
) -> RuleSettings:
    """Apply environment overrides on top of *base*.

    Args:
        environ: Mapping to read overrides from. Defaults to `os.environ`.
        base: Settings used for anything not overridden.

    Returns:
        The resulting settings. Unset or empty variables keep the base value.

    Raises:
        InvalidSettingError: If a variable is set to a malformed value, or the
            resulting opening hours are inconsistent.
    """
    env = os.environ if environ is None else environ
    settings = base

    if currency := env.get(ENV_BASE_CURRENCY, "").strip():
        if not CURRENCY_PATTERN.match(currency):
            raise InvalidSettingError(
                ENV_BASE_CURRENCY, currency, "expected a 3-letter currency code"
            )
        settings = replace(settings, base_currency=currency.upper())

    opens_raw = env.get(ENV_OPENS, "").strip()
    closes_raw = env.get(ENV_CLOSES, "").strip()
    if opens_raw or closes_raw:
        hours = settings.business_hours
        opens = _parse_clock_time(ENV_OPENS, opens_raw) if opens_raw else hours.opens
        closes = (
            _parse_clock_time(ENV_CLOSES, closes_raw) if closes_raw else hours.closes
        )
        try:
            settings = replace(
                settings, business_hours=BusinessHours(opens=opens, closes=closes)
            )
        except DomainError as e:
            raise InvalidSettingError(
                ENV_OPENS, f"{opens_raw or opens}-{closes_raw or closes}", str(e)
            ) from e

    if zone := env.get(ENV_TIMEZONE, "").strip():
        try:
            ZoneInfo(zone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise InvalidSettingError(ENV_TIMEZONE, zone, "unknown time zone") from e
        settings = replace(settings, timezone=zone)

    return settings
