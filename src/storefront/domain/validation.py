"""Primitive validators and the validation result type.

The predicates in this module accept *any* value and answer ``False`` rather
than raising when the value has the wrong type. Strings are never coerced to
numbers: ``"10"`` is not a price.

`ValidationResult` is the structured outcome used by composite checks. It is
either `Success` or a `Failure` carrying every reason that failed, in the
order the checks were given.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

from .errors import InvalidRuleParametersError

SUCCESS_MESSAGE = "Validation successful"
FAILURE_PREFIX = "Invalid"

# ============================================================================
#                           Primitive predicates
# ============================================================================


def is_number(value: object) -> bool:
    """Return True if *value* is a real int or float (not bool, not NaN)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # ints of any size are numbers; only floats can be NaN
    return not (isinstance(value, float) and math.isnan(value))


def is_in_range(value: object, minimum: float, maximum: float) -> bool:
    """Return True if *value* is a number within ``[minimum, maximum]``."""
    return is_number(value) and minimum <= value <= maximum  # type: ignore[operator]


def is_length_in_range(value: object, minimum: int, maximum: int) -> bool:
    """Return True if *value* is a string whose length is within ``[minimum, maximum]``."""
    return isinstance(value, str) and minimum <= len(value) <= maximum


def is_price_in_range(price: object, minimum: float, maximum: float) -> bool:
    """Check whether a price lies within an inclusive range.

    Args:
        price: The candidate price.
        minimum: Lowest accepted price (inclusive).
        maximum: Highest accepted price (inclusive).

    Returns:
        bool: True when ``minimum <= price <= maximum``; False otherwise,
        including when *price* is not a number.
    """
    return is_in_range(price, minimum, maximum)


# ============================================================================
#                           Username predicate
# ============================================================================


@dataclass(frozen=True)
class UsernamePolicy:
    """Length bounds for the standalone username predicate.

    These bounds are independent of the ones used by the composite
    user-input check (see `storefront.domain.rules.UserInputBounds`). The
    minimum is at least 1, so the empty string is never a username.
    """

    min_length: int = 5
    max_length: int = 15

    def __post_init__(self) -> None:
        if self.min_length < 1 or self.min_length > self.max_length:
            raise InvalidRuleParametersError(
                "username policy",
                f"min_length={self.min_length}, max_length={self.max_length}",
            )


DEFAULT_USERNAME_POLICY = UsernamePolicy()


def is_valid_username(
    name: object, policy: UsernamePolicy = DEFAULT_USERNAME_POLICY
) -> bool:
    """Return True if *name* is a string of an accepted length.

    ``None``, numbers and other non-strings are never valid usernames.
    """
    return is_length_in_range(name, policy.min_length, policy.max_length)


# ============================================================================
#                           Validation results
# ============================================================================


@dataclass(frozen=True)
class Success:
    """Outcome of a composite check where every rule passed."""

    @property
    def ok(self) -> bool:
        """Always True."""
        return True

    @property
    def message(self) -> str:
        """Human-readable summary."""
        return SUCCESS_MESSAGE


@dataclass(frozen=True)
class Failure:
    """Outcome of a composite check where at least one rule failed.

    Attributes:
        reasons: One reason per violated rule, in check order.
    """

    reasons: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.reasons:
            raise ValueError("Failure requires at least one reason")

    @property
    def ok(self) -> bool:
        """Always False."""
        return False

    @property
    def message(self) -> str:
        """Human-readable summary listing every reason."""
        return f"{FAILURE_PREFIX}: {', '.join(self.reasons)}"


ValidationResult: TypeAlias = Success | Failure


def collect(checks: Iterable[tuple[bool, str]]) -> ValidationResult:
    """Combine ``(passed, reason)`` pairs into a single result.

    Every check is evaluated; the failure lists all reasons whose check did
    not pass rather than stopping at the first one.
    """
    reasons = tuple(reason for passed, reason in checks if not passed)
    if reasons:
        return Failure(reasons)
    return Success()
