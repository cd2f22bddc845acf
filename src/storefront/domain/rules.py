"""Rule evaluators: coupons, user input and driving eligibility.

A `RuleBook` owns the read-only tables these rules consult (the coupon
catalog, the driving-age table and the user-input bounds). It is built once
from configuration and never mutated.

Two failure idioms are used:

- Single-value rules (`calculate_discount`, `can_drive`) return a message
  starting with "Invalid" when an input is malformed or a lookup key is
  unknown.
- The composite user-input check returns a `ValidationResult` listing every
  violated rule; `validate_user_input` renders it as a message.

The module-level functions delegate to a `RuleBook` built from the defaults.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .errors import DuplicateCouponError, InvalidRuleParametersError
from .validation import (
    ValidationResult,
    collect,
    is_in_range,
    is_length_in_range,
    is_number,
)
from .value_objects import Coupon

INVALID_PRICE = "Invalid price"
INVALID_DISCOUNT_CODE = "Invalid discount code"
INVALID_USERNAME = "Invalid username"
INVALID_AGE = "Invalid age"
INVALID_COUNTRY_CODE = "Invalid country code"

DEFAULT_COUPONS: tuple[Coupon, ...] = (
    Coupon(code="SAVE10", discount=0.1),
    Coupon(code="SAVE20", discount=0.2),
)

DEFAULT_DRIVING_AGES: Mapping[str, int] = MappingProxyType({"US": 16, "UK": 17})


@dataclass(frozen=True)
class UserInputBounds:
    """Bounds applied by the composite user-input check (inclusive)."""

    min_username_length: int = 3
    max_username_length: int = 255
    min_age: int = 18
    max_age: int = 100

    def __post_init__(self) -> None:
        if not 0 <= self.min_username_length <= self.max_username_length:
            raise InvalidRuleParametersError(
                "user input",
                f"username length {self.min_username_length}..{self.max_username_length}",
            )
        if not 0 <= self.min_age <= self.max_age:
            raise InvalidRuleParametersError(
                "user input", f"age {self.min_age}..{self.max_age}"
            )


def _index_coupons(coupons: Iterable[Coupon]) -> Mapping[str, Coupon]:
    index: dict[str, Coupon] = {}
    for coupon in coupons:
        if coupon.code in index:
            raise DuplicateCouponError(coupon.code)
        index[coupon.code] = coupon
    if not index:
        raise InvalidRuleParametersError("coupon catalog", "catalog is empty")
    return MappingProxyType(index)


@dataclass(frozen=True)
class RuleBook:
    """Rule evaluators bound to a fixed set of tables.

    Args:
        coupons: The coupon catalog. Must be non-empty with unique codes.
        driving_ages: Minimum driving age per country code.
        user_input: Bounds for `check_user_input`.

    Raises:
        DuplicateCouponError: If two coupons share a code.
        InvalidRuleParametersError: If the catalog is empty or an age is negative.
    """

    coupons: tuple[Coupon, ...] = DEFAULT_COUPONS
    driving_ages: Mapping[str, int] = field(
        default_factory=lambda: DEFAULT_DRIVING_AGES
    )
    user_input: UserInputBounds = field(default_factory=UserInputBounds)
    _coupon_index: Mapping[str, Coupon] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        # frozen: normalise inputs through object.__setattr__
        object.__setattr__(self, "coupons", tuple(self.coupons))
        object.__setattr__(self, "_coupon_index", _index_coupons(self.coupons))
        for country, age in self.driving_ages.items():
            if not is_number(age) or age < 0:
                raise InvalidRuleParametersError(
                    "driving ages", f"{country} has minimum age {age!r}"
                )
        object.__setattr__(
            self, "driving_ages", MappingProxyType(dict(self.driving_ages))
        )

    # ------------------------------------------------------------------
    # Coupons
    # ------------------------------------------------------------------

    def get_coupons(self) -> tuple[Coupon, ...]:
        """Return the coupon catalog."""
        return self.coupons

    def find_coupon(self, code: str) -> Coupon | None:
        """Return the coupon with exactly this code, or None."""
        return self._coupon_index.get(code)

    def calculate_discount(self, price: object, code: object) -> float | str:
        """Apply a coupon code to a price.

        Args:
            price: A non-negative number.
            code: A coupon code. Unknown codes leave the price unchanged.

        Returns:
            The discounted price, the unchanged price for an unknown code, or
            an "Invalid ..." message when *price* or *code* is malformed or
            the discounted price is too large to represent.
        """
        if not is_number(price) or price < 0:  # type: ignore[operator]
            return INVALID_PRICE
        if not isinstance(code, str):
            return INVALID_DISCOUNT_CODE
        if (coupon := self.find_coupon(code)) is None:
            return price  # type: ignore[return-value]
        try:
            return coupon.apply(price)  # type: ignore[arg-type]
        except OverflowError:
            # int prices beyond float range cannot be discounted
            return INVALID_PRICE

    # ------------------------------------------------------------------
    # User input
    # ------------------------------------------------------------------

    def check_user_input(self, username: object, age: object) -> ValidationResult:
        """Check a username and age, reporting every rule that fails."""
        bounds = self.user_input
        return collect(
            [
                (
                    is_length_in_range(
                        username,
                        bounds.min_username_length,
                        bounds.max_username_length,
                    ),
                    INVALID_USERNAME,
                ),
                (is_in_range(age, bounds.min_age, bounds.max_age), INVALID_AGE),
            ]
        )

    def validate_user_input(self, username: object, age: object) -> str:
        """Like `check_user_input` but rendered as a single message."""
        return self.check_user_input(username, age).message

    # ------------------------------------------------------------------
    # Driving eligibility
    # ------------------------------------------------------------------

    def can_drive(self, age: object, country_code: object) -> bool | str:
        """Return whether someone of *age* may drive in *country_code*.

        Exactly the minimum age qualifies. An unknown country code yields
        "Invalid country code"; a non-numeric age yields "Invalid age".
        """
        minimum = (
            self.driving_ages.get(country_code)
            if isinstance(country_code, str)
            else None
        )
        if minimum is None:
            return INVALID_COUNTRY_CODE
        if not is_number(age):
            return INVALID_AGE
        return age >= minimum  # type: ignore[operator]


DEFAULT_RULES = RuleBook()


def get_coupons() -> tuple[Coupon, ...]:
    """Return the default coupon catalog."""
    return DEFAULT_RULES.get_coupons()


def calculate_discount(price: object, code: object) -> float | str:
    """Apply a coupon code from the default catalog to a price."""
    return DEFAULT_RULES.calculate_discount(price, code)


def check_user_input(username: object, age: object) -> ValidationResult:
    """Check a username and age against the default bounds."""
    return DEFAULT_RULES.check_user_input(username, age)


def validate_user_input(username: object, age: object) -> str:
    """Validate a username and age against the default bounds."""
    return DEFAULT_RULES.validate_user_input(username, age)


def can_drive(age: object, country_code: object) -> bool | str:
    """Check driving eligibility against the default age table."""
    return DEFAULT_RULES.can_drive(age, country_code)
