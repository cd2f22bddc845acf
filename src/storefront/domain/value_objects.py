"""Module including value objects used across the domain layer."""

from dataclasses import dataclass

from .errors import InvalidCouponError
from .validation import is_number


@dataclass(frozen=True)
class Coupon:
    """A discount code and the fraction of the price it takes off.

    The discount is a fraction strictly between 0 and 1, so a coupon always
    changes the price and never makes an item free.

    Raises:
        InvalidCouponError: If the code is empty or the discount is out of range.
    """

    code: str
    discount: float

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code:
            raise InvalidCouponError(self.code, "code must be a non-empty string")
        if not is_number(self.discount):
            raise InvalidCouponError(self.code, "discount must be a number")
        if not 0 < self.discount < 1:
            raise InvalidCouponError(
                self.code, f"discount {self.discount} is not between 0 and 1"
            )

    def apply(self, price: float) -> float:
        """Return ``price`` with this coupon's discount taken off."""
        return price * (1 - self.discount)


@dataclass(frozen=True)
class Order:
    """An order ready to be paid for."""

    total_amount: float


@dataclass(frozen=True)
class OrderResult:
    """Outcome of submitting an order.

    `error` is set only when `success` is False.
    """

    success: bool
    error: str | None = None
