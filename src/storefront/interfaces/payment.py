"""Interface for charging payment cards.

A declined charge is a normal outcome reported through `ChargeResult`, not
an exception.
"""

import abc
from dataclasses import dataclass
from enum import Enum

# pylint: disable=too-few-public-methods


class ChargeStatus(Enum):
    """Outcome of a charge attempt."""

    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class CreditCard:
    """Card details handed to the payment gateway."""

    credit_card_number: str


@dataclass(frozen=True)
class ChargeResult:
    """Result returned by a payment gateway."""

    status: ChargeStatus


class PaymentGateway(abc.ABC):
    """Contract for a payment processor."""

    @abc.abstractmethod
    def charge(self, card: CreditCard, amount: float) -> ChargeResult:
        """Charge *amount* to *card* and report the outcome."""
