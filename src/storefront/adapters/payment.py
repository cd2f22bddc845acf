"""Payment gateways."""

import logging

from storefront.interfaces.payment import (
    ChargeResult,
    ChargeStatus,
    CreditCard,
    PaymentGateway,
)

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class FakePaymentGateway(PaymentGateway):
    """A gateway that answers every charge with a fixed status.

    Each call is recorded in `charges` as a ``(card, amount)`` pair.

    Note:
        No money moves; suitable for demos and tests only.
    """

    def __init__(self, status: ChargeStatus = ChargeStatus.SUCCESS) -> None:
        self.status = status
        self.charges: list[tuple[CreditCard, float]] = []

    def charge(self, card: CreditCard, amount: float) -> ChargeResult:
        self.charges.append((card, amount))
        logger.debug("Charging %s: %s", amount, self.status.value)
        return ChargeResult(status=self.status)
