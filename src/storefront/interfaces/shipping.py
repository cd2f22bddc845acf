"""Interface for shipping quote lookups."""

import abc
from dataclasses import dataclass

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class ShippingQuote:
    """Price and delivery estimate for shipping to one destination."""

    cost: float
    estimated_days: int


class ShippingQuoteProvider(abc.ABC):
    """Contract for a carrier that quotes shipping by destination."""

    @abc.abstractmethod
    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        """Return a quote for *destination*, or None if it is not served."""
