"""Interface for exchange-rate lookups."""

import abc

# pylint: disable=too-few-public-methods


class ExchangeRateNotFoundError(LookupError):
    """Raised when no rate is known for a currency pair."""

    def __init__(self, from_currency: str, to_currency: str) -> None:
        super().__init__(f"No exchange rate from {from_currency} to {to_currency}")
        self.from_currency = from_currency
        self.to_currency = to_currency


class ExchangeRateProvider(abc.ABC):
    """Contract for a source of currency exchange rates."""

    @abc.abstractmethod
    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        """Return how many units of *to_currency* one unit of *from_currency* buys.

        Raises:
            ExchangeRateNotFoundError: If the pair is unknown.
        """
