"""Table-backed exchange rates."""

from collections.abc import Mapping

from storefront.interfaces.currency import (
    ExchangeRateNotFoundError,
    ExchangeRateProvider,
)

# pylint: disable=too-few-public-methods


class StaticExchangeRates(ExchangeRateProvider):
    """Exchange rates read from a fixed table.

    The table maps ``(from_currency, to_currency)`` pairs to rates. Currency
    codes are compared case-insensitively. Converting a currency to itself
    always yields 1.0; the reverse of a known pair is *not* inferred.
    """

    def __init__(self, rates: Mapping[tuple[str, str], float]) -> None:
        self._rates = {
            (src.upper(), dst.upper()): float(rate)
            for (src, dst), rate in rates.items()
        }

    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        key = (from_currency.upper(), to_currency.upper())
        if key[0] == key[1]:
            return 1.0
        try:
            return self._rates[key]
        except KeyError as e:
            raise ExchangeRateNotFoundError(from_currency, to_currency) from e
