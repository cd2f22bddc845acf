"""Fake collaborators for testing service-layer operations.

Each fake answers with a canned value and records how it was called, so
tests can assert on both the result and the interaction.
"""

from storefront.interfaces.currency import ExchangeRateProvider
from storefront.interfaces.security import CodeGenerator
from storefront.interfaces.shipping import ShippingQuote, ShippingQuoteProvider

# pylint: disable=too-few-public-methods


class StubExchangeRates(ExchangeRateProvider):
    """Returns the same rate for every pair."""

    def __init__(self, rate: float) -> None:
        self.rate = rate
        self.calls: list[tuple[str, str]] = []

    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        self.calls.append((from_currency, to_currency))
        return self.rate


class StubShippingQuotes(ShippingQuoteProvider):
    """Returns the same quote (or None) for every destination."""

    def __init__(self, quote: ShippingQuote | None) -> None:
        self.quote = quote
        self.calls: list[str] = []

    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        self.calls.append(destination)
        return self.quote


class SpyCodeGenerator(CodeGenerator):
    """Wraps a real generator and remembers every code it produced."""

    def __init__(self, inner: CodeGenerator) -> None:
        self._inner = inner
        self.results: list[int] = []

    def generate_code(self) -> int:
        code = self._inner.generate_code()
        self.results.append(code)
        return code
