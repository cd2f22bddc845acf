"""Table-backed shipping quotes."""

from collections.abc import Mapping

from storefront.interfaces.shipping import ShippingQuote, ShippingQuoteProvider

# pylint: disable=too-few-public-methods


class TableShippingQuotes(ShippingQuoteProvider):
    """Shipping quotes read from a fixed destination table.

    Destinations are matched case-insensitively and ignoring surrounding
    whitespace. Unknown destinations get no quote.
    """

    def __init__(self, quotes: Mapping[str, ShippingQuote]) -> None:
        self._quotes = {self._key(dest): quote for dest, quote in quotes.items()}

    @staticmethod
    def _key(destination: str) -> str:
        return destination.strip().casefold()

    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        return self._quotes.get(self._key(destination))
