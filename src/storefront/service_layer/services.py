"""Service-layer operations.

Each function receives the collaborators it needs as arguments, so callers
(and tests) decide which implementation is used. Expected failures such as
an unknown shipping destination or a declined card are reported through the
return value; exceptions raised by a collaborator propagate unchanged.
"""

from __future__ import annotations

import logging
import re

from storefront.domain import schedules
from storefront.domain.schedules import BusinessHours, CalendarDiscount
from storefront.domain.value_objects import Order, OrderResult
from storefront.interfaces.analytics import PageViewTracker
from storefront.interfaces.clock import Clock
from storefront.interfaces.currency import ExchangeRateProvider
from storefront.interfaces.email import EmailSender
from storefront.interfaces.payment import ChargeStatus, CreditCard, PaymentGateway
from storefront.interfaces.security import CodeGenerator
from storefront.interfaces.shipping import ShippingQuoteProvider

logger = logging.getLogger(__name__)

HOME_PATH = "/home"
HOME_CONTENT = "<div>content</div>"
SHIPPING_UNAVAILABLE = "Shipping Unavailable"
PAYMENT_ERROR = "payment_error"
WELCOME_MESSAGE = "Welcome aboard!"

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# ============================================================================
#                           Pricing and shipping
# ============================================================================


def get_price_in_currency(
    price: float,
    currency: str,
    rates: ExchangeRateProvider,
    base_currency: str = "USD",
) -> float:
    """Convert a price from the base currency into *currency*.

    Raises:
        ExchangeRateNotFoundError: If *rates* has no rate for the pair.
    """
    rate = rates.get_exchange_rate(base_currency, currency)
    logger.debug("Exchange rate %s->%s: %s", base_currency, currency, rate)
    return price * rate


def _format_cost(cost: float) -> str:
    return str(int(cost)) if float(cost).is_integer() else f"{cost:.2f}"


def get_shipping_info(destination: str, quotes: ShippingQuoteProvider) -> str:
    """Describe shipping to *destination*.

    Returns:
        str: ``"Shipping Cost: $<cost> (<days> Days)"`` for a served
        destination, ``"Shipping Unavailable"`` otherwise.
    """
    quote = quotes.get_shipping_quote(destination)
    if quote is None:
        logger.info("No shipping quote for %r", destination)
        return SHIPPING_UNAVAILABLE
    return f"Shipping Cost: ${_format_cost(quote.cost)} ({quote.estimated_days} Days)"


# ============================================================================
#                           Pages and orders
# ============================================================================


def render_page(tracker: PageViewTracker) -> str:
    """Render the home page and record the view."""
    tracker.track_page_view(HOME_PATH)
    return HOME_CONTENT


def submit_order(
    order: Order, card: CreditCard, gateway: PaymentGateway
) -> OrderResult:
    """Charge the order total to *card*.

    Returns:
        OrderResult: ``success=True`` with no error when the charge goes
        through; ``success=False, error="payment_error"`` when it is declined.
    """
    result = gateway.charge(card, order.total_amount)
    if result.status is ChargeStatus.FAILED:
        logger.warning("Payment of %s declined", order.total_amount)
        return OrderResult(success=False, error=PAYMENT_ERROR)
    return OrderResult(success=True)


# ============================================================================
#                           Accounts
# ============================================================================


def is_valid_email(email: object) -> bool:
    """Return True if *email* looks like ``name@domain.tld``."""
    return isinstance(email, str) and EMAIL_PATTERN.match(email) is not None


def sign_up(email: str, mailer: EmailSender) -> bool:
    """Register *email* and send a welcome message.

    Returns:
        bool: False without sending anything if the address is malformed.
    """
    if not is_valid_email(email):
        logger.info("Rejected sign-up for malformed email %r", email)
        return False
    mailer.send_email(email, WELCOME_MESSAGE)
    return True


def login(email: str, codes: CodeGenerator, mailer: EmailSender) -> None:
    """Email a fresh one-time security code to *email*."""
    code = codes.generate_code()
    logger.debug("Sending login code to %s", email)
    mailer.send_email(email, str(code))


# ============================================================================
#                           Clock-bound rules
# ============================================================================


def is_store_online(
    clock: Clock, hours: BusinessHours = schedules.DEFAULT_HOURS
) -> bool:
    """Evaluate the opening-hours rule at the clock's current time."""
    return schedules.is_online(clock.now(), hours)


def get_todays_discount(
    clock: Clock, rule: CalendarDiscount = schedules.CHRISTMAS
) -> float:
    """Evaluate the calendar discount rule for the clock's current date."""
    return schedules.get_discount(clock.now(), rule)
