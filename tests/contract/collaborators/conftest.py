"""Fixtures for collaborator contract tests.

Each fixture is parametrised over every adapter of one interface and yields
a fresh instance, so the same contract runs against all of them. Extend by
adding an identifier to `params` and a branch below.
"""

from collections.abc import Iterable
from datetime import datetime, timezone

import pytest

from storefront.adapters.analytics import (
    InMemoryPageViewTracker,
    LoggingPageViewTracker,
)
from storefront.adapters.clock import FixedClock, SystemClock
from storefront.adapters.currency import StaticExchangeRates
from storefront.adapters.email import InMemoryEmailSender, LoggingEmailSender
from storefront.adapters.payment import FakePaymentGateway
from storefront.adapters.security import FixedCodeGenerator, RandomCodeGenerator
from storefront.adapters.shipping import TableShippingQuotes
from storefront.config import DEFAULT_EXCHANGE_RATES, DEFAULT_SHIPPING_QUOTES
from storefront.interfaces.analytics import PageViewTracker
from storefront.interfaces.clock import Clock
from storefront.interfaces.currency import ExchangeRateProvider
from storefront.interfaces.email import EmailSender
from storefront.interfaces.payment import ChargeStatus, PaymentGateway
from storefront.interfaces.security import CodeGenerator
from storefront.interfaces.shipping import ShippingQuoteProvider


@pytest.fixture(params=["static"])
def exchange_rates(request: pytest.FixtureRequest) -> Iterable[ExchangeRateProvider]:
    """Yield an exchange-rate provider loaded with the default table."""
    match request.param:
        case "static":
            yield StaticExchangeRates(DEFAULT_EXCHANGE_RATES)
        case _:
            raise ValueError(f"unknown exchange rate provider: {request.param}")


@pytest.fixture(params=["table"])
def shipping_quotes(request: pytest.FixtureRequest) -> Iterable[ShippingQuoteProvider]:
    """Yield a shipping quote provider serving the default destinations."""
    match request.param:
        case "table":
            yield TableShippingQuotes(DEFAULT_SHIPPING_QUOTES)
        case _:
            raise ValueError(f"unknown shipping quote provider: {request.param}")


@pytest.fixture(params=["logging", "memory"])
def page_view_tracker(request: pytest.FixtureRequest) -> Iterable[PageViewTracker]:
    """Yield a page-view tracker."""
    match request.param:
        case "logging":
            yield LoggingPageViewTracker()
        case "memory":
            yield InMemoryPageViewTracker()
        case _:
            raise ValueError(f"unknown page view tracker: {request.param}")


@pytest.fixture(params=["success", "failed"])
def payment_gateway(request: pytest.FixtureRequest) -> Iterable[PaymentGateway]:
    """Yield a payment gateway answering with each possible status."""
    yield FakePaymentGateway(ChargeStatus(request.param))


@pytest.fixture(params=["logging", "memory"])
def email_sender(request: pytest.FixtureRequest) -> Iterable[EmailSender]:
    """Yield an email sender."""
    match request.param:
        case "logging":
            yield LoggingEmailSender()
        case "memory":
            yield InMemoryEmailSender()
        case _:
            raise ValueError(f"unknown email sender: {request.param}")


@pytest.fixture(params=["random", "fixed"])
def code_generator(request: pytest.FixtureRequest) -> Iterable[CodeGenerator]:
    """Yield a security code generator."""
    match request.param:
        case "random":
            yield RandomCodeGenerator()
        case "fixed":
            yield FixedCodeGenerator(424242)
        case _:
            raise ValueError(f"unknown code generator: {request.param}")


@pytest.fixture(params=["system", "system-utc", "fixed"])
def clock(request: pytest.FixtureRequest) -> Iterable[Clock]:
    """Yield a clock."""
    match request.param:
        case "system":
            yield SystemClock()
        case "system-utc":
            yield SystemClock(timezone.utc)
        case "fixed":
            yield FixedClock(datetime(2024, 12, 25, 12, 0))
        case _:
            raise ValueError(f"unknown clock: {request.param}")
