"""Wire configuration, rules and adapters into an application container."""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from storefront import config
from storefront.adapters.analytics import LoggingPageViewTracker
from storefront.adapters.clock import SystemClock
from storefront.adapters.currency import StaticExchangeRates
from storefront.adapters.email import LoggingEmailSender
from storefront.adapters.payment import FakePaymentGateway
from storefront.adapters.security import RandomCodeGenerator
from storefront.adapters.shipping import TableShippingQuotes
from storefront.domain.rules import RuleBook
from storefront.interfaces.analytics import PageViewTracker
from storefront.interfaces.clock import Clock
from storefront.interfaces.currency import ExchangeRateProvider
from storefront.interfaces.email import EmailSender
from storefront.interfaces.payment import PaymentGateway
from storefront.interfaces.security import CodeGenerator
from storefront.interfaces.shipping import ShippingQuoteProvider

logger = logging.getLogger(__name__)

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True)
class AppContainer:
    """A class to hold the wired application."""

    settings: config.RuleSettings
    rules: RuleBook
    rates: ExchangeRateProvider
    quotes: ShippingQuoteProvider
    tracker: PageViewTracker
    gateway: PaymentGateway
    mailer: EmailSender
    codes: CodeGenerator
    clock: Clock

    def dependencies(self) -> dict[str, object]:
        """Return the collaborators and rule parameters keyed by parameter name."""
        return {
            "rates": self.rates,
            "quotes": self.quotes,
            "tracker": self.tracker,
            "gateway": self.gateway,
            "mailer": self.mailer,
            "codes": self.codes,
            "clock": self.clock,
            "base_currency": self.settings.base_currency,
            "hours": self.settings.business_hours,
            "rule": self.settings.calendar_discount,
        }

    def bind(self, service: Callable[..., Any]) -> Callable[..., Any]:
        """Return *service* with this container's collaborators injected."""
        return inject_dependencies(service, self.dependencies())


def bootstrap(settings: config.RuleSettings | None = None) -> AppContainer:
    """Build the application container.

    Args:
        settings: Settings to use. When None, they are loaded from the
            environment with `config.load_settings`.
    """
    if settings is None:
        settings = config.load_settings()
    logger.debug("Bootstrapping with %s", settings)

    return AppContainer(
        settings=settings,
        rules=settings.rule_book(),
        rates=StaticExchangeRates(settings.exchange_rates),
        quotes=TableShippingQuotes(settings.shipping_quotes),
        tracker=LoggingPageViewTracker(),
        gateway=FakePaymentGateway(),
        mailer=LoggingEmailSender(),
        codes=RandomCodeGenerator(),
        clock=SystemClock(settings.tzinfo()),
    )


def inject_dependencies(
    handler: Callable[..., Any], dependencies: Mapping[str, object]
) -> Callable[..., Any]:
    """Bind the dependencies whose names match *handler*'s parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
