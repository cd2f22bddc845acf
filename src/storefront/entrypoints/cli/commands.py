"""Rule commands for the Storefront CLI.

Each command reads the wired `AppContainer` from the Click context object
and prints its result to stdout. Inputs the rules reject ("Invalid ...")
become a `click.ClickException`, so the process exits with status 1 and the
message on stderr.
"""

from __future__ import annotations

import logging
from datetime import datetime

import click

from storefront.adapters.clock import FixedClock
from storefront.bootstrap import AppContainer
from storefront.domain.basics import calculate_average
from storefront.domain.value_objects import Order
from storefront.interfaces.currency import ExchangeRateNotFoundError
from storefront.interfaces.payment import CreditCard
from storefront.service_layer import services

from .helpers import success, warn

logger = logging.getLogger(__name__)

DATETIME_FORMATS = ["%Y-%m-%d %H:%M", "%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S"]

pass_container = click.make_pass_decorator(AppContainer)


@click.command()
@pass_container
def coupons(container: AppContainer) -> None:
    """List the coupon catalog."""
    catalog = container.rules.get_coupons()
    for coupon in catalog:
        click.echo(f"{coupon.code:<12} {coupon.discount:>6.0%}")
    average = calculate_average([coupon.discount for coupon in catalog])
    click.echo(f"{'average':<12} {average:>6.0%}")


@click.command()
@click.argument("price", type=float)
@click.argument("code")
@pass_container
def discount(container: AppContainer, price: float, code: str) -> None:
    """Apply coupon CODE to PRICE."""
    result = container.rules.calculate_discount(price, code)
    if isinstance(result, str):
        raise click.ClickException(result)
    if container.rules.find_coupon(code) is None:
        logger.info("Unknown coupon code %r; price unchanged", code)
    click.echo(f"{result:.2f}")


@click.command(name="validate-user")
@click.argument("username")
@click.argument("age", type=int)
@pass_container
def validate_user(container: AppContainer, username: str, age: int) -> None:
    """Validate a USERNAME and AGE for sign-up."""
    result = container.rules.check_user_input(username, age)
    if not result.ok:
        raise click.ClickException(result.message)
    success(result.message)


@click.command(name="can-drive")
@click.argument("age", type=int)
@click.argument("country")
@pass_container
def can_drive(container: AppContainer, age: int, country: str) -> None:
    """Tell whether someone of AGE may drive in COUNTRY (e.g. US, UK)."""
    result = container.rules.can_drive(age, country.upper())
    if isinstance(result, str):
        raise click.ClickException(result)
    click.echo("yes" if result else "no")


@click.command()
@click.option(
    "--at",
    "at",
    type=click.DateTime(formats=DATETIME_FORMATS),
    help="Evaluate at this local time instead of now.",
)
@pass_container
def online(container: AppContainer, at: datetime | None) -> None:
    """Tell whether the shop is within opening hours."""
    is_store_online = container.bind(services.is_store_online)
    is_open = is_store_online(clock=FixedClock(at)) if at else is_store_online()
    click.echo("online" if is_open else "offline")


@click.command(name="holiday-discount")
@click.option(
    "--on",
    "on",
    type=click.DateTime(formats=["%Y-%m-%d", *DATETIME_FORMATS]),
    help="Evaluate on this date instead of today.",
)
@pass_container
def holiday_discount(container: AppContainer, on: datetime | None) -> None:
    """Show the calendar discount rate that applies today."""
    get_todays_discount = container.bind(services.get_todays_discount)
    rate = get_todays_discount(clock=FixedClock(on)) if on else get_todays_discount()
    click.echo(f"{rate:g}")


@click.command()
@click.argument("price", type=float)
@click.argument("currency")
@pass_container
def convert(container: AppContainer, price: float, currency: str) -> None:
    """Convert PRICE from the base currency into CURRENCY."""
    get_price_in_currency = container.bind(services.get_price_in_currency)
    try:
        converted = get_price_in_currency(price, currency)
    except ExchangeRateNotFoundError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"{converted:.2f} {currency.upper()}")


@click.command()
@click.argument("destination")
@pass_container
def shipping(container: AppContainer, destination: str) -> None:
    """Quote shipping to DESTINATION."""
    info = container.bind(services.get_shipping_info)(destination)
    if info == services.SHIPPING_UNAVAILABLE:
        warn(info)
        return
    click.echo(info)


@click.command()
@pass_container
def home(container: AppContainer) -> None:
    """Render the home page and record the view."""
    click.echo(container.bind(services.render_page)())


@click.command()
@click.argument("amount", type=click.FloatRange(min=0, min_open=True))
@click.argument("card_number")
@pass_container
def order(container: AppContainer, amount: float, card_number: str) -> None:
    """Pay an order of AMOUNT with the card CARD_NUMBER."""
    submit_order = container.bind(services.submit_order)
    result = submit_order(Order(total_amount=amount), CreditCard(card_number))
    if not result.success:
        raise click.ClickException(f"Order not placed: {result.error}")
    success(f"Order of {amount:.2f} placed")


@click.command(name="sign-up")
@click.argument("email")
@pass_container
def sign_up(container: AppContainer, email: str) -> None:
    """Sign up EMAIL and send it a welcome message."""
    if not container.bind(services.sign_up)(email):
        raise click.ClickException(f"Invalid email: {email}")
    success(f"Welcome email sent to {email}")


@click.command()
@click.argument("email")
@pass_container
def login(container: AppContainer, email: str) -> None:
    """Email a one-time security code to EMAIL."""
    container.bind(services.login)(email)
    success(f"Security code sent to {email}")


COMMANDS = [
    coupons,
    discount,
    validate_user,
    can_drive,
    online,
    holiday_discount,
    convert,
    shipping,
    home,
    order,
    sign_up,
    login,
]
