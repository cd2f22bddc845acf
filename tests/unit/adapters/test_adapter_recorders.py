"""Unit tests for the recording, logging and fixed adapters."""

import logging
from datetime import datetime, timedelta, timezone

import pytest

from storefront.adapters.analytics import (
    InMemoryPageViewTracker,
    LoggingPageViewTracker,
)
from storefront.adapters.clock import FixedClock, SystemClock
from storefront.adapters.email import InMemoryEmailSender, LoggingEmailSender
from storefront.adapters.payment import FakePaymentGateway
from storefront.adapters.security import FixedCodeGenerator, RandomCodeGenerator
from storefront.interfaces.payment import ChargeStatus, CreditCard

# pylint: disable=magic-value-comparison


def test_in_memory_tracker_keeps_order():
    """Views are recorded in the order they were tracked."""
    tracker = InMemoryPageViewTracker()
    tracker.track_page_view("/home")
    tracker.track_page_view("/cart")
    assert tracker.views == ["/home", "/cart"]


def test_logging_tracker_logs_path(caplog):
    """Each page view is logged at INFO."""
    with caplog.at_level(logging.INFO, logger="storefront.adapters.analytics"):
        LoggingPageViewTracker().track_page_view("/home")
    assert "Page view: /home" in caplog.messages


def test_in_memory_sender_keeps_outbox():
    """Sent messages are kept with their recipient."""
    sender = InMemoryEmailSender()
    sender.send_email("a@b.com", "hello")
    assert sender.outbox == [("a@b.com", "hello")]


def test_logging_sender_logs_message(caplog):
    """Outgoing mail is logged at INFO."""
    with caplog.at_level(logging.INFO, logger="storefront.adapters.email"):
        LoggingEmailSender().send_email("a@b.com", "hello")
    assert "Email to a@b.com: hello" in caplog.messages


@pytest.mark.parametrize("status", list(ChargeStatus))
def test_fake_gateway_records_charges(status):
    """The configured status is returned and each charge recorded."""
    gateway = FakePaymentGateway(status)
    card = CreditCard("4111111111111111")
    assert gateway.charge(card, 12.5).status is status
    assert gateway.charges == [(card, 12.5)]


def test_fake_gateway_succeeds_by_default():
    """Without a status the gateway approves charges."""
    result = FakePaymentGateway().charge(CreditCard("1"), 1)
    assert result.status is ChargeStatus.SUCCESS


@pytest.mark.parametrize("digits", [1, 4, 6, 9])
def test_random_codes_have_fixed_width(digits):
    """Codes always have exactly the requested number of digits."""
    generator = RandomCodeGenerator(digits)
    for _ in range(50):
        assert len(str(generator.generate_code())) == digits


def test_random_codes_need_a_digit():
    """Zero-digit codes cannot be generated."""
    with pytest.raises(ValueError, match="digits must be positive"):
        RandomCodeGenerator(0)


def test_fixed_code_generator():
    """The configured code is returned every time."""
    generator = FixedCodeGenerator(123456)
    assert generator.generate_code() == generator.generate_code() == 123456


def test_fixed_clock_can_be_moved():
    """FixedClock stays put until set to a new instant."""
    start = datetime(2024, 12, 25, 9, 0)
    clock = FixedClock(start)
    assert clock.now() == start
    clock.set(start + timedelta(hours=12))
    assert clock.now() == datetime(2024, 12, 25, 21, 0)


def test_system_clock_time_zone():
    """A SystemClock with a zone returns aware datetimes; without, naive."""
    assert SystemClock(timezone.utc).now().tzinfo is timezone.utc
    assert SystemClock().now().tzinfo is None
