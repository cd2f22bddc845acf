"""Email senders."""

import logging

from storefront.interfaces.email import EmailSender

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class LoggingEmailSender(EmailSender):
    """Sender that writes outgoing mail to the application log instead of a server."""

    def send_email(self, recipient: str, message: str) -> None:
        logger.info("Email to %s: %s", recipient, message)


class InMemoryEmailSender(EmailSender):
    """Sender that keeps an outbox of ``(recipient, message)`` pairs."""

    def __init__(self) -> None:
        self.outbox: list[tuple[str, str]] = []

    def send_email(self, recipient: str, message: str) -> None:
        self.outbox.append((recipient, message))
