"""Interface for sending email."""

import abc

# pylint: disable=too-few-public-methods


class EmailSender(abc.ABC):
    """Contract for an outgoing mail service."""

    @abc.abstractmethod
    def send_email(self, recipient: str, message: str) -> None:
        """Deliver *message* to *recipient*."""
