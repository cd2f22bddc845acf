"""Interface for reading the current time."""

import abc
from datetime import datetime

# pylint: disable=too-few-public-methods


class Clock(abc.ABC):
    """Contract for a source of the current time."""

    @abc.abstractmethod
    def now(self) -> datetime:
        """Return the current moment."""
