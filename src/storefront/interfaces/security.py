"""Interface for one-time security code generation."""

import abc

# pylint: disable=too-few-public-methods


class CodeGenerator(abc.ABC):
    """Contract for a generator of one-time login codes."""

    @abc.abstractmethod
    def generate_code(self) -> int:
        """Return a fresh security code."""
