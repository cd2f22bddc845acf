"""Security code generators."""

import secrets

from storefront.interfaces.security import CodeGenerator

# pylint: disable=too-few-public-methods


class RandomCodeGenerator(CodeGenerator):
    """Cryptographically random numeric codes with a fixed number of digits.

    Codes never start with a zero, so ``str(code)`` always has `digits`
    characters.
    """

    def __init__(self, digits: int = 6) -> None:
        if digits < 1:
            raise ValueError(f"digits must be positive, got {digits}")
        self._low = 10 ** (digits - 1)
        self._high = 10**digits

    def generate_code(self) -> int:
        """Generate a new code."""
        return self._low + secrets.randbelow(self._high - self._low)


class FixedCodeGenerator(CodeGenerator):
    """A generator that always returns the same code.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self, code: int) -> None:
        self._code = code

    def generate_code(self) -> int:
        """Return the configured code."""
        return self._code
