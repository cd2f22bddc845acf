"""Small numeric helpers used by reports and examples."""

import math
from collections.abc import Sequence


def max_of(a: float, b: float) -> float:
    """Return the larger of two numbers (the first one when they are equal)."""
    return a if a >= b else b


def fizz_buzz(n: int) -> str:
    """Classic FizzBuzz for a single number."""
    if n % 3 == 0 and n % 5 == 0:
        return "FizzBuzz"
    if n % 3 == 0:
        return "Fizz"
    if n % 5 == 0:
        return "Buzz"
    return str(n)


def calculate_average(values: Sequence[float]) -> float:
    """Return the arithmetic mean of *values*, or NaN when there are none."""
    if not values:
        return math.nan
    return sum(values) / len(values)


def factorial(n: int) -> float:
    """Return ``n!``, or NaN for negative *n*."""
    if n < 0:
        return math.nan
    return math.factorial(n)
