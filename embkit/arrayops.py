"""Small arithmetic, sequence and array helpers."""

from __future__ import annotations

import math
import statistics
from collections.abc import Iterable, Sequence

_USHORT_MOD = 1 << 16


def _c_divmod(a: int, b: int) -> tuple[int, int]:
    """Integer division that truncates toward zero, with the matching remainder."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - b * quotient


def arithmetic(
    a: int, b: int
) -> tuple[int, int, int, int | None, int | None]:
    """Return (sum, product, difference, quotient, remainder) of two integers.

    The quotient truncates toward zero. When b is zero the quotient and the
    remainder are None.
    """
    if b == 0:
        return a + b, a * b, a - b, None, None
    quotient, remainder = _c_divmod(a, b)
    return a + b, a * b, a - b, quotient, remainder


def larger(a: int, b: int) -> int | None:
    """Return the larger of two numbers, or None when they are equal."""
    if a == b:
        return None
    return a if a > b else b


def miles_per_gallon(gallons: float, miles: float) -> float:
    """Miles driven per gallon used for one tankful."""
    if gallons == 0:
        raise ValueError("gallons must not be zero")
    return miles / gallons


def combined_mpg(tanks: Iterable[tuple[float, float]]) -> float:
    """Average of the miles per gallon of each (gallons, miles) tankful."""
    figures = [miles_per_gallon(gallons, miles) for gallons, miles in tanks]
    if not figures:
        raise ValueError("at least one tankful is required")
    return sum(figures) / len(figures)


def sum_sequence(values: Iterable[int]) -> int:
    """Sum values as an unsigned 16-bit accumulator, wrapping on overflow."""
    return sum(values) % _USHORT_MOD


def integer_power(base: int, exponent: int) -> int:
    """Return base raised to a positive, non-zero integer exponent."""
    if exponent < 1:
        raise ValueError(f"exponent must be a positive integer: {exponent}")
    return math.prod([base] * exponent)


def is_multiple(first: int, second: int) -> bool:
    """True when first is evenly divisible by second."""
    if second == 0:
        raise ValueError("second must not be zero")
    return first % second == 0


def is_even(number: int) -> bool:
    """True when number is even."""
    return number % 2 == 0


def square(side: int, fill: str = "*") -> str:
    """A solid square of fill characters, one newline-terminated row per line."""
    if len(fill) != 1:
        raise ValueError("fill must be a single character")
    row = fill * side + "\n"
    return row * max(side, 0)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two positive integers; 0 if either is not positive."""
    if a < 1 or b < 1:
        return 0
    return math.gcd(a, b)


def reverse(values: Iterable[int]) -> list[int]:
    """Return the values in reverse order."""
    return list(values)[::-1]


def median(values: Iterable[float]) -> float:
    """Median of the values; the mean of the two middle ones for an even count."""
    data = list(values)
    if not data:
        raise ValueError("median of an empty sequence")
    return statistics.median(data)


def count_divisible(values: Iterable[int], divisor: int) -> int:
    """Number of values evenly divisible by divisor."""
    if divisor == 0:
        raise ValueError("divisor must not be zero")
    return sum(1 for value in values if value % divisor == 0)


def count_occurrences(values: Iterable[int], target: int) -> int:
    """Number of times target appears among the values."""
    return sum(1 for value in values if value == target)


def is_prime(number: int) -> bool:
    """True when number is prime."""
    if number < 2:
        return False
    return all(number % divisor for divisor in range(2, math.isqrt(number) + 1))


def parity_flags(values: Iterable[int]) -> list[int]:
    """Replace every even value by 0 and every odd value by 1."""
    return [0 if value % 2 == 0 else 1 for value in values]


def average(values: Iterable[float]) -> float:
    """Arithmetic mean of the values."""
    data = list(values)
    if not data:
        raise ValueError("average of an empty sequence")
    return sum(data) / len(data)


def arrays_equal(a: Sequence[int], b: Sequence[int]) -> bool:
    """True when both sequences hold the same values in the same order."""
    return len(a) == len(b) and all(x == y for x, y in zip(a, b))


def largest(values: Iterable[int]) -> int:
    """Largest value, never less than 0; 0 for an empty sequence."""
    return max(values, default=0) if values is not None else 0


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a new list with the values sorted ascending by bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for pos in range(end):
            if items[pos] > items[pos + 1]:
                items[pos], items[pos + 1] = items[pos + 1], items[pos]
                swapped = True
        if not swapped:
            break
    return items