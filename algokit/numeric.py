"""Numeric routines: fast exponentiation and integer square roots."""

from __future__ import annotations


def power(x: float, n: int) -> float:
    """Return x raised to the integer power n by repeated squaring.

    A zero base with a negative exponent raises ZeroDivisionError.
    """
    base = float(x)
    exponent = n
    if exponent < 0:
        base = 1 / base
        exponent = -exponent
    result = 1.0
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return result


def integer_sqrt(x: int) -> int:
    """Return the largest integer whose square does not exceed x."""
    if x < 0:
        raise ValueError("x must be non-negative")
    if x == 0:
        return 0
    if x < 4:
        return 1
    lo, hi = 0, x
    while lo < hi:
        mid = (lo + hi) // 2
        if mid <= x // mid:
            lo = mid + 1
        else:
            hi = mid
    return lo - 1