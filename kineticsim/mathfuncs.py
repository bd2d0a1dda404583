"""Numeric helpers used when evaluating model mathematics.

These follow the IEEE conventions of the C library. Inputs outside a
function's domain give NaN or an infinity; they do not raise.
"""

from __future__ import annotations

import math

__all__ = [
    "asinh",
    "acosh",
    "atanh",
    "log1p",
    "factorial",
    "fmax",
    "fmin",
    "isnan",
]


def asinh(x: float) -> float:
    """Inverse hyperbolic sine."""
    return math.asinh(x)


def acosh(x: float) -> float:
    """Inverse hyperbolic cosine; NaN for x < 1 or NaN input."""
    if math.isnan(x) or x < 1.0:
        return math.nan
    return math.acosh(x)


def atanh(x: float) -> float:
    """Inverse hyperbolic tangent; NaN when |x| > 1, +-inf at +-1."""
    if math.isnan(x) or abs(x) > 1.0:
        return math.nan
    if x == 1.0:
        return math.inf
    if x == -1.0:
        return -math.inf
    return math.atanh(x)


def log1p(x: float) -> float:
    """Natural logarithm of 1 + x; -inf at -1 and NaN below it."""
    if math.isnan(x) or x < -1.0:
        return math.nan
    if x == -1.0:
        return -math.inf
    return math.log1p(x)


def factorial(n: int) -> int:
    """Product of the integers 1..n; 1 when n is below 1."""
    return math.prod(range(1, int(n) + 1))


def fmax(a: float, b: float) -> float:
    """Return b if a < b, otherwise a."""
    return b if a < b else a


def fmin(a: float, b: float) -> float:
    """Return b if b < a, otherwise a."""
    return b if b < a else a


def isnan(x: float) -> bool:
    """Return True if x is NaN."""
    return math.isnan(x)