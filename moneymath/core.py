"""Exact decimal arithmetic on Numbers.

Every operation works on integer coefficients scaled by powers of ten, so
results are exact: nothing ever passes through binary floating point. Only
divide() discards digits, and it does so by truncation at a requested
precision.

Scale rules:
    add / subtract / modulo:  max(scale(a), scale(b))
    multiply:                 scale(a) + scale(b)
    divide:                   precision
"""

from __future__ import annotations

from moneymath.errors import DivisionByZero
from moneymath.number import Number, align, check_precision


def _div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // operator rounds toward negative infinity; decimal division
    at a fixed precision drops the remaining digits instead, which is
    truncation toward zero. The two differ when exactly one operand is
    negative.

    Examples:
        Python: -7 // 2 = -4 (rounds toward -inf)
        _div_trunc(-7, 2) = -3 (truncates toward zero)
    """
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def add(a: Number, b: Number) -> Number:
    """Exact sum, scale = max(scale(a), scale(b))."""
    left, right, scale = align(a, b)
    return Number(left + right, scale)


def subtract(a: Number, b: Number) -> Number:
    """Exact difference, scale = max(scale(a), scale(b))."""
    left, right, scale = align(a, b)
    return Number(left - right, scale)


def multiply(a: Number, b: Number) -> Number:
    """Exact product, scale = scale(a) + scale(b)."""
    return Number(a.coefficient * b.coefficient, a.scale + b.scale)


def divide(a: Number, b: Number, precision: int) -> Number:
    """Quotient a / b truncated toward zero to `precision` fractional digits.

    a / b = (ca / 10**sa) / (cb / 10**sb), so the quotient expressed in
    units of 10**-precision is (ca * 10**(sb + precision)) / (cb * 10**sa).

    Raises:
        DivisionByZero: If b is zero
        InvalidPrecision: If precision is negative
    """
    check_precision(precision)
    if b.is_zero():
        raise DivisionByZero(f"Division by zero: {a} / {b}")

    numerator = a.coefficient * 10 ** (b.scale + precision)
    denominator = b.coefficient * 10**a.scale
    return Number(_div_trunc(numerator, denominator), precision)


def modulo(a: Number, b: Number) -> Number:
    """Remainder of floor division: a - b * floor(a / b).

    The result is zero or carries the sign of b, and its scale is
    max(scale(a), scale(b)).

    Raises:
        DivisionByZero: If b is zero
    """
    if b.is_zero():
        raise DivisionByZero(f"Modulo by zero: {a} % {b}")

    left, right, scale = align(a, b)
    # Python's % on ints already follows floor-division semantics
    return Number(left % right, scale)


def compare(a: Number, b: Number) -> int:
    """Compare by exact value: -1 if a < b, 0 if equal, 1 if a > b."""
    left, right, _ = align(a, b)
    return (left > right) - (left < right)


def negate(a: Number) -> Number:
    """Flip the sign, keeping the scale."""
    return Number(-a.coefficient, a.scale)


def absolute(a: Number) -> Number:
    """Magnitude with the sign removed, keeping the scale."""
    return Number(abs(a.coefficient), a.scale)


__all__ = [
    "add",
    "subtract",
    "multiply",
    "divide",
    "modulo",
    "compare",
    "negate",
    "absolute",
]
