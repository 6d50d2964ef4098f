"""Error types raised by the decimal calculator.

Every error derives from CalculatorError, which is an ArithmeticError, and
also from the builtin exception a caller would naturally catch for the same
failure (ValueError for bad input, ZeroDivisionError for a zero divisor).
"""

from __future__ import annotations


class CalculatorError(ArithmeticError):
    """Base class for decimal calculator errors."""

    pass


class InvalidNumberFormat(CalculatorError, ValueError):
    """Operand is not a decimal literal of the form -?digits(.digits)?"""

    pass


class DivisionByZero(CalculatorError, ZeroDivisionError):
    """Division, modulo or share by zero."""

    pass


class InvalidPrecision(CalculatorError, ValueError):
    """Requested precision is negative or not an integer."""

    pass


class InvalidRatios(CalculatorError, ValueError):
    """Allocation ratios are empty, negative, or sum to zero."""

    pass


__all__ = [
    "CalculatorError",
    "InvalidNumberFormat",
    "DivisionByZero",
    "InvalidPrecision",
    "InvalidRatios",
]
