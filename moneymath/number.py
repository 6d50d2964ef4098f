"""Exact decimal value type.

A Number stores an integer coefficient and a non-negative scale, so that
value = coefficient / 10**scale. Every digit of the literal it was parsed from
is kept: "1.50" has coefficient 150 and scale 2.

Usage pattern:
    from moneymath.number import Number

    n = Number.from_string("-12.340")
    n.coefficient  # -12340
    n.scale        # 3
    str(n)         # "-12.340"

Arithmetic lives in moneymath.core; Number only parses, renders, compares
and answers questions about its own digits.
"""

from __future__ import annotations

import re
from decimal import Decimal

from moneymath.errors import InvalidNumberFormat, InvalidPrecision

# ASCII digits only; \d would also accept other Unicode digit characters
_DECIMAL_PATTERN = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")

# int/str conversion is capped at 4300 digits per call (Python 3.11+);
# longer digit strings are converted in chunks under the cap
_CHUNK_DIGITS = 4000
_CHUNK_BASE = 10**_CHUNK_DIGITS


class Number:
    """Immutable exact decimal number.

    Numbers with the same value compare and hash equal regardless of scale,
    so Number("1.0") == Number("1.00"). The scale is still preserved for
    rendering.

    Attributes:
        coefficient: Signed integer digits (read-only)
        scale: Count of fractional digits (read-only)
    """

    __slots__ = ("_coefficient", "_scale")
    _coefficient: int
    _scale: int

    def __init__(self, coefficient: int, scale: int = 0) -> None:
        """Create a Number from a coefficient and scale.

        Args:
            coefficient: Signed integer digits
            scale: Number of fractional digits (>= 0)

        Raises:
            TypeError: If coefficient or scale is not an int
            ValueError: If scale is negative
        """
        if not isinstance(coefficient, int) or isinstance(coefficient, bool):
            raise TypeError(f"Number coefficient must be int, got {type(coefficient).__name__}")
        if not isinstance(scale, int) or isinstance(scale, bool):
            raise TypeError(f"Number scale must be int, got {type(scale).__name__}")
        if scale < 0:
            raise ValueError(f"Number scale cannot be negative: {scale}")
        self._coefficient = coefficient
        self._scale = scale

    # --- Construction ---

    @classmethod
    def from_string(cls, value: str) -> Number:
        """Parse a decimal literal.

        Raises:
            InvalidNumberFormat: If value does not match -?digits(.digits)?
        """
        if not isinstance(value, str):
            raise InvalidNumberFormat(f"Decimal literal must be a string, got {type(value).__name__}")
        if _DECIMAL_PATTERN.fullmatch(value) is None:
            raise InvalidNumberFormat(f"Invalid decimal number: {value!r}")

        negative = value.startswith("-")
        integer, _, fraction = value.lstrip("-").partition(".")
        magnitude = _digits_to_int(integer + fraction)
        return cls(-magnitude if negative else magnitude, len(fraction))

    @classmethod
    def parse(cls, value: Number | str | int) -> Number:
        """Coerce an operand into a Number.

        Accepts a Number (returned as-is), a decimal literal string, or an
        int. Floats are rejected because they are not exact.

        Raises:
            InvalidNumberFormat: If value cannot be represented exactly
        """
        if isinstance(value, Number):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, bool):
            raise InvalidNumberFormat(f"Booleans are not numbers: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, float):
            raise InvalidNumberFormat(f"Floats are not accepted, pass a decimal string instead: {value!r}")
        raise InvalidNumberFormat(f"Cannot parse {type(value).__name__} as a decimal number")

    @classmethod
    def zero(cls) -> Number:
        """Create a Number with value 0."""
        return cls(0)

    # --- Accessors ---

    @property
    def coefficient(self) -> int:
        """The signed integer digits."""
        return self._coefficient

    @property
    def scale(self) -> int:
        """The number of fractional digits present."""
        return self._scale

    def is_zero(self) -> bool:
        return self._coefficient == 0

    def is_negative(self) -> bool:
        return self._coefficient < 0

    def is_integer(self) -> bool:
        """True if the value has no non-zero fractional digits."""
        return self._coefficient % 10**self._scale == 0

    def is_half(self) -> bool:
        """True if the fractional part is exactly .5 (either sign)."""
        if self._scale == 0:
            return False
        unit = 10**self._scale
        return abs(self._coefficient) % unit == unit // 2

    def integer_part(self) -> Number:
        """Integer part, truncated toward zero, with scale 0."""
        magnitude = abs(self._coefficient) // 10**self._scale
        return Number(-magnitude if self._coefficient < 0 else magnitude)

    def fractional_part(self) -> Number:
        """Fractional part, carrying the sign of the number and its scale."""
        magnitude = abs(self._coefficient) % 10**self._scale
        return Number(-magnitude if self._coefficient < 0 else magnitude, self._scale)

    def with_scale(self, scale: int) -> Number:
        """Return the same value padded to a larger scale.

        Raises:
            ValueError: If scale is smaller than the current scale (that
                would drop digits; use rounding instead)
        """
        if scale < self._scale:
            raise ValueError(f"Cannot reduce scale from {self._scale} to {scale} without rounding")
        return Number(self._coefficient * 10 ** (scale - self._scale), scale)

    def to_decimal(self) -> Decimal:
        """Convert to an exact decimal.Decimal."""
        return Decimal(str(self))

    # --- Rendering ---

    def __str__(self) -> str:
        digits = _int_to_digits(abs(self._coefficient))
        sign = "-" if self._coefficient < 0 else ""
        if self._scale == 0:
            return sign + digits

        digits = digits.rjust(self._scale + 1, "0")
        return f"{sign}{digits[: -self._scale]}.{digits[-self._scale :]}"

    def __repr__(self) -> str:
        return f"Number('{self}')"

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        aligned = _align_operand(self, other)
        if aligned is None:
            return NotImplemented
        return aligned[0] == aligned[1]

    def __hash__(self) -> int:
        coefficient, scale = self._coefficient, self._scale
        while scale > 0 and coefficient % 10 == 0:
            coefficient //= 10
            scale -= 1
        # Integers hash like int so that Number(5) == 5 stays hash-consistent
        if scale == 0:
            return hash(coefficient)
        return hash((coefficient, scale))

    def __lt__(self, other: object) -> bool:
        aligned = _align_operand(self, other)
        if aligned is None:
            return NotImplemented
        return aligned[0] < aligned[1]

    def __le__(self, other: object) -> bool:
        aligned = _align_operand(self, other)
        if aligned is None:
            return NotImplemented
        return aligned[0] <= aligned[1]

    def __gt__(self, other: object) -> bool:
        aligned = _align_operand(self, other)
        if aligned is None:
            return NotImplemented
        return aligned[0] > aligned[1]

    def __ge__(self, other: object) -> bool:
        aligned = _align_operand(self, other)
        if aligned is None:
            return NotImplemented
        return aligned[0] >= aligned[1]

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._coefficient != 0


def align(a: Number, b: Number) -> tuple[int, int, int]:
    """Bring two Numbers to a common scale.

    Returns:
        Tuple of (a coefficient, b coefficient, common scale), where both
        coefficients are expressed in units of 10**-scale
    """
    scale = max(a.scale, b.scale)
    return (
        a.coefficient * 10 ** (scale - a.scale),
        b.coefficient * 10 ** (scale - b.scale),
        scale,
    )


def _align_operand(number: Number, other: object) -> tuple[int, int, int] | None:
    """Align number with a Number or int operand; None for anything else."""
    if isinstance(other, int) and not isinstance(other, bool):
        other = Number(other)
    if not isinstance(other, Number):
        return None
    return align(number, other)


def _digits_to_int(digits: str) -> int:
    """Convert an unsigned ASCII digit string of any length to an int."""
    if len(digits) <= _CHUNK_DIGITS:
        return int(digits)
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def _int_to_digits(value: int) -> str:
    """Render a non-negative int of any size as decimal digits."""
    if value < _CHUNK_BASE:
        return str(value)
    chunks = []
    while value >= _CHUNK_BASE:
        value, low = divmod(value, _CHUNK_BASE)
        chunks.append(str(low).rjust(_CHUNK_DIGITS, "0"))
    chunks.append(str(value))
    return "".join(reversed(chunks))


def check_precision(precision: int) -> int:
    """Validate a requested precision.

    Raises:
        InvalidPrecision: If precision is not a non-negative int
    """
    if not isinstance(precision, int) or isinstance(precision, bool):
        raise InvalidPrecision(f"Precision must be an int, got {type(precision).__name__}")
    if precision < 0:
        raise InvalidPrecision(f"Precision cannot be negative: {precision}")
    return precision


__all__ = ["Number", "align", "check_precision"]
