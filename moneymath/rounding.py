"""Precision-aware rounding, floor and ceiling."""

from __future__ import annotations

from enum import Enum

from moneymath.number import Number, check_precision


class RoundingMode(Enum):
    """Tie-breaking rule used when a value lies exactly between two results.

    HALF_AWAY_FROM_ZERO is conventional "round half up" applied to the
    magnitude: 2.5 -> 3 and -2.5 -> -3.
    """

    HALF_AWAY_FROM_ZERO = "half_away_from_zero"


DEFAULT_ROUNDING_MODE = RoundingMode.HALF_AWAY_FROM_ZERO


def round_number(
    number: Number,
    precision: int = 0,
    mode: RoundingMode | str = DEFAULT_ROUNDING_MODE,
) -> Number:
    """Round to exactly `precision` fractional digits.

    Digits beyond the precision are dropped from the magnitude; if the
    dropped part is at least half a unit the magnitude goes up by one unit.
    The sign is reapplied afterwards, so negatives mirror positives.

    Operands with fewer fractional digits than requested are padded with
    zeros: round_number(Number("3"), 2) is 3.00.

    Args:
        number: Value to round
        precision: Fractional digits in the result (>= 0)
        mode: A RoundingMode member or its string value

    Returns:
        Number with scale == precision

    Raises:
        InvalidPrecision: If precision is negative
        ValueError: If mode is not a known RoundingMode
    """
    check_precision(precision)
    mode = RoundingMode(mode)

    drop = number.scale - precision
    if drop <= 0:
        return number.with_scale(precision)

    unit = 10**drop
    magnitude, remainder = divmod(abs(number.coefficient), unit)
    if mode is RoundingMode.HALF_AWAY_FROM_ZERO and 2 * remainder >= unit:
        magnitude += 1

    return Number(-magnitude if number.is_negative() else magnitude, precision)


def floor(number: Number) -> Number:
    """Greatest integer less than or equal to number."""
    return Number(number.coefficient // 10**number.scale)


def ceil(number: Number) -> Number:
    """Least integer greater than or equal to number."""
    return Number(-(-number.coefficient // 10**number.scale))


__all__ = [
    "RoundingMode",
    "DEFAULT_ROUNDING_MODE",
    "round_number",
    "floor",
    "ceil",
]
