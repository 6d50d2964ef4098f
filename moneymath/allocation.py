"""Proportional shares, summation and exact allocation.

share() answers "what is ratio/total of amount" for a single bucket and
truncates like divide(). Calling it once per bucket can lose units: with
precision 0, share(100, 1, 3) + share(100, 2, 3) = 33 + 66 = 99.

allocate() fixes that for a whole split. Each part is floored to the
smallest unit, then the leftover units are handed out one by one to the
parts whose floored-away fraction was largest (largest remainder method),
so the parts always add back up to the amount.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import structlog

from moneymath import core
from moneymath.errors import DivisionByZero, InvalidRatios
from moneymath.number import Number, check_precision

logger = structlog.get_logger()


def share(amount: Number, ratio: Number, total: Number, precision: int) -> Number:
    """Compute amount * ratio / total, truncated to `precision` digits.

    The product is exact; only the final division truncates.

    Raises:
        DivisionByZero: If total is zero
        InvalidPrecision: If precision is negative
    """
    check_precision(precision)
    if total.is_zero():
        raise DivisionByZero(f"Share with zero total: {amount} * {ratio} / {total}")
    return core.divide(core.multiply(amount, ratio), total, precision)


def sum_numbers(numbers: Iterable[Number]) -> Number:
    """Left fold of add() starting from zero. Empty input yields 0."""
    result = Number.zero()
    for number in numbers:
        result = core.add(result, number)
    return result


def allocate(amount: Number, ratios: Sequence[Number], precision: int = 0) -> list[Number]:
    """Split amount into parts proportional to ratios, conserving the total.

    Parts are expressed with p = max(precision, scale(amount)) fractional
    digits so the amount itself is always representable.

    Args:
        amount: Value to split (may be negative)
        ratios: Non-negative weights, at least one of them positive
        precision: Minimum fractional digits of each part

    Returns:
        One Number per ratio, all with scale p, summing exactly to amount

    Raises:
        InvalidRatios: If ratios is empty, has a negative entry, or sums to zero
        InvalidPrecision: If precision is negative
    """
    check_precision(precision)
    if not ratios:
        raise InvalidRatios("Cannot allocate over an empty list of ratios")
    for ratio in ratios:
        if ratio.is_negative():
            raise InvalidRatios(f"Allocation ratios cannot be negative: {ratio}")

    # Ratios on a common integer scale
    ratio_scale = max(ratio.scale for ratio in ratios)
    weights = [ratio.coefficient * 10 ** (ratio_scale - ratio.scale) for ratio in ratios]
    total = sum(weights)
    if total == 0:
        raise InvalidRatios("Allocation ratios must sum to a positive value")

    scale = max(precision, amount.scale)
    units = amount.coefficient * 10 ** (scale - amount.scale)

    # Floor division keeps every discarded fraction in [0, total) for either sign
    parts = [units * weight // total for weight in weights]
    fractions = [units * weight % total for weight in weights]

    leftover = units - sum(parts)
    if leftover:
        order = sorted(range(len(parts)), key=lambda i: (-fractions[i], i))
        for index in order[:leftover]:
            parts[index] += 1
        logger.debug(
            "allocation_leftover_distributed",
            amount=str(amount),
            parts=len(parts),
            leftover_units=leftover,
        )

    return [Number(part, scale) for part in parts]


def allocate_to(amount: Number, count: int, precision: int = 0) -> list[Number]:
    """Split amount into `count` near-equal parts that sum exactly to amount.

    Earlier parts receive the extra units: allocate_to(10, 3) is [4, 3, 3].

    Raises:
        InvalidRatios: If count is less than 1
    """
    if not isinstance(count, int) or isinstance(count, bool) or count < 1:
        raise InvalidRatios(f"Cannot allocate to {count!r} parts")
    return allocate(amount, [Number(1)] * count, precision)


__all__ = ["share", "sum_numbers", "allocate", "allocate_to"]
