"""Decimal calculator facade.

DecimalCalculator is the public entry point: it accepts decimal strings (or
ints, or Numbers), parses every operand before doing any arithmetic, and
returns canonical decimal strings. The arithmetic itself lives in
moneymath.core, moneymath.rounding and moneymath.allocation.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from typing import Protocol

import structlog

from moneymath import allocation, core, rounding
from moneymath.config import DEFAULT_CALCULATOR_CONFIG, CalculatorConfig
from moneymath.errors import CalculatorError
from moneymath.number import Number
from moneymath.rounding import RoundingMode

logger = structlog.get_logger()

# Anything the calculator accepts as an operand
Operand = Number | str | int


class Calculator(Protocol):
    """Protocol for decimal calculators.

    DecimalCalculator is the only implementation. The protocol exists so
    that code depending on a calculator can be handed a different backend
    (or a test double) without caring how the arithmetic is done.
    """

    def add(self, a: Operand, b: Operand) -> str: ...

    def subtract(self, a: Operand, b: Operand) -> str: ...

    def multiply(self, a: Operand, b: Operand) -> str: ...

    def divide(self, a: Operand, b: Operand, precision: int | None = None) -> str: ...

    def compare(self, a: Operand, b: Operand) -> int: ...

    def round(
        self, number: Operand, precision: int = 0, mode: RoundingMode | str | None = None
    ) -> str: ...

    def absolute(self, number: Operand) -> str: ...

    def ceil(self, number: Operand) -> str: ...

    def floor(self, number: Operand) -> str: ...

    def mod(self, number: Operand, divisor: Operand) -> str: ...

    def share(
        self, amount: Operand, ratio: Operand, total: Operand, precision: int | None = None
    ) -> str: ...


@contextmanager
def _logged_failure(operation: str, **operands: object) -> Iterator[None]:
    """Log calculator errors at debug level, then let them propagate."""
    try:
        yield
    except CalculatorError as err:
        logger.debug(
            "calculator_operation_rejected",
            operation=operation,
            error=type(err).__name__,
            detail=str(err),
            **{name: repr(value) for name, value in operands.items()},
        )
        raise


class DecimalCalculator:
    """Exact decimal calculator over decimal strings.

    Stateless apart from its immutable config, so one instance can be shared
    freely between threads.

    Examples:
        calc = DecimalCalculator()
        calc.add("0.1", "0.2")            # "0.3"
        calc.divide("10", "3", 4)         # "3.3333"
        calc.round("-2.5")                # "-3"
        calc.allocate("100", ["1", "2"])  # ["33", "67"]
    """

    def __init__(self, config: CalculatorConfig | None = None):
        """Initialize with optional configuration.

        Args:
            config: Calculator configuration. Uses DEFAULT_CALCULATOR_CONFIG
                if not provided.
        """
        self.config = config or DEFAULT_CALCULATOR_CONFIG

    # --- Core arithmetic ---

    def add(self, a: Operand, b: Operand) -> str:
        """Exact sum. Keeps the larger of the two scales."""
        with _logged_failure("add", a=a, b=b):
            return str(core.add(Number.parse(a), Number.parse(b)))

    def subtract(self, a: Operand, b: Operand) -> str:
        """Exact difference. Keeps the larger of the two scales."""
        with _logged_failure("subtract", a=a, b=b):
            return str(core.subtract(Number.parse(a), Number.parse(b)))

    def multiply(self, a: Operand, b: Operand) -> str:
        """Exact product. The result scale is the sum of the operand scales."""
        with _logged_failure("multiply", a=a, b=b):
            return str(core.multiply(Number.parse(a), Number.parse(b)))

    def divide(self, a: Operand, b: Operand, precision: int | None = None) -> str:
        """Quotient truncated toward zero to `precision` fractional digits.

        Args:
            a: Dividend
            b: Divisor
            precision: Fractional digits to keep. Uses config.division_scale
                if not provided.

        Raises:
            DivisionByZero: If b is zero
            InvalidPrecision: If precision is negative
        """
        if precision is None:
            precision = self.config.division_scale
        with _logged_failure("divide", a=a, b=b, precision=precision):
            return str(core.divide(Number.parse(a), Number.parse(b), precision))

    def mod(self, number: Operand, divisor: Operand) -> str:
        """Remainder of floor division: number - divisor * floor(number / divisor).

        Raises:
            DivisionByZero: If divisor is zero
        """
        with _logged_failure("mod", number=number, divisor=divisor):
            return str(core.modulo(Number.parse(number), Number.parse(divisor)))

    def absolute(self, number: Operand) -> str:
        with _logged_failure("absolute", number=number):
            return str(core.absolute(Number.parse(number)))

    # --- Comparison ---

    def compare(self, a: Operand, b: Operand) -> int:
        """Compare by value: -1 if a < b, 0 if equal, 1 if a > b.

        Scale is irrelevant, so compare("1.0", "1.00") == 0.
        """
        with _logged_failure("compare", a=a, b=b):
            return core.compare(Number.parse(a), Number.parse(b))

    def greater_than(self, a: Operand, b: Operand) -> bool:
        return self.compare(a, b) > 0

    def greater_than_or_equal(self, a: Operand, b: Operand) -> bool:
        return self.compare(a, b) >= 0

    def less_than(self, a: Operand, b: Operand) -> bool:
        return self.compare(a, b) < 0

    def less_than_or_equal(self, a: Operand, b: Operand) -> bool:
        return self.compare(a, b) <= 0

    def is_negative(self, number: Operand) -> bool:
        return self.compare(number, 0) < 0

    def is_negative_or_zero(self, number: Operand) -> bool:
        return self.compare(number, 0) <= 0

    def is_positive(self, number: Operand) -> bool:
        """True unless number is negative. Zero counts as positive."""
        return not self.is_negative(number)

    def is_zero(self, number: Operand) -> bool:
        return self.compare(number, 0) == 0

    # --- Rounding ---

    def round(
        self,
        number: Operand,
        precision: int = 0,
        mode: RoundingMode | str | None = None,
    ) -> str:
        """Round to exactly `precision` fractional digits.

        Args:
            number: Value to round
            precision: Fractional digits in the result (default: 0)
            mode: Tie-breaking rule. Uses config.rounding_mode if not provided.

        Raises:
            InvalidPrecision: If precision is negative
        """
        if mode is None:
            mode = self.config.rounding_mode
        with _logged_failure("round", number=number, precision=precision):
            return str(rounding.round_number(Number.parse(number), precision, mode))

    def floor(self, number: Operand) -> str:
        with _logged_failure("floor", number=number):
            return str(rounding.floor(Number.parse(number)))

    def ceil(self, number: Operand) -> str:
        with _logged_failure("ceil", number=number):
            return str(rounding.ceil(Number.parse(number)))

    # --- Aggregates ---

    def share(
        self,
        amount: Operand,
        ratio: Operand,
        total: Operand,
        precision: int | None = None,
    ) -> str:
        """Proportional share amount * ratio / total, truncated like divide().

        Summing the shares of several buckets may fall short of amount by a
        few units of the last digit; use allocate() when the parts must add
        up exactly.

        Raises:
            DivisionByZero: If total is zero
        """
        if precision is None:
            precision = self.config.division_scale
        with _logged_failure("share", amount=amount, ratio=ratio, total=total):
            return str(
                allocation.share(
                    Number.parse(amount),
                    Number.parse(ratio),
                    Number.parse(total),
                    precision,
                )
            )

    def sum(self, numbers: Iterable[Operand]) -> str:
        """Sum of all numbers, "0" for an empty iterable.

        The iterable is consumed once; a malformed element raises before
        the sum is returned.
        """
        with _logged_failure("sum"):
            return str(allocation.sum_numbers(Number.parse(number) for number in numbers))

    def allocate(self, amount: Operand, ratios: Sequence[Operand], precision: int = 0) -> list[str]:
        """Split amount proportionally to ratios; the parts sum exactly to amount.

        Raises:
            InvalidRatios: If ratios is empty, negative, or sums to zero
        """
        with _logged_failure("allocate", amount=amount, ratios=ratios):
            parts = allocation.allocate(
                Number.parse(amount),
                [Number.parse(ratio) for ratio in ratios],
                precision,
            )
            return [str(part) for part in parts]

    def allocate_to(self, amount: Operand, count: int, precision: int = 0) -> list[str]:
        """Split amount into `count` near-equal parts that sum exactly to amount."""
        with _logged_failure("allocate_to", amount=amount, count=count):
            parts = allocation.allocate_to(Number.parse(amount), count, precision)
            return [str(part) for part in parts]


def _create_default_calculator() -> DecimalCalculator:
    """Create the calculator used by the package-level functions."""
    return DecimalCalculator(DEFAULT_CALCULATOR_CONFIG)


# Default calculator instance
default_calculator = _create_default_calculator()


def get_default_calculator() -> DecimalCalculator:
    """Return the shared default calculator."""
    return default_calculator


__all__ = [
    "Calculator",
    "DecimalCalculator",
    "Operand",
    "default_calculator",
    "get_default_calculator",
]
