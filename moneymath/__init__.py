"""Exact decimal arithmetic for monetary calculations.

Values are decimal strings, never binary floats:

    import moneymath

    moneymath.add("0.1", "0.2")        # "0.3"
    moneymath.divide("10", "3", 4)     # "3.3333"
    moneymath.round("1.125", 2)        # "1.13"

The package-level functions are bound to a DecimalCalculator built with the
default configuration. Create a DecimalCalculator with a CalculatorConfig to
change the defaults.
"""

from moneymath.calculator import Calculator, DecimalCalculator, default_calculator, get_default_calculator
from moneymath.config import DEFAULT_CALCULATOR_CONFIG, CalculatorConfig
from moneymath.errors import (
    CalculatorError,
    DivisionByZero,
    InvalidNumberFormat,
    InvalidPrecision,
    InvalidRatios,
)
from moneymath.number import Number
from moneymath.rounding import RoundingMode

absolute = default_calculator.absolute
add = default_calculator.add
allocate = default_calculator.allocate
allocate_to = default_calculator.allocate_to
ceil = default_calculator.ceil
compare = default_calculator.compare
divide = default_calculator.divide
floor = default_calculator.floor
greater_than = default_calculator.greater_than
greater_than_or_equal = default_calculator.greater_than_or_equal
is_negative = default_calculator.is_negative
is_negative_or_zero = default_calculator.is_negative_or_zero
is_positive = default_calculator.is_positive
is_zero = default_calculator.is_zero
less_than = default_calculator.less_than
less_than_or_equal = default_calculator.less_than_or_equal
mod = default_calculator.mod
multiply = default_calculator.multiply
round = default_calculator.round  # noqa: A001
share = default_calculator.share
subtract = default_calculator.subtract
sum = default_calculator.sum  # noqa: A001

__version__ = "0.1.0"

# round and sum are left out so that star imports do not shadow the builtins
__all__ = [
    "Calculator",
    "DecimalCalculator",
    "CalculatorConfig",
    "DEFAULT_CALCULATOR_CONFIG",
    "Number",
    "RoundingMode",
    "CalculatorError",
    "DivisionByZero",
    "InvalidNumberFormat",
    "InvalidPrecision",
    "InvalidRatios",
    "default_calculator",
    "get_default_calculator",
    "absolute",
    "add",
    "allocate",
    "allocate_to",
    "ceil",
    "compare",
    "divide",
    "floor",
    "greater_than",
    "greater_than_or_equal",
    "is_negative",
    "is_negative_or_zero",
    "is_positive",
    "is_zero",
    "less_than",
    "less_than_or_equal",
    "mod",
    "multiply",
    "share",
    "subtract",
    "__version__",
]
