"""Pydantic field types for decimal strings.

Callers that model money-like values with pydantic can declare fields as
DecimalString and get the calculator's input contract enforced at the
model boundary:

    class Invoice(BaseModel):
        total: DecimalString

    Invoice(total="007.50").total  # "7.50"
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from moneymath.errors import InvalidNumberFormat
from moneymath.number import Number


def validate_decimal_string(value: Any) -> str:
    """Validate that a value is an exact decimal and return its canonical string.

    Args:
        value: Decimal literal string, int, or Number

    Returns:
        Canonical decimal string (leading zeros removed, no "-0")

    Raises:
        ValueError: If value is not an exact decimal (floats included)
    """
    try:
        return str(Number.parse(value))
    except InvalidNumberFormat as err:
        # pydantic turns ValueError into a ValidationError; keep the detail
        raise ValueError(str(err)) from err


# Exact decimal as canonical string (validated)
DecimalString = Annotated[
    str,
    BeforeValidator(validate_decimal_string),
    Field(description="Exact decimal number as a string, e.g. '-12.50'"),
]

# Fractional digit count
Precision = Annotated[int, Field(ge=0, description="Number of fractional digits")]


__all__ = ["DecimalString", "Precision", "validate_decimal_string"]
