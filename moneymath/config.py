"""Calculator configuration."""

import os
from dataclasses import dataclass

from moneymath.errors import InvalidPrecision
from moneymath.number import check_precision
from moneymath.rounding import DEFAULT_ROUNDING_MODE, RoundingMode

# Fractional digits kept by divide() and share() when no precision is given
DEFAULT_DIVISION_SCALE = 14

DIVISION_SCALE_ENV = "MONEYMATH_DIVISION_SCALE"
ROUNDING_MODE_ENV = "MONEYMATH_ROUNDING_MODE"


@dataclass(frozen=True)
class CalculatorConfig:
    """Centralized configuration for DecimalCalculator.

    The calculator never reads ambient state: every default it applies comes
    from the config it was built with, which keeps results reproducible in
    tests.

    Attributes:
        division_scale: Fractional digits used by divide() and share() when
            the caller does not pass a precision (default: 14)
        rounding_mode: Mode used by round() when the caller does not pass
            one (default: HALF_AWAY_FROM_ZERO)
    """

    division_scale: int = DEFAULT_DIVISION_SCALE
    rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE

    def __post_init__(self) -> None:
        check_precision(self.division_scale)
        # Accept the enum's string value as well as the member itself
        object.__setattr__(self, "rounding_mode", RoundingMode(self.rounding_mode))

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "CalculatorConfig":
        """Build a config from environment variables with sensible defaults.

        Configuration via environment variables:
        - MONEYMATH_DIVISION_SCALE: default division precision (default: 14)
        - MONEYMATH_ROUNDING_MODE: default rounding mode (default: half_away_from_zero)

        Raises:
            InvalidPrecision: If the division scale is not a non-negative integer
            ValueError: If the rounding mode is unknown
        """
        env = os.environ if environ is None else environ

        raw_scale = env.get(DIVISION_SCALE_ENV, str(DEFAULT_DIVISION_SCALE))
        try:
            division_scale = int(raw_scale)
        except ValueError as err:
            raise InvalidPrecision(f"{DIVISION_SCALE_ENV} must be an integer: {raw_scale!r}") from err

        rounding_mode = RoundingMode(env.get(ROUNDING_MODE_ENV, DEFAULT_ROUNDING_MODE.value).lower())
        return cls(division_scale=division_scale, rounding_mode=rounding_mode)


# Default configuration instance
DEFAULT_CALCULATOR_CONFIG = CalculatorConfig()
