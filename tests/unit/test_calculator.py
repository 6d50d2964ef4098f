"""Tests for the DecimalCalculator facade and package-level functions."""

import pytest
from structlog.testing import capture_logs

import moneymath
from moneymath import (
    CalculatorConfig,
    DecimalCalculator,
    DivisionByZero,
    InvalidNumberFormat,
    InvalidPrecision,
    InvalidRatios,
    Number,
    RoundingMode,
)
from moneymath.calculator import get_default_calculator


class TestArithmetic:
    """Tests for add, subtract, multiply, divide and mod."""

    def test_add(self, calc):
        assert calc.add("0.1", "0.2") == "0.3"
        assert calc.add("1.50", "1") == "2.50"

    def test_subtract(self, calc):
        assert calc.subtract("10", "0.01") == "9.99"

    def test_multiply(self, calc):
        assert calc.multiply("19.99", "3") == "59.97"

    def test_divide_with_precision(self, calc):
        assert calc.divide("10", "3", 4) == "3.3333"

    def test_divide_uses_configured_scale(self, calc, calc_scale_2):
        """Without a precision, divide uses config.division_scale."""
        assert calc.divide("1", "3") == "0." + "3" * 14
        assert calc_scale_2.divide("1", "3") == "0.33"

    def test_divide_by_zero(self, calc):
        with pytest.raises(DivisionByZero):
            calc.divide("10", "0", 2)

    def test_divide_negative_precision(self, calc):
        with pytest.raises(InvalidPrecision):
            calc.divide("10", "3", -1)

    def test_mod(self, calc):
        """mod is a true remainder, not floor."""
        assert calc.mod("10", "3") == "1"
        assert calc.mod("-7", "3") == "2"
        assert calc.mod("7.5", "2") == "1.5"

    def test_mod_by_zero(self, calc):
        with pytest.raises(DivisionByZero):
            calc.mod("10", "0.0")

    def test_absolute(self, calc):
        assert calc.absolute("-1.50") == "1.50"
        assert calc.absolute("-0") == "0"

    def test_accepts_ints_and_numbers(self, calc):
        """Operands may be ints or Numbers as well as strings."""
        assert calc.add(1, Number(25, 1)) == "3.5"

    def test_operands_beyond_int_conversion_limit(self, calc):
        """Results longer than 4300 digits are returned exactly."""
        long_fraction = "0." + "1" * 4400
        assert calc.add(long_fraction, "0") == long_fraction
        assert calc.multiply("9" * 2200, "9" * 2200) == "9" * 2199 + "8" + "0" * 2199 + "1"

    def test_canonical_output(self, calc):
        """Leading zeros are stripped and zero is unsigned."""
        assert calc.add("007.5", "0") == "7.5"
        assert calc.multiply("-0.5", "0") == "0.0"


class TestValidation:
    """Operands are validated before any arithmetic runs."""

    @pytest.mark.parametrize("bad", ["1e3", "abc", "", "1.", ".1", "+1"])
    def test_malformed_operand(self, calc, bad):
        with pytest.raises(InvalidNumberFormat):
            calc.add("1", bad)

    def test_float_operand(self, calc):
        with pytest.raises(InvalidNumberFormat):
            calc.multiply("1", 0.1)  # type: ignore

    def test_malformed_dividend_checked_before_zero_divisor(self, calc):
        """Format errors win over arithmetic errors."""
        with pytest.raises(InvalidNumberFormat):
            calc.divide("x", "0", 2)

    def test_rejection_is_logged(self, calc):
        """Rejected operations are logged at debug level before raising."""
        with capture_logs() as logs:
            with pytest.raises(DivisionByZero):
                calc.divide("10", "0", 2)
        assert len(logs) == 1
        entry = logs[0]
        assert entry["event"] == "calculator_operation_rejected"
        assert entry["log_level"] == "debug"
        assert entry["operation"] == "divide"
        assert entry["error"] == "DivisionByZero"
        assert entry["b"] == "'0'"


class TestComparison:
    """Tests for compare and the derived predicates."""

    def test_compare(self, calc):
        assert calc.compare("1.0", "1.00") == 0
        assert calc.compare("-1", "1") == -1
        assert calc.compare("2", "1.99") == 1

    @pytest.mark.parametrize(
        "a,b,gt,ge,lt,le",
        [
            ("2", "1", True, True, False, False),
            ("1", "2", False, False, True, True),
            ("1.0", "1", False, True, False, True),
            ("-0.01", "0", False, False, True, True),
        ],
    )
    def test_ordering_predicates(self, calc, a, b, gt, ge, lt, le):
        assert calc.greater_than(a, b) is gt
        assert calc.greater_than_or_equal(a, b) is ge
        assert calc.less_than(a, b) is lt
        assert calc.less_than_or_equal(a, b) is le

    @pytest.mark.parametrize(
        "number,negative,negative_or_zero,positive,zero",
        [
            ("-1", True, True, False, False),
            ("-0.001", True, True, False, False),
            ("0", False, True, True, True),
            ("-0.00", False, True, True, True),
            ("0.001", False, False, True, False),
        ],
    )
    def test_sign_predicates(self, calc, number, negative, negative_or_zero, positive, zero):
        """is_positive is 'not negative', so zero counts as positive."""
        assert calc.is_negative(number) is negative
        assert calc.is_negative_or_zero(number) is negative_or_zero
        assert calc.is_positive(number) is positive
        assert calc.is_zero(number) is zero

    def test_predicates_reject_malformed_input(self, calc):
        with pytest.raises(InvalidNumberFormat):
            calc.is_negative("minus one")


class TestRounding:
    """Tests for round, floor and ceil."""

    def test_round(self, calc):
        assert calc.round("2.5") == "3"
        assert calc.round("-2.5") == "-3"
        assert calc.round("1.125", 2) == "1.13"

    def test_round_explicit_mode(self, calc):
        assert calc.round("-1.125", 2, RoundingMode.HALF_AWAY_FROM_ZERO) == "-1.13"

    def test_round_unknown_mode(self, calc):
        with pytest.raises(ValueError):
            calc.round("1.5", 0, "half_even")

    def test_round_negative_precision(self, calc):
        with pytest.raises(InvalidPrecision):
            calc.round("1.5", -1)

    def test_floor_ceil(self, calc):
        assert calc.floor("-1.5") == "-2"
        assert calc.ceil("-1.5") == "-1"
        assert calc.floor("1.5") == "1"
        assert calc.ceil("1.5") == "2"


class TestAggregates:
    """Tests for share, sum, allocate and allocate_to."""

    def test_share_residual(self, calc):
        """Per-bucket shares of a 1:2 split of 100 fall one unit short."""
        parts = [calc.share("100", "1", "3", 0), calc.share("100", "2", "3", 0)]
        assert parts == ["33", "66"]
        assert calc.sum(parts) == "99"

    def test_share_truncates_toward_zero(self, calc):
        """Negative shares truncate like divide rather than flooring."""
        assert calc.share("-100", "1", "3", 0) == "-33"
        assert calc.share("100", "1", "3") == "33." + "3" * 14

    def test_share_uses_configured_scale(self, calc_scale_2):
        assert calc_scale_2.share("100", "1", "3") == "33.33"

    def test_share_zero_total(self, calc):
        with pytest.raises(DivisionByZero):
            calc.share("100", "1", "0")

    def test_sum(self, calc):
        assert calc.sum([]) == "0"
        assert calc.sum(["0.1"] * 3) == "0.3"
        assert calc.sum(iter(["1", "2.5", "-0.25"])) == "3.25"

    def test_sum_rejects_malformed_element(self, calc):
        with pytest.raises(InvalidNumberFormat):
            calc.sum(["1", "two", "3"])

    def test_allocate(self, calc):
        parts = calc.allocate("100", ["1", "2"])
        assert parts == ["33", "67"]
        assert calc.sum(parts) == "100"

    def test_allocate_invalid_ratios(self, calc):
        with pytest.raises(InvalidRatios):
            calc.allocate("100", ["-1", "2"])

    def test_allocate_to(self, calc):
        assert calc.allocate_to("0.10", 3) == ["0.04", "0.03", "0.03"]


class TestConfiguration:
    """Tests for calculator configuration wiring."""

    def test_default_config(self, calc):
        assert calc.config == CalculatorConfig()

    def test_default_calculator_is_shared(self):
        assert get_default_calculator() is moneymath.default_calculator

    def test_custom_config(self):
        calc = DecimalCalculator(CalculatorConfig(division_scale=0))
        assert calc.divide("7", "2") == "3"


class TestPackageFunctions:
    """Package-level functions delegate to the default calculator."""

    def test_scenarios(self):
        assert moneymath.add("0.1", "0.2") == "0.3"
        assert moneymath.subtract("1", "0.1") == "0.9"
        assert moneymath.multiply("1.1", "1.1") == "1.21"
        assert moneymath.divide("10", "3", 4) == "3.3333"
        assert moneymath.round("1.125", 2) == "1.13"
        assert moneymath.floor("-1.5") == "-2"
        assert moneymath.ceil("-1.5") == "-1"
        assert moneymath.mod("10", "3") == "1"
        assert moneymath.absolute("-3") == "3"
        assert moneymath.sum([]) == "0"
        assert moneymath.share("100", "1", "4", 2) == "25.00"
        assert moneymath.compare("1.0", "1.00") == 0
        assert moneymath.is_positive("0")
        assert moneymath.is_negative_or_zero("0")
        assert not moneymath.is_negative("0")
        assert moneymath.is_zero("0.00")
        assert moneymath.greater_than("2", "1")
        assert moneymath.greater_than_or_equal("2", "2.0")
        assert moneymath.less_than("1", "2")
        assert moneymath.less_than_or_equal("2", "2.00")
        assert moneymath.allocate("10", ["1", "1"]) == ["5", "5"]
        assert moneymath.allocate_to("10", 4) == ["3", "3", "2", "2"]

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZero):
            moneymath.divide("10", "0", 2)

    def test_star_import_keeps_builtins(self):
        """round and sum are not part of __all__."""
        assert "round" not in moneymath.__all__
        assert "sum" not in moneymath.__all__
