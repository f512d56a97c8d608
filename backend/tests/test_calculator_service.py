"""
Rocks API — Calculator Unit Tests
===================================

What:  Tests for operand coercion, operator dispatch and result formatting.
"""

import math

import pytest

from rocks_api.models.operator import OPERATIONS, Operator
from rocks_api.services.calculator_service import format_number, to_number


class TestOperator:

    def test_every_member_has_an_operation(self):
        """The operator-to-function mapping is total."""
        assert set(OPERATIONS) == set(Operator)

    def test_parse_known(self):
        assert Operator.parse("divide") is Operator.DIVIDE

    @pytest.mark.parametrize("value", ["foo", "ADD", "", "add "])
    def test_parse_unknown(self, value):
        assert Operator.parse(value) is None

    def test_divide_by_zero(self):
        assert Operator.DIVIDE.apply(10, 0) == math.inf
        assert Operator.DIVIDE.apply(-10, 0) == -math.inf
        assert Operator.DIVIDE.apply(10, -0.0) == -math.inf
        assert math.isnan(Operator.DIVIDE.apply(0, 0))


class TestToNumber:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("2", 2.0),
            ("  2  ", 2.0),
            ("-3.5", -3.5),
            ("+4", 4.0),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("", 0.0),
            ("   ", 0.0),
            ("0x10", 16.0),
            ("0b101", 5.0),
            ("0o17", 15.0),
            ("Infinity", math.inf),
            ("-Infinity", -math.inf),
            ("\ufeff5", 5.0),
            ("\u30005\u2028", 5.0),
            ("\u00a0-2\t", -2.0),
        ],
    )
    def test_numeric_strings(self, raw, expected):
        assert to_number(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [None, "abc", "2abc", "inf", "nan", "1_000", "0x", "0x+1", "1,5", "٣", "\x1c5", "5\x85"],
    )
    def test_non_numeric_strings_are_nan(self, raw):
        assert math.isnan(to_number(raw))


class TestFormatNumber:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (5.0, "5"),
            (-1.0, "-1"),
            (-0.0, "0"),
            (0.25, "0.25"),
            (0.1 + 0.2, "0.30000000000000004"),
            (1e20, "100000000000000000000"),
            (2.0 ** 53, "9007199254740992"),
            (2.0 ** 60, "1152921504606847000"),
            (123456789012345678901.0, "123456789012345680000"),
            (-123456789012345678901.0, "-123456789012345680000"),
            (1e21, "1e+21"),
            (1.5e-5, "0.000015"),
            (1e-7, "1e-7"),
            (math.inf, "Infinity"),
            (-math.inf, "-Infinity"),
            (math.nan, "NaN"),
        ],
    )
    def test_formats_like_javascript(self, value, expected):
        assert format_number(value) == expected


class TestCalculate:

    def test_add(self, calculator):
        calculation = calculator.calculate("add", "2", "3")

        assert calculation.result == 5
        assert calculation.summary == "The result of 2 add 3 is 5"

    def test_unknown_operator_ignores_operands(self, calculator):
        """Even NaN operands give 0 for an unknown operator."""
        calculation = calculator.calculate("power", "x", None)

        assert calculation.result == 0
        assert calculation.summary == "The result of x power  is 0"

    def test_summary_echoes_raw_operands(self, calculator):
        calculation = calculator.calculate("add", " 2 ", "0x1")

        assert calculation.summary == "The result of  2  add 0x1 is 3"
