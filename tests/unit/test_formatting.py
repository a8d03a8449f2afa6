"""
Тесты для модуля Serializer

Проверяет:
1. Обычную десятичную запись (to_plain_string)
2. Научную запись (to_scientific_string)
3. Представление нуля и Undefined
"""

import pytest

from src.bignum.constants import UNDEFINED_STRING
from src.bignum.formatting import to_plain_string, to_scientific_string

# Длиннее лимита int<->str интерпретатора (4300 цифр)
LONG_ONES = (10**5000 - 1) // 9


class TestToPlainString:
    """Тесты для to_plain_string"""

    def test_undefined(self) -> None:
        assert to_plain_string(0, 0, undefined=True) == UNDEFINED_STRING

    def test_zero(self) -> None:
        assert to_plain_string(0, 0) == "0"

    def test_integer(self) -> None:
        assert to_plain_string(125, 0) == "125"
        assert to_plain_string(-7, 0) == "-7"

    def test_positive_exponent_appends_zeros(self) -> None:
        assert to_plain_string(-3, 2) == "-300"
        assert to_plain_string(1, 22) == "1" + "0" * 22

    def test_point_inside_digits(self) -> None:
        assert to_plain_string(125, -1) == "12.5"
        assert to_plain_string(-10001, -3) == "-10.001"

    def test_pure_fraction_padded(self) -> None:
        assert to_plain_string(125, -4) == "0.0125"
        assert to_plain_string(5, -1) == "0.5"
        assert to_plain_string(-5, -3) == "-0.005"
        assert to_plain_string(125, -3) == "0.125"

    def test_significand_trailing_zeros_trimmed(self) -> None:
        """Нули significand после точки не выводятся"""
        assert to_plain_string(1500, -3) == "1.5"
        assert to_plain_string(60, -1) == "6"
        assert to_plain_string(-100, -2) == "-1"
        assert to_plain_string(500, -4) == "0.05"

    def test_beyond_str_limit(self) -> None:
        assert to_plain_string(LONG_ONES, 0) == "1" * 5000
        assert to_plain_string(-LONG_ONES, -4999) == "-1." + "1" * 4999


class TestToScientificString:
    """Тесты для to_scientific_string"""

    def test_undefined(self) -> None:
        assert to_scientific_string(0, 0, undefined=True) == UNDEFINED_STRING

    def test_zero(self) -> None:
        assert to_scientific_string(0, 0) == "0.0e0"

    @pytest.mark.parametrize(
        "significand,exponent,expected",
        [
            (125, 0, "1.25e2"),
            (125, -4, "1.25e-2"),
            (5, 0, "5.0e0"),
            (-5, -3, "-5.0e-3"),
            (12, 2, "1.2e3"),
            (1500, -3, "1.5e0"),
            (10001, -3, "1.0001e1"),
        ],
    )
    def test_scientific_layout(self, significand: int, exponent: int, expected: str) -> None:
        assert to_scientific_string(significand, exponent) == expected

    def test_beyond_str_limit(self) -> None:
        assert to_scientific_string(LONG_ONES, 0) == "1." + "1" * 4999 + "e4999"
        assert to_scientific_string(-(10**4500), 0) == "-1.0e4500"
