"""
Arithmetic Engine — точная десятичная арифметика

Все функции работают с каноническими парами (significand, exponent):
    value = significand × 10^exponent

- Сложение/вычитание: выравнивание экспонент до меньшей, затем сложение целых
- Умножение: произведение significand, сумма exponent (всегда точно)
- Деление: long division по основанию 10 с ограничением числа значащих цифр
- Сравнение: знак разности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нулевой результат всегда имеет exponent == 0
2. Сложение, вычитание и умножение никогда не теряют точность
3. Деление обрезает (truncation) результат после precision значащих цифр,
   никогда не округляет
4. Функции чистые: нет состояния, нет побочных эффектов
"""

import logging
import sys
from decimal import Decimal
from typing import NamedTuple

from src.bignum.constants import DEFAULT_DIVISION_PRECISION

logger = logging.getLogger(__name__)


class Quotient(NamedTuple):
    """
    Результат деления.

    precise=True означает, что остаток обнулился в пределах precision цифр,
    т.е. частное точное.
    """

    significand: int
    exponent: int
    precise: bool


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def canonical(significand: int, exponent: int) -> tuple[int, int]:
    """Каноническая пара: у нуля нет остаточного масштаба."""
    if significand == 0:
        return 0, 0
    return significand, exponent


def digit_count(value: int) -> int:
    """
    Количество десятичных цифр в abs(value).

    Эквивалентно len(str(abs(value))), но не ограничено лимитом
    int→str конвертации интерпретатора.

    Examples:
        >>> digit_count(0)
        1
        >>> digit_count(-12345)
        5
    """
    value = abs(value)
    if value < 10:
        return 1

    # Нижняя оценка через bit_length, затем точная подстройка
    estimate = (value.bit_length() - 1) * 30102999 // 100000000 + 1
    while value >= 10**estimate:
        estimate += 1
    return estimate


def digits_to_int(digits: str) -> int:
    """
    Целое из строки десятичных цифр любой длины.

    Разбор идёт через decimal.Decimal: у int() есть лимит длины
    строки интерпретатора (sys.get_int_max_str_digits).

    Examples:
        >>> digits_to_int("00125")
        125
    """
    return int(Decimal(digits))


def int_to_digits(value: int) -> str:
    """
    Десятичные цифры abs(value) любой длины (без знака).

    Examples:
        >>> int_to_digits(-125)
        '125'
    """
    return str(Decimal(abs(value)))


def numeric_hash(significand: int, exponent: int) -> int:
    """
    Hash значения significand × 10^exponent по алгоритму хеширования
    чисел Python (sys.hash_info.modulus).

    Совпадает с hash() равного int, float, Fraction и Decimal.

    Examples:
        >>> numeric_hash(5, -1) == hash(0.5)
        True
        >>> numeric_hash(1, 40) == hash(10**40)
        True
    """
    modulus = sys.hash_info.modulus

    if exponent >= 0:
        scale = pow(10, exponent, modulus)
    else:
        scale = pow(pow(10, -exponent, modulus), -1, modulus)

    result = abs(significand) % modulus * scale % modulus
    if significand < 0:
        result = -result
    if result == -1:
        result = -2
    return result


def strip_trailing_zeros(significand: int, exponent: int) -> tuple[int, int]:
    """
    Перенос хвостовых нулей significand в exponent.

    Examples:
        >>> strip_trailing_zeros(1500, -3)
        (15, -1)
        >>> strip_trailing_zeros(0, 7)
        (0, 0)
    """
    if significand == 0:
        return 0, 0

    while significand % 10 == 0:
        significand //= 10
        exponent += 1
    return significand, exponent


def _align(
    lhs_sig: int, lhs_exp: int, rhs_sig: int, rhs_exp: int
) -> tuple[int, int, int]:
    # Операнд с большей экспонентой масштабируется до меньшей
    if lhs_exp > rhs_exp:
        return lhs_sig * 10 ** (lhs_exp - rhs_exp), rhs_sig, rhs_exp
    return lhs_sig, rhs_sig * 10 ** (rhs_exp - lhs_exp), lhs_exp


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def add(lhs_sig: int, lhs_exp: int, rhs_sig: int, rhs_exp: int) -> tuple[int, int]:
    """
    Точное сложение.

    Examples:
        >>> add(15, -1, 2, 0)  # 1.5 + 2
        (35, -1)
    """
    lhs, rhs, exponent = _align(lhs_sig, lhs_exp, rhs_sig, rhs_exp)
    return canonical(lhs + rhs, exponent)


def subtract(
    lhs_sig: int, lhs_exp: int, rhs_sig: int, rhs_exp: int
) -> tuple[int, int]:
    """
    Точное вычитание (lhs - rhs).

    Examples:
        >>> subtract(1, 0, 25, -1)  # 1 - 2.5
        (-15, -1)
    """
    lhs, rhs, exponent = _align(lhs_sig, lhs_exp, rhs_sig, rhs_exp)
    return canonical(lhs - rhs, exponent)


def multiply(
    lhs_sig: int, lhs_exp: int, rhs_sig: int, rhs_exp: int
) -> tuple[int, int]:
    """
    Точное умножение.

    Examples:
        >>> multiply(15, -1, 4, 0)  # 1.5 * 4
        (60, -1)
    """
    return canonical(lhs_sig * rhs_sig, lhs_exp + rhs_exp)


def divide(
    lhs_sig: int,
    lhs_exp: int,
    rhs_sig: int,
    rhs_exp: int,
    precision: int = DEFAULT_DIVISION_PRECISION,
) -> Quotient:
    """
    Деление столбиком по основанию 10.

    Сначала вычисляется целая часть частного, затем цифры дробной части
    по одной, пока остаток не обнулится или число значащих цифр частного
    не достигнет precision. Ведущие нули частного в precision не входят.

    Args:
        lhs_sig, lhs_exp: Делимое
        rhs_sig, rhs_exp: Делитель
        precision: Максимум значащих цифр частного (default: 30)

    Returns:
        Quotient(significand, exponent, precise)

    Raises:
        ZeroDivisionError: Если rhs_sig == 0
        ValueError: Если precision < 1

    Examples:
        >>> divide(1, 0, 2, 0)
        Quotient(significand=5, exponent=-1, precise=True)
        >>> divide(1, 0, 3, 0, precision=5)
        Quotient(significand=33333, exponent=-5, precise=False)
    """
    if rhs_sig == 0:
        raise ZeroDivisionError("division by zero")

    if precision < 1:
        raise ValueError(f"precision must be positive, got {precision}")

    negative = (lhs_sig < 0) != (rhs_sig < 0)
    divisor = abs(rhs_sig)

    quotient, remainder = divmod(abs(lhs_sig), divisor)
    digits = digit_count(quotient) if quotient else 0
    fraction_digits = 0

    while remainder and digits < precision:
        digit, remainder = divmod(remainder * 10, divisor)
        quotient = quotient * 10 + digit
        fraction_digits += 1
        if quotient:
            digits += 1

    precise = remainder == 0
    if not precise:
        logger.debug(
            "division truncated at %d significant digits (precision=%d)",
            digits,
            precision,
        )

    if negative:
        quotient = -quotient

    significand, exponent = canonical(quotient, lhs_exp - rhs_exp - fraction_digits)
    return Quotient(significand, exponent, precise)


def compare(lhs_sig: int, lhs_exp: int, rhs_sig: int, rhs_exp: int) -> int:
    """
    Сравнение через знак разности.

    Returns:
        -1 если lhs < rhs, 0 если равны, +1 если lhs > rhs
    """
    difference, _ = subtract(lhs_sig, lhs_exp, rhs_sig, rhs_exp)

    if difference == 0:
        return 0
    elif difference < 0:
        return -1
    else:
        return 1


def pow2(exponent: int) -> tuple[int, int]:
    """
    Точная степень двойки 2^exponent.

    Отрицательная степень вычисляется как 1 / 2^(-exponent) делением
    столбиком. Дробь 1/2^n всегда имеет ровно n цифр после точки,
    поэтому precision выбирается достаточным для точного результата.

    Examples:
        >>> pow2(3)
        (8, 0)
        >>> pow2(-2)
        (25, -2)
    """
    if exponent >= 0:
        return 2**exponent, 0

    quotient = divide(1, 0, 2**-exponent, 0, precision=-exponent + 1)
    return quotient.significand, quotient.exponent
