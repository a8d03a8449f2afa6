"""
IEEE-754 Double Decoder — точное десятичное разложение binary64

Восстанавливает точное десятичное значение double по его битовому образу:
    value = (-1)^sign × fraction × 2^(exponent - 52)

Каждое конечное binary64 число имеет конечное десятичное разложение,
поэтому результат точный, без округления.

Структура binary64:
- bit 63: знак
- bits 52-62: смещённая экспонента (bias 1023)
- bits 0-51: дробная часть (неявный старший бит у нормализованных чисел)

ИЗВЕСТНАЯ ОСОБЕННОСТЬ:
    Образ с нулевыми экспонентой и дробной частью (±0.0) декодируется
    в модуль 1, а не 0. Поведение сохранено намеренно; обработку нуля
    выполняет вызывающая сторона (BigNum.from_double).
"""

import struct
from collections.abc import Sequence
from typing import NamedTuple

from src.bignum.arithmetic import multiply, pow2, strip_trailing_zeros
from src.bignum.constants import (
    DOUBLE_BIT_WIDTH,
    DOUBLE_EXPONENT_BIAS,
    DOUBLE_EXPONENT_MASK,
    DOUBLE_FRACTION_BITS,
    DOUBLE_FRACTION_MASK,
    DOUBLE_SIGN_SHIFT,
    DOUBLE_SUBNORMAL_EXPONENT,
)
from src.bignum.errors import FormatError
from src.bignum.guards import require_argument


class DoubleFields(NamedTuple):
    """Поля binary64 без интерпретации."""

    sign: int
    biased_exponent: int
    fraction: int


# =============================================================================
# ИЗВЛЕЧЕНИЕ БИТОВ
# =============================================================================


def double_to_bits(value: float) -> int:
    """
    64-битный образ double как беззнаковое целое.

    Examples:
        >>> hex(double_to_bits(1.0))
        '0x3ff0000000000000'
    """
    return struct.unpack(">Q", struct.pack(">d", value))[0]


def split_double_bits(bits: int) -> DoubleFields:
    """
    Разбор 64-битного образа на знак, смещённую экспоненту и дробь.

    Raises:
        ValueError: Если bits вне диапазона [0, 2^64)
    """
    if not 0 <= bits < 1 << DOUBLE_BIT_WIDTH:
        raise ValueError(f"bits must fit in {DOUBLE_BIT_WIDTH} bits, got {bits:#x}")

    return DoubleFields(
        sign=(bits >> DOUBLE_SIGN_SHIFT) & 0x1,
        biased_exponent=(bits >> DOUBLE_FRACTION_BITS) & DOUBLE_EXPONENT_MASK,
        fraction=bits & DOUBLE_FRACTION_MASK,
    )


def is_finite_bits(bits: int) -> bool:
    """False для NaN и ±Inf (экспонента из одних единиц)."""
    return split_double_bits(bits).biased_exponent != DOUBLE_EXPONENT_MASK


def bits_to_integer(bits: Sequence[int], signed: bool = False) -> int:
    """
    Сборка целого из последовательности битов (старший бит первым).

    Биты разворачиваются в порядок little-endian и собираются в целое.
    При signed=True старший бит трактуется как знаковый (two's complement
    ширины len(bits)).

    Args:
        bits: Последовательность 0/1 (или bool), MSB first
        signed: Интерпретировать как знаковое

    Returns:
        Целое значение

    Raises:
        NullArgumentError: Если bits is None
        FormatError: Если элемент не 0/1

    Examples:
        >>> bits_to_integer([1, 0, 1])
        5
        >>> bits_to_integer([1, 0, 1], signed=True)
        -3
    """
    require_argument(bits, "bits")

    value = 0
    for position, bit in enumerate(reversed(bits)):
        if bit not in (0, 1):
            raise FormatError(f"bit sequence may only contain 0/1, got {bit!r}")
        if bit:
            value |= 1 << position

    if signed and bits and bits[0]:
        value -= 1 << len(bits)

    return value


# =============================================================================
# ДЕКОДИРОВАНИЕ
# =============================================================================


def decode_bits(bits: int) -> tuple[int, int]:
    """
    Точное десятичное значение конечного binary64 образа.

    Алгоритм:
        1. Разбор на sign / biased_exponent / fraction
        2. Нормализованное число: fraction |= 2^52, exp = biased - 1023
           Субнормальное: exp = -1022, без неявного бита
        3. value = fraction × Pow2(exp - 52), Pow2 отрицательной степени
           считается делением 1 / 2^n
        4. Хвостовые нули significand переносятся в exponent

    Args:
        bits: 64-битный образ

    Returns:
        (significand, exponent)

    Raises:
        ValueError: Если образ не конечен (NaN/Inf) или не влезает в 64 бита

    Examples:
        >>> decode_bits(double_to_bits(0.5))
        (5, -1)
        >>> decode_bits(double_to_bits(-2.0))
        (-2, 0)
    """
    sign, biased_exponent, fraction = split_double_bits(bits)

    if biased_exponent == DOUBLE_EXPONENT_MASK:
        raise ValueError(f"bit pattern {bits:#018x} is not finite")

    if biased_exponent == 0 and fraction == 0:
        # ±0.0 → модуль 1 (см. docstring модуля)
        significand, exponent = 1, 0
    else:
        if biased_exponent == 0:
            binary_exponent = DOUBLE_SUBNORMAL_EXPONENT
        else:
            binary_exponent = biased_exponent - DOUBLE_EXPONENT_BIAS
            fraction |= 1 << DOUBLE_FRACTION_BITS

        scale_sig, scale_exp = pow2(binary_exponent - DOUBLE_FRACTION_BITS)
        significand, exponent = multiply(fraction, 0, scale_sig, scale_exp)
        significand, exponent = strip_trailing_zeros(significand, exponent)

    if sign:
        significand = -significand

    return significand, exponent
