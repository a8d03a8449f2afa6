"""
BigNum Constants — параметры десятичного типа

Все настраиваемые величины модуля собраны здесь как Final-константы.
Runtime-конфигурации нет: тип детерминирован и не зависит от окружения.
"""

from typing import Final

# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================

# Максимальное число значащих цифр частного при делении.
# Результат обрезается (truncation), а не округляется.
DEFAULT_DIVISION_PRECISION: Final[int] = 30


# =============================================================================
# СЕРИАЛИЗАЦИЯ
# =============================================================================

# Текстовое представление Undefined значения
UNDEFINED_STRING: Final[str] = "undefined"


# =============================================================================
# IEEE-754 BINARY64
# =============================================================================

DOUBLE_BIT_WIDTH: Final[int] = 64

# Смещение экспоненты (bias) для binary64
DOUBLE_EXPONENT_BIAS: Final[int] = 1023

# Ширина дробной части (без неявного старшего бита)
DOUBLE_FRACTION_BITS: Final[int] = 52

# Маска 11-битной смещённой экспоненты (bits 52-62)
DOUBLE_EXPONENT_MASK: Final[int] = 0x7FF

# Маска 52-битной дробной части (bits 0-51)
DOUBLE_FRACTION_MASK: Final[int] = (1 << DOUBLE_FRACTION_BITS) - 1

# Позиция знакового бита
DOUBLE_SIGN_SHIFT: Final[int] = 63

# Минимальная несмещённая экспонента для субнормальных чисел
DOUBLE_SUBNORMAL_EXPONENT: Final[int] = 1 - DOUBLE_EXPONENT_BIAS
