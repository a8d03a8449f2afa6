"""
BigNum — неизменяемое десятичное число произвольной точности

Каноническая форма:
    value = significand × 10^exponent

где significand — целое произвольной длины со знаком, exponent — целое.
Отдельный флаг is_undefined помечает результат, не имеющий числового
значения (NaN/±Inf на входе, деление на ноль).

Immutable Pydantic модель (frozen=True): все операции возвращают новый
экземпляр, операнды не изменяются.

ПРОТОКОЛ UNDEFINED:
1. + - * / с Undefined операндом → Undefined (без исключения)
2. < и > с Undefined операндом → False
3. <=, >= и == : два Undefined равны, Undefined и Defined не равны
4. is_negative / is_zero / sign на Undefined → InvalidStateError
"""

import logging
import math
from collections.abc import Sequence
from typing import Any, NamedTuple, Union

from pydantic import BaseModel, Field, model_validator

from src.bignum import arithmetic
from src.bignum.constants import DOUBLE_BIT_WIDTH
from src.bignum.errors import FormatError
from src.bignum.formatting import to_plain_string, to_scientific_string
from src.bignum.guards import require_argument, require_defined
from src.bignum.ieee754 import bits_to_integer, decode_bits, double_to_bits, is_finite_bits
from src.bignum.parser import parse_decimal

logger = logging.getLogger(__name__)

Operand = Union["BigNum", str, int, float]


class DivisionResult(NamedTuple):
    """Частное и признак точности (остаток обнулился в пределах precision)."""

    value: "BigNum"
    precise: bool


# =============================================================================
# BIGNUM MODEL
# =============================================================================


class BigNum(BaseModel):
    """
    Десятичное число произвольной точности.

    Конструкторы:
        BigNum(significand=125, exponent=-2)   # 1.25
        BigNum.parse("1.25"), BigNum.parse("1.25E0")
        BigNum.from_double(1.25)               # точное разложение битов
        BigNum.from_double(0.1, use_textual=True)
        BigNum.undefined()

    Операторы принимают BigNum, str, int и float с любой стороны.
    """

    significand: int = Field(default=0, strict=True, description="Цифры числа со знаком")
    exponent: int = Field(default=0, strict=True, description="Степень десяти")
    is_undefined: bool = Field(
        default=False, strict=True, description="Нет числового значения (NaN/Inf/x÷0)"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="before")
    @classmethod
    def normalize_scale(cls, data: Any) -> Any:
        """
        Каноническая форма: у нуля и Undefined нет остаточного масштаба.
        """
        if not isinstance(data, dict):
            return data

        if data.get("is_undefined") is True:
            return {**data, "significand": 0, "exponent": 0}

        if data.get("significand", 0) == 0:
            return {**data, "exponent": 0}

        return data

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def parse(cls, text: str) -> "BigNum":
        """
        Разбор десятичного или научного литерала.

        Raises:
            NullArgumentError: Если text is None
            FormatError: Если литерал невалиден
        """
        significand, exponent = parse_decimal(text)
        return cls(significand=significand, exponent=exponent)

    @classmethod
    def from_double(cls, value: float, use_textual: bool = False) -> "BigNum":
        """
        Конструирование из double.

        Args:
            value: Исходное значение
            use_textual: True → разбор repr(value) (кратчайший текст,
                не гарантирует точность битов); False → точное
                разложение битового образа

        Returns:
            BigNum; NaN/±Inf → Undefined на обоих путях

        Raises:
            TypeError: Если value не int/float
            FormatError: Если int не представим как double
        """
        require_argument(value, "value")

        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"expected float, got {type(value).__name__}")
        try:
            value = float(value)
        except OverflowError as e:
            raise FormatError("integer is out of double range") from e

        if not math.isfinite(value):
            logger.debug("non-finite double %r mapped to undefined", value)
            return cls.undefined()

        if value == 0.0:
            # Битовый декодер даёт модуль 1 для ±0.0
            return cls()

        if use_textual:
            return cls.parse(repr(value))

        return cls.from_bits(double_to_bits(value))

    @classmethod
    def from_bits(cls, bits: int) -> "BigNum":
        """
        Точное значение 64-битного образа binary64.

        Образ ±0.0 декодируется в ±1 (поведение декодера сохранено);
        для корректного нуля используйте from_double.
        """
        require_argument(bits, "bits")

        if not is_finite_bits(bits):
            logger.debug("non-finite bit pattern %#018x mapped to undefined", bits)
            return cls.undefined()

        significand, exponent = decode_bits(bits)
        return cls(significand=significand, exponent=exponent)

    @classmethod
    def from_bit_sequence(cls, bits: Sequence[int]) -> "BigNum":
        """
        Значение binary64, заданного последовательностью из 64 битов (MSB first).

        Raises:
            NullArgumentError: Если bits is None
            FormatError: Если длина не 64 или элементы не 0/1
        """
        require_argument(bits, "bits")

        if len(bits) != DOUBLE_BIT_WIDTH:
            raise FormatError(f"expected {DOUBLE_BIT_WIDTH} bits, got {len(bits)}")

        return cls.from_bits(bits_to_integer(bits))

    @classmethod
    def undefined(cls) -> "BigNum":
        """Undefined значение."""
        return cls(is_undefined=True)

    @classmethod
    def pow2(cls, exponent: int) -> "BigNum":
        """Точная степень двойки 2^exponent (в том числе отрицательная)."""
        require_argument(exponent, "exponent")
        significand, exp10 = arithmetic.pow2(exponent)
        return cls(significand=significand, exponent=exp10)

    @classmethod
    def coerce(cls, value: Operand) -> "BigNum":
        """
        Явное преобразование операнда в BigNum.

        - BigNum → без изменений
        - str → parse
        - int → точное целое
        - float → from_double (точное разложение битов)

        Raises:
            NullArgumentError: Если value is None
            TypeError: Если тип не поддерживается
        """
        require_argument(value, "value")

        if isinstance(value, BigNum):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, bool):
            raise TypeError("bool is not a numeric operand for BigNum")
        if isinstance(value, int):
            return cls(significand=value)
        if isinstance(value, float):
            return cls.from_double(value)

        raise TypeError(f"cannot convert {type(value).__name__} to BigNum")

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def is_negative(self) -> bool:
        require_defined(self, "BigNum")
        return self.significand < 0

    @property
    def is_zero(self) -> bool:
        require_defined(self, "BigNum")
        return self.significand == 0

    @property
    def sign(self) -> int:
        """-1, 0 или +1."""
        require_defined(self, "BigNum")
        return (self.significand > 0) - (self.significand < 0)

    # =========================================================================
    # СЕРИАЛИЗАЦИЯ
    # =========================================================================

    def to_plain_string(self) -> str:
        """Точная десятичная запись ("undefined" для Undefined)."""
        return to_plain_string(self.significand, self.exponent, self.is_undefined)

    def to_scientific_string(self) -> str:
        """Научная запись ("undefined" для Undefined)."""
        return to_scientific_string(self.significand, self.exponent, self.is_undefined)

    def __str__(self) -> str:
        return self.to_plain_string()

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def _operand(self, other: Any) -> "BigNum":
        require_argument(other, "other")
        if isinstance(other, bool) or not isinstance(other, (BigNum, str, int, float)):
            return NotImplemented
        return BigNum.coerce(other)

    def _combine(self, other: "BigNum", operation) -> "BigNum":
        if self.is_undefined or other.is_undefined:
            return BigNum.undefined()
        significand, exponent = operation(
            self.significand, self.exponent, other.significand, other.exponent
        )
        return BigNum(significand=significand, exponent=exponent)

    def __add__(self, other: Operand) -> "BigNum":
        other = self._operand(other)
        if other is NotImplemented:
            return NotImplemented
        return self._combine(other, arithmetic.add)

    def __radd__(self, other: Operand) -> "BigNum":
        other = self._operand(other)
        if other is NotImplemented:
            return NotImplemented
        return other._combine(self, arithmetic.add)

    def __sub__(self, other: Operand) -> "BigNum":
        other = self._operand(other)
        if other is NotImplemented:
            return NotImplemented
        return self._combine(other, arithmetic.subtract)

    def __rsub__(self, other: Operand) -> "BigNum":
        other = self._operand(other)
        if other is NotImplemented:
            return NotImplemented
        return other._combine(self, arithmetic.subtract)

    def __mul__(self, other: Operand) -> "BigNum":
        other = self._operand(other)
        if other is NotImplemented:
            return NotImplemented
        return self._combine(other, arithmetic.multiply)

    def __rmul__(self, other: Operand) -> "BigNum":
        other = self._operand(other)
        if other is NotImplemented:
            return NotImplemented
        return other._combine(self, arithmetic.multiply)

    def divide(self, other: Operand) -> DivisionResult:
        """
        Деление с признаком точности.

        Частное содержит не более DEFAULT_DIVISION_PRECISION значащих цифр
        и обрезается (не округляется). Деление на ноль → Undefined.

        Returns:
            DivisionResult(value, precise)

        Examples:
            >>> BigNum.parse("1").divide("4")
            DivisionResult(value=BigNum(significand=25, exponent=-2, is_undefined=False), precise=True)
        """
        other = BigNum.coerce(other)

        if self.is_undefined or other.is_undefined or other.is_zero:
            return DivisionResult(BigNum.undefined(), False)

        quotient = arithmetic.divide(
            self.significand, self.exponent, other.significand, other.exponent
        )
        value = BigNum(significand=quotient.significand, exponent=quotient.exponent)
        return DivisionResult(value, quotient.precise)

    def __truediv__(self, other: Operand) -> "BigNum":
        other = self._operand(other)
        if other is NotImplemented:
            return NotImplemented
        return self.divide(other).value

    def __rtruediv__(self, other: Operand) -> "BigNum":
        other = self._operand(other)
        if other is NotImplemented:
            return NotImplemented
        return other.divide(self).value

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __lt__(self, other: Operand) -> bool:
        other = self._operand(other)
        if other is NotImplemented:
            return NotImplemented
        if self.is_undefined or other.is_undefined:
            return False

        difference = self - other
        if difference.is_zero:
            return False
        return difference.is_negative

    def __gt__(self, other: Operand) -> bool:
        other = self._operand(other)
        if other is NotImplemented:
            return NotImplemented
        if self.is_undefined or other.is_undefined:
            return False

        difference = self - other
        if difference.is_zero:
            return False
        return not difference.is_negative

    def __le__(self, other: Operand) -> bool:
        other = self._operand(other)
        if other is NotImplemented:
            return NotImplemented
        if self.is_undefined and other.is_undefined:
            return True
        if self.is_undefined or other.is_undefined:
            return False

        difference = self - other
        if difference.is_zero:
            return True
        return difference.is_negative

    def __ge__(self, other: Operand) -> bool:
        other = self._operand(other)
        if other is NotImplemented:
            return NotImplemented
        if self.is_undefined and other.is_undefined:
            return True
        if self.is_undefined or other.is_undefined:
            return False

        difference = self - other
        if difference.is_zero:
            return True
        return not difference.is_negative

    def __eq__(self, other: object) -> bool:
        """
        Числовое равенство: BigNum.parse("1.0") == 1.

        Строки не преобразуются: сравнение со str → NotImplemented.
        Нечисловые float (NaN, ±Inf) не равны ничему, в том числе Undefined.
        """
        if isinstance(other, bool) or not isinstance(other, (BigNum, int, float)):
            return NotImplemented
        if isinstance(other, float) and not math.isfinite(other):
            return False

        other = BigNum.coerce(other)
        if self.is_undefined or other.is_undefined:
            return self.is_undefined and other.is_undefined

        return (self - other).is_zero

    def __hash__(self) -> int:
        if self.is_undefined:
            return hash((None, None))
        # Равные int/float дают тот же hash
        return arithmetic.numeric_hash(self.significand, self.exponent)


# =============================================================================
# ДИАГНОСТИКА
# =============================================================================


def is_repr_exact(value: float) -> bool:
    """
    Проверка, что repr(value) даёт точное значение double.

    Сравнивает текстовый путь from_double(use_textual=True) с точным
    разложением битов.

    Examples:
        >>> is_repr_exact(0.5)
        True
        >>> is_repr_exact(0.1)
        False
    """
    exact = BigNum.from_double(value)
    textual = BigNum.from_double(value, use_textual=True)
    return exact == textual
