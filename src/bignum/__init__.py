"""
BigNum — десятичная арифметика произвольной точности

Точное представление value = significand × 10^exponent без двоичной
ошибки округления: разбор строк (в том числе научной нотации), точное
разложение IEEE-754 double, арифметика, сравнение и сериализация.
"""

# Value type
from src.bignum.value import BigNum, DivisionResult, is_repr_exact

# Constants
from src.bignum.constants import DEFAULT_DIVISION_PRECISION, UNDEFINED_STRING

# Errors
from src.bignum.errors import (
    BigNumError,
    FormatError,
    InvalidStateError,
    NullArgumentError,
)

# Parser
from src.bignum.parser import ParsedDecimal, normalize_scientific, parse_decimal

# IEEE-754 decoder
from src.bignum.ieee754 import (
    DoubleFields,
    bits_to_integer,
    decode_bits,
    double_to_bits,
    split_double_bits,
)

# Arithmetic engine
from src.bignum.arithmetic import Quotient

__all__ = [
    # Value type
    "BigNum",
    "DivisionResult",
    "is_repr_exact",
    # Constants
    "DEFAULT_DIVISION_PRECISION",
    "UNDEFINED_STRING",
    # Errors
    "BigNumError",
    "FormatError",
    "InvalidStateError",
    "NullArgumentError",
    # Parser
    "ParsedDecimal",
    "normalize_scientific",
    "parse_decimal",
    # IEEE-754 decoder
    "DoubleFields",
    "bits_to_integer",
    "decode_bits",
    "double_to_bits",
    "split_double_bits",
    # Arithmetic engine
    "Quotient",
]
