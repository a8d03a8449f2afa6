"""
Decimal Parser — разбор десятичных и научных литералов

Преобразует строку в каноническую пару (significand, exponent):
    value = significand × 10^exponent

Поддерживаемые формы:
- Десятичный литерал: "-12.50", "100", ".5", "7."
- Научная нотация: "1.25E2", "-5e-3", "2.5E+10"

Научная нотация сначала нормализуется в эквивалентный десятичный
литерал (normalize_scientific), затем разбирается той же логикой.

ИНВАРИАНТЫ:
1. Ноль всегда разбирается в (0, 0)
2. Хвостовые нули целой части переносятся в exponent ("100" → (1, 2))
3. Результат normalize_scientific никогда не содержит E
"""

import logging
import re
from typing import NamedTuple

from src.bignum.arithmetic import digit_count, digits_to_int
from src.bignum.errors import FormatError
from src.bignum.guards import require_argument

logger = logging.getLogger(__name__)


# =============================================================================
# ГРАММАТИКА
# =============================================================================

_WHITESPACE_RE = re.compile(r"\s")
_BAD_FIRST_CHAR_RE = re.compile(r"^[^0-9\-.]")
_MISPLACED_SIGN_RE = re.compile(r"(?<![eE])[-+]")
_BAD_LETTER_RE = re.compile(r"[a-df-zA-DF-Z]")
_LITERAL_RE = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]*)(?:[eE][-+]?[0-9]+)?")
_EXPONENT_MARK_RE = re.compile(r"[eE]")


class ParsedDecimal(NamedTuple):
    """Результат разбора: value = significand × 10^exponent."""

    significand: int
    exponent: int


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_input(text: str) -> None:
    """
    Проверка строки на соответствие грамматике литерала.

    Args:
        text: Входная строка

    Raises:
        NullArgumentError: Если text is None
        FormatError: Если строка пустая, содержит пробелы, более одной точки,
            знак не в первой позиции (кроме знака экспоненты), буквы кроме E/e
    """
    require_argument(text, "text")

    if not isinstance(text, str):
        raise FormatError(f"Input must be a string, got {type(text).__name__}")

    if text == "":
        raise FormatError('Input "": invalid format (empty string)')

    if _WHITESPACE_RE.search(text):
        raise FormatError(f'Input "{text}": invalid format (contains whitespace)')

    if _BAD_FIRST_CHAR_RE.match(text):
        raise FormatError(f'Input "{text}": invalid format (must start with a digit, "-" or ".")')

    if text.count(".") > 1:
        raise FormatError(f'Input "{text}": invalid format (more than one decimal point)')

    if _MISPLACED_SIGN_RE.search(text, 1):
        raise FormatError(f'Input "{text}": invalid format (sign is only allowed in first position)')

    if _BAD_LETTER_RE.search(text):
        raise FormatError(f'Input "{text}": invalid format (unexpected letter)')

    if not _LITERAL_RE.fullmatch(text):
        raise FormatError(f'Input "{text}": invalid format')


# =============================================================================
# НАУЧНАЯ НОТАЦИЯ
# =============================================================================


def normalize_scientific(text: str) -> str:
    """
    Нормализация научной нотации в десятичный литерал.

    Десятичная точка мантиссы сдвигается на exp позиций (вправо при exp > 0,
    влево при exp < 0); недостающие позиции дополняются нулями. Знак всего
    литерала сохраняется. Чистая дробь получает ведущий "0.".

    Args:
        text: Литерал вида <mantissa>E<exp> (E или e)

    Returns:
        Эквивалентный десятичный литерал без E

    Examples:
        >>> normalize_scientific("5E3")
        '5000'
        >>> normalize_scientific("5E-3")
        '0.005'
        >>> normalize_scientific("-1.25E1")
        '-12.5'
    """
    require_argument(text, "text")

    parts = _EXPONENT_MARK_RE.split(text, maxsplit=1)
    if len(parts) == 1:
        return text

    mantissa, exp_text = parts
    sign = ""
    if mantissa.startswith("-"):
        sign = "-"
        mantissa = mantissa[1:]

    exp = int(exp_text)
    point = mantissa.find(".")
    if point < 0:
        point = len(mantissa)
    digits = mantissa.replace(".", "")

    shifted = point + exp
    if shifted <= 0:
        plain = "0." + "0" * -shifted + digits
    elif shifted >= len(digits):
        plain = digits + "0" * (shifted - len(digits))
    else:
        plain = f"{digits[:shifted]}.{digits[shifted:]}"

    logger.debug("normalized scientific literal %r -> %r", text, sign + plain)
    return sign + plain


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_decimal(text: str) -> ParsedDecimal:
    """
    Разбор десятичного или научного литерала в каноническую пару.

    Args:
        text: Входная строка

    Returns:
        ParsedDecimal(significand, exponent)

    Raises:
        NullArgumentError: Если text is None
        FormatError: Если строка не проходит validate_input

    Examples:
        >>> parse_decimal("100")
        ParsedDecimal(significand=1, exponent=2)
        >>> parse_decimal("-1.05")
        ParsedDecimal(significand=-105, exponent=-2)
        >>> parse_decimal("1.25E-2")
        ParsedDecimal(significand=125, exponent=-4)
    """
    validate_input(text)

    if _EXPONENT_MARK_RE.search(text):
        text = normalize_scientific(text)

    negative = text.startswith("-")
    if negative:
        text = text[1:]

    if "." not in text:
        significand, exponent = _parse_integer_literal(text)
    else:
        significand, exponent = _parse_point_literal(text)

    if significand == 0:
        return ParsedDecimal(0, 0)

    if negative:
        significand = -significand

    return ParsedDecimal(significand, exponent)


def _parse_integer_literal(literal: str) -> tuple[int, int]:
    # Хвостовые нули уходят в exponent
    trimmed = literal.rstrip("0")
    if not trimmed:
        return 0, 0
    return digits_to_int(trimmed), len(literal) - len(trimmed)


def _parse_point_literal(literal: str) -> tuple[int, int]:
    stripped = literal.strip("0")
    if stripped == ".":
        return 0, 0

    point = stripped.index(".")

    if point == len(stripped) - 1:
        # "120." → целое число
        return _parse_integer_literal(stripped[:-1])

    if point == 0:
        # ".05" → чистая дробь
        fraction = stripped[1:]
        significand = digits_to_int(fraction) if fraction else 0
        return significand, -(len(stripped) - 1)

    # Точка внутри цифр: exponent привязан к длине разобранного significand
    significand = digits_to_int(stripped.replace(".", ""))
    return significand, -(digit_count(significand) - point)
