"""
Serializer — текстовые представления канонической пары

- to_plain_string: обычная десятичная запись ("-12.5", "0.0125", "1200")
- to_scientific_string: научная запись ("-1.25e1", "1.25e-2", "1.2e3")

Буфер строки локален для каждого вызова.
"""

from src.bignum.arithmetic import digit_count, int_to_digits, strip_trailing_zeros
from src.bignum.constants import UNDEFINED_STRING


def to_plain_string(significand: int, exponent: int, undefined: bool = False) -> str:
    """
    Точная десятичная запись значения significand × 10^exponent.

    Args:
        significand: Целая часть канонической пары
        exponent: Степень десяти
        undefined: Значение Undefined (significand/exponent игнорируются)

    Returns:
        Десятичная строка без экспоненты; хвостовые нули дробной части
        отбрасываются, чистая дробь получает ведущий "0."

    Examples:
        >>> to_plain_string(125, -4)
        '0.0125'
        >>> to_plain_string(-3, 2)
        '-300'
        >>> to_plain_string(1500, -3)
        '1.5'
    """
    if undefined:
        return UNDEFINED_STRING

    if significand == 0:
        return "0"

    sign = "-" if significand < 0 else ""
    digits = int_to_digits(significand)

    if exponent >= 0:
        return sign + digits + "0" * exponent

    fraction_len = -exponent
    if fraction_len >= len(digits):
        text = "0." + "0" * (fraction_len - len(digits)) + digits
    else:
        split = len(digits) - fraction_len
        text = f"{digits[:split]}.{digits[split:]}"

    # Хвостовые нули только из significand (например, после умножения)
    text = text.rstrip("0").rstrip(".")
    return sign + text


def to_scientific_string(significand: int, exponent: int, undefined: bool = False) -> str:
    """
    Научная запись <первая цифра>.<остальные цифры>e<экспонента>.

    Экспонента — истинный порядок числа (exponent + число цифр - 1),
    поэтому результат разбирается обратно в то же значение. Остальные
    цифры без хвостовых нулей, "0" если цифра одна.

    Examples:
        >>> to_scientific_string(125, 0)
        '1.25e2'
        >>> to_scientific_string(-5, -3)
        '-5.0e-3'
        >>> to_scientific_string(0, 0)
        '0.0e0'
    """
    if undefined:
        return UNDEFINED_STRING

    sign = "-" if significand < 0 else ""
    scientific_exponent = exponent + digit_count(significand) - 1 if significand else 0

    stripped, _ = strip_trailing_zeros(abs(significand), exponent)
    digits = int_to_digits(stripped)
    rest = digits[1:] or "0"

    return f"{sign}{digits[0]}.{rest}e{scientific_exponent}"
