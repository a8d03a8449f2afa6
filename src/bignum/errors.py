"""
BigNum Errors — таксономия исключений

- NullArgumentError: обязательный аргумент не передан (None)
- FormatError: строка не соответствует грамматике десятичного литерала
- InvalidStateError: числовое свойство/оператор вызван на Undefined значении

Undefined результат (NaN/Inf на входе, деление на ноль) ошибкой НЕ является:
это полноценное значение, которое молча распространяется через арифметику.
"""


class BigNumError(Exception):
    """Базовый класс для всех ошибок BigNum."""
    pass


class NullArgumentError(BigNumError, TypeError):
    """Обязательный аргумент отсутствует (None)."""
    pass


class FormatError(BigNumError, ValueError):
    """
    Строка не является валидным десятичным или научным литералом.

    Причины: пустая строка, пробелы, более одной десятичной точки,
    знак не в первой позиции, буквы кроме E/e.
    """
    pass


class InvalidStateError(BigNumError, RuntimeError):
    """
    Операция требует Defined значения, но получила Undefined.

    Безопасны только проверки is_undefined и сравнения <=/>=/==.
    """
    pass
