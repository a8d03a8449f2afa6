"""
Guards — проверки аргументов и состояния

Вызываются явно в начале каждой публичной операции BigNum.
"""

from typing import Any

from src.bignum.errors import InvalidStateError, NullArgumentError


def require_argument(value: Any, name: str = "value") -> None:
    """
    Проверка, что обязательный аргумент передан.

    Args:
        value: Проверяемый аргумент
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        NullArgumentError: Если value is None
    """
    if value is None:
        raise NullArgumentError(f"{name} must not be None")


def require_defined(value: Any, name: str = "value") -> None:
    """
    Проверка, что значение передано и не является Undefined.

    Args:
        value: Проверяемое значение (BigNum)
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        NullArgumentError: Если value is None
        InvalidStateError: Если value.is_undefined
    """
    require_argument(value, name)

    if value.is_undefined:
        raise InvalidStateError(f"{name} is undefined")
