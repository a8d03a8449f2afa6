"""
Тесты для guards и таксономии ошибок
"""

import pytest

from src.bignum import BigNum
from src.bignum.errors import (
    BigNumError,
    FormatError,
    InvalidStateError,
    NullArgumentError,
)
from src.bignum.guards import require_argument, require_defined


class TestRequireArgument:
    """Тесты для require_argument"""

    def test_value_passes(self) -> None:
        require_argument(0, "x")
        require_argument("", "x")

    def test_none_raises_with_name(self) -> None:
        with pytest.raises(NullArgumentError, match="rhs must not be None"):
            require_argument(None, "rhs")


class TestRequireDefined:
    """Тесты для require_defined"""

    def test_defined_passes(self) -> None:
        require_defined(BigNum.parse("1"))

    def test_undefined_raises(self) -> None:
        with pytest.raises(InvalidStateError, match="lhs is undefined"):
            require_defined(BigNum.undefined(), "lhs")

    def test_none_raises(self) -> None:
        with pytest.raises(NullArgumentError):
            require_defined(None)


class TestErrorHierarchy:
    """Ошибки ловятся и как BigNumError, и как стандартные исключения"""

    def test_hierarchy(self) -> None:
        assert issubclass(NullArgumentError, (BigNumError, TypeError))
        assert issubclass(FormatError, ValueError)
        assert issubclass(FormatError, BigNumError)
        assert issubclass(InvalidStateError, RuntimeError)
        assert issubclass(InvalidStateError, BigNumError)
