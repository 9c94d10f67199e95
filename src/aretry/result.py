"""Result[T, E] – Ok and Err variants.

Operations that report failure as a value instead of raising return an
:class:`Err`. The retry engines treat a returned ``Err`` exactly like a raised
exception (retry, or surface it unchanged), and treat every other return value
as success.
"""

from __future__ import annotations

from typing import Callable, Generic, NoReturn, TypeAlias, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Ok(Generic[T]):
    """Successful result variant."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def map(self, func: Callable[[T], U]) -> "Ok[U]":
        return Ok(func(self._value))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Ok) and other._value == self._value

    def __hash__(self) -> int:
        return hash(("Ok", self._value))

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


class Err(Generic[E]):
    """Error result variant."""

    __slots__ = ("_error",)

    def __init__(self, error: E) -> None:
        self._error = error

    @property
    def error(self) -> E:
        return self._error

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        if isinstance(self._error, BaseException):
            raise self._error
        raise ValueError(f"called unwrap() on {self!r}")

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, func: Callable[[T], U]) -> "Err[E]":  # noqa: ARG002
        return self

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Err) and other._error == self._error

    def __hash__(self) -> int:
        return hash(("Err", self._error))

    def __repr__(self) -> str:
        return f"Err({self._error!r})"


Result: TypeAlias = Ok[T] | Err[E]

__all__ = ["Err", "Ok", "Result"]
