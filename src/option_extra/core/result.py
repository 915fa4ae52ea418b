"""Result carrier: either a success value (Ok) or an error value (Err).

``Ok`` and ``Err`` are separate classes, so results match structurally:

    >>> match Err("timeout"):
    ...     case Ok(value):
    ...         print("got", value)
    ...     case Err(error):
    ...         print("failed:", error)
    failed: timeout

The extra predicate queries come from ``ResultExt``.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Callable, NoReturn, TypeVar

from ..errors import ErrorCode, panic
from ..ext.result import ResultExt
from .option import NOTHING, Option, Some

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


class Result(ResultExt[T, E]):
    """Outcome of a fallible step: ``Ok(value)`` or ``Err(error)``.

    ``Result`` itself is abstract. A Result is truthy exactly when it is Ok.

    Examples:
        >>> Ok(21).map(lambda x: x * 2).unwrap()
        42
        >>> Err("bad input").map(lambda x: x * 2).unwrap_err()
        'bad input'
        >>> Ok(5).and_then(lambda x: Ok(x - 1) if x > 0 else Err("neg"))
        Ok(4)
    """

    __slots__ = ()

    @classmethod
    def _ok(cls, value: U) -> Result[U, E]:
        return Ok(value)

    def is_err(self) -> bool:
        return not self.is_ok()

    @abstractmethod
    def expect(self, msg: str) -> T:
        """Extract the success value, panicking with ``msg`` on Err."""
        ...

    @abstractmethod
    def expect_err(self, msg: str) -> E:
        """Extract the error value, panicking with ``msg`` on Ok."""
        ...

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        ...

    @abstractmethod
    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Extract the success value, or derive one from the error."""
        ...

    @abstractmethod
    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Transform the success value; an Err passes through untouched."""
        ...

    @abstractmethod
    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Transform the error value; an Ok passes through untouched."""
        ...

    @abstractmethod
    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Run the next fallible step on the success value. Err stops the chain."""
        ...

    @abstractmethod
    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Give an Err a chance to recover. Ok is returned as is."""
        ...

    @abstractmethod
    def ok(self) -> Option[T]:
        """The success value as an Option."""
        ...

    @abstractmethod
    def err(self) -> Option[E]:
        """The error value as an Option."""
        ...

    @abstractmethod
    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Handle both variants, returning whichever handler's result applies."""
        ...


class Ok(Result[T, E]):
    """The success variant."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self._value

    def unwrap_err(self) -> NoReturn:
        panic("unwrap_err", "called `unwrap_err()` on an `Ok` value", ErrorCode.UNWRAP_ERR, self._value)

    def expect(self, msg: str) -> T:
        return self._value

    def expect_err(self, msg: str) -> NoReturn:
        panic("expect_err", msg, ErrorCode.EXPECT_ERR, self._value)

    def unwrap_or(self, default: T) -> T:
        return self._value

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        return self._value

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        return Ok(f(self._value))

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        return self  # type: ignore[return-value]

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return f(self._value)

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return self  # type: ignore[return-value]

    def ok(self) -> Option[T]:
        return Some(self._value)

    def err(self) -> Option[E]:
        return NOTHING  # type: ignore[return-value]

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        return ok(self._value)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return isinstance(other, Ok) and self._value == other._value

    def __hash__(self) -> int:
        return hash((Ok, self._value))

    def __iter__(self) -> Iterator[T]:
        yield self._value


class Err(Result[T, E]):
    """The failure variant."""

    __slots__ = ("_error",)
    __match_args__ = ("error",)

    def __init__(self, error: E) -> None:
        self._error = error

    @property
    def error(self) -> E:
        return self._error

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        panic("unwrap", "called `unwrap()` on an `Err` value", ErrorCode.UNWRAP, self._error)

    def unwrap_err(self) -> E:
        return self._error

    def expect(self, msg: str) -> NoReturn:
        panic("expect", msg, ErrorCode.EXPECT, self._error)

    def expect_err(self, msg: str) -> E:
        return self._error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        return f(self._error)

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        return self  # type: ignore[return-value]

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        return Err(f(self._error))

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return self  # type: ignore[return-value]

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return f(self._error)

    def ok(self) -> Option[T]:
        return NOTHING  # type: ignore[return-value]

    def err(self) -> Option[E]:
        return Some(self._error)

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        return err(self._error)

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Err({self._error!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return isinstance(other, Err) and self._error == other._error

    def __hash__(self) -> int:
        return hash((Err, self._error))

    def __iter__(self) -> Iterator[T]:
        return iter(())
