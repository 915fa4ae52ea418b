"""Option carrier: a value that is either present (Some) or absent (Nothing).

Unlike ``T | None`` an Option nests (``Some(None)`` is a real value) and has no
truthiness, so presence is always checked explicitly. The two variants are
distinct classes and match structurally:

    >>> match Some(3):
    ...     case Some(n):
    ...         print(n)
    ...     case Nothing():
    ...         print("absent")
    3
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Callable, ClassVar, NoReturn, TypeVar

from ..errors import ErrorCode, panic
from ..ext.option import OptionExt

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Option(OptionExt[T]):
    """Sum type holding either one value (Some) or none (Nothing).

    ``Option`` itself is abstract; build values with ``Some(x)`` or ``Nothing()``.

    Examples:
        >>> Some(2).map(lambda x: x * 2).unwrap()
        4
        >>> Nothing().unwrap_or(0)
        0
        >>> Some(3).filter(lambda x: x > 5)
        Nothing
    """

    __slots__ = ()

    @staticmethod
    def from_nullable(value: T | None) -> Option[T]:
        """Some(value) unless value is None."""
        return NOTHING if value is None else Some(value)

    @classmethod
    def _some(cls, value: U) -> Option[U]:
        return Some(value)

    @classmethod
    def _nothing(cls) -> Option[U]:
        return NOTHING

    def is_nothing(self) -> bool:
        return not self.is_some()

    @abstractmethod
    def expect(self, msg: str) -> T:
        """Extract the value, panicking with ``msg`` on Nothing."""
        ...

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        ...

    @abstractmethod
    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        ...

    @abstractmethod
    def map(self, f: Callable[[T], U]) -> Option[U]:
        ...

    @abstractmethod
    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Chain an Option-returning function; Nothing short-circuits."""
        ...

    @abstractmethod
    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        ...

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        ...

    @abstractmethod
    def zip(self, other: Option[U]) -> Option[tuple[T, U]]:
        """Pair two present values. ``other`` is already evaluated; see ``zip_lazy``."""
        ...

    @abstractmethod
    def ok_or(self, error: E) -> Result[T, E]:
        ...

    @abstractmethod
    def ok_or_else(self, f: Callable[[], E]) -> Result[T, E]:
        ...

    @abstractmethod
    def match(self, *, some: Callable[[T], U], nothing: Callable[[], U]) -> U:
        """Exhaustive case analysis over both variants."""
        ...

    def __bool__(self) -> bool:
        raise TypeError("Option has no truth value; use is_some() or is_nothing()")


class Some(Option[T]):
    """The present variant."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_some(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self._value

    def expect(self, msg: str) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:
        return self._value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return self._value

    def map(self, f: Callable[[T], U]) -> Option[U]:
        return Some(f(self._value))

    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        return f(self._value)

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self if predicate(self._value) else NOTHING

    def zip(self, other: Option[U]) -> Option[tuple[T, U]]:
        return Some((self._value, other.unwrap())) if other.is_some() else NOTHING

    def ok_or(self, error: E) -> Result[T, E]:
        from .result import Ok

        return Ok(self._value)

    def ok_or_else(self, f: Callable[[], E]) -> Result[T, E]:
        from .result import Ok

        return Ok(self._value)

    def match(self, *, some: Callable[[T], U], nothing: Callable[[], U]) -> U:
        return some(self._value)

    def __repr__(self) -> str:
        return f"Some({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return isinstance(other, Some) and self._value == other._value

    def __hash__(self) -> int:
        return hash((Some, self._value))

    def __iter__(self) -> Iterator[T]:
        yield self._value


class Nothing(Option[T]):
    """The absent variant. Carries no value; every ``Nothing()`` is the same object."""

    __slots__ = ()
    __match_args__ = ()

    _instance: ClassVar[Nothing | None] = None

    def __new__(cls) -> Nothing[T]:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_some(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        panic("unwrap", "called `unwrap()` on a `Nothing` value", ErrorCode.UNWRAP)

    def expect(self, msg: str) -> NoReturn:
        panic("expect", msg, ErrorCode.EXPECT)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return f()

    def map(self, f: Callable[[T], U]) -> Option[U]:
        return NOTHING

    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        return NOTHING

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        return f()

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return NOTHING

    def zip(self, other: Option[U]) -> Option[tuple[T, U]]:
        return NOTHING

    def ok_or(self, error: E) -> Result[T, E]:
        from .result import Err

        return Err(error)

    def ok_or_else(self, f: Callable[[], E]) -> Result[T, E]:
        from .result import Err

        return Err(f())

    def match(self, *, some: Callable[[T], U], nothing: Callable[[], U]) -> U:
        return nothing()

    def __repr__(self) -> str:
        return "Nothing"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return isinstance(other, Nothing)

    def __hash__(self) -> int:
        return hash(Nothing)

    def __iter__(self) -> Iterator[T]:
        return iter(())


NOTHING: Nothing[object] = Nothing()
