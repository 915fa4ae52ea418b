"""Extra combinators for Option.

Every operation here follows the same contract:
- a supplied producer or predicate runs at most once
- nothing runs when the receiver's own variant already decides the answer
- exceptions raised by supplied callables propagate unchanged

Example:
    >>> from option_extra import Some, Nothing
    >>> Some("abc").zip_lazy(lambda: Some(1))
    Some(('abc', 1))
    >>> calls = []
    >>> Nothing().zip_lazy(lambda: calls.append("ran") or Some(1))
    Nothing
    >>> calls
    []
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from ..errors import ErrorCode, panic

if TYPE_CHECKING:
    from ..core.option import Option

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class OptionExt(ABC, Generic[T]):
    """Mixin adding lazy and predicate-based combinators to an Option carrier.

    The carrier supplies ``is_some``, ``unwrap`` and the ``_some``/``_nothing``
    constructors; everything else is built on top of those.
    """

    __slots__ = ()

    # ─── Carrier Protocol ──────────────────────────────────────────────

    @abstractmethod
    def is_some(self) -> bool:
        """True for the present variant."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Extract the present value."""
        ...

    @classmethod
    @abstractmethod
    def _some(cls, value: U) -> Option[U]:
        ...

    @classmethod
    @abstractmethod
    def _nothing(cls) -> Option[U]:
        ...

    # ─── Lazy Combinators ──────────────────────────────────────────────

    def zip_lazy(self, f: Callable[[], Option[U]]) -> Option[tuple[T, U]]:
        """Like ``zip``, but the other Option comes from ``f``.

        ``f`` is not called when self is Nothing.

        Example:
            >>> Some("abc").zip_lazy(lambda: Some(1))
            Some(('abc', 1))
            >>> Some("abc").zip_lazy(Nothing)
            Nothing
        """
        if not self.is_some():
            return self._nothing()
        other = f()
        if not other.is_some():
            return self._nothing()
        return self._some((self.unwrap(), other.unwrap()))

    def zip_with_lazy(self, f: Callable[[], Option[U]], combine: Callable[[T, U], R]) -> Option[R]:
        """Like ``zip_lazy``, but both values are merged with ``combine``.

        ``combine`` only runs when both values are present.
        """
        if not self.is_some():
            return self._nothing()
        other = f()
        if not other.is_some():
            return self._nothing()
        return self._some(combine(self.unwrap(), other.unwrap()))

    def or_lazy(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Return self if Some, otherwise the Option produced by ``f``."""
        if self.is_some():
            return self  # type: ignore[return-value]
        return f()

    def filter_lazy(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if ``predicate`` accepts it."""
        if self.is_some() and predicate(self.unwrap()):
            return self  # type: ignore[return-value]
        return self._nothing()

    # ─── Logical Queries ───────────────────────────────────────────────

    def satisfies(self, predicate: Callable[[T], bool]) -> bool:
        """Check if the wrapped value satisfies ``predicate``; False for Nothing.

        Example:
            >>> Some(1).satisfies(lambda n: n % 2 == 1)
            True
        """
        return self.is_some() and bool(predicate(self.unwrap()))

    def is_nothing_or(self, predicate: Callable[[T], bool]) -> bool:
        """True for Nothing, otherwise whatever ``predicate`` says about the value."""
        return not self.is_some() or bool(predicate(self.unwrap()))

    # ─── Assertions ────────────────────────────────────────────────────

    def unwrap_nothing(self) -> None:
        """Ensure self is Nothing.

        Raises:
            UnwrapError: If self is Some
        """
        if self.is_some():
            panic("unwrap_nothing", "called `unwrap_nothing` on a `Some` value", ErrorCode.UNWRAP_NOTHING)

    def expect_nothing(self, msg: str) -> None:
        """Ensure self is Nothing, panicking with ``msg`` otherwise.

        Raises:
            UnwrapError: With ``msg`` as message if self is Some
        """
        if self.is_some():
            panic("expect_nothing", msg, ErrorCode.EXPECT_NOTHING)


# ═════════════════════════════════════════════════════════════════════════════
# Function Forms
# ═════════════════════════════════════════════════════════════════════════════


def zip_lazy(option: Option[T], f: Callable[[], Option[U]]) -> Option[tuple[T, U]]:
    return option.zip_lazy(f)


def zip_with_lazy(option: Option[T], f: Callable[[], Option[U]], combine: Callable[[T, U], R]) -> Option[R]:
    return option.zip_with_lazy(f, combine)


def or_lazy(option: Option[T], f: Callable[[], Option[T]]) -> Option[T]:
    return option.or_lazy(f)


def filter_lazy(option: Option[T], predicate: Callable[[T], bool]) -> Option[T]:
    return option.filter_lazy(predicate)


def satisfies(option: Option[T], predicate: Callable[[T], bool]) -> bool:
    return option.satisfies(predicate)


def is_nothing_or(option: Option[T], predicate: Callable[[T], bool]) -> bool:
    return option.is_nothing_or(predicate)
