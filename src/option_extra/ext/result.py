"""Extra queries and combinators for Result.

Each operation states which variant runs the supplied callable and whether the
error value is ever handed to it. All of them are total: the only exceptions
that escape are the ones raised by the supplied callables.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from ..core.result import Result

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


class ResultExt(ABC, Generic[T, E]):
    """Mixin adding predicate queries and lazy zipping to a Result carrier.

    The carrier supplies ``is_ok``, ``unwrap``, ``unwrap_err`` and the ``_ok``
    constructor.
    """

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> bool:
        """True for the success variant."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Extract the success value."""
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """Extract the error value."""
        ...

    @classmethod
    @abstractmethod
    def _ok(cls, value: U) -> Result[U, E]:
        ...

    # ─── Predicate Queries ─────────────────────────────────────────────

    def satisfies(self, predicate: Callable[[T], bool]) -> bool:
        """If Ok, check the wrapped value against ``predicate``. Otherwise False.

        The predicate only runs on Ok and never sees the error.

        Example:
            >>> Ok(1).satisfies(lambda n: n % 2 == 1)
            True
            >>> Err("boom").satisfies(lambda _: True)
            False
        """
        return self.is_ok() and bool(predicate(self.unwrap()))

    def satisfies_err(self, predicate: Callable[[E], bool]) -> bool:
        """If Err, check the error against ``predicate``. Otherwise False."""
        return not self.is_ok() and bool(predicate(self.unwrap_err()))

    def is_err_or(self, predicate: Callable[[T], bool]) -> bool:
        """True for Err without running ``predicate``; otherwise ``predicate(value)``."""
        return not self.is_ok() or bool(predicate(self.unwrap()))

    # ─── Lazy Combinators ──────────────────────────────────────────────

    def zip_lazy(self, f: Callable[[], Result[U, E]]) -> Result[tuple[T, U], E]:
        """Pair the Ok value with the Ok value produced by ``f``.

        Err short-circuits and is returned unchanged without calling ``f``.
        If ``f`` returns Err, that Err is returned.
        """
        if not self.is_ok():
            return self  # type: ignore[return-value]
        other = f()
        if not other.is_ok():
            return other  # type: ignore[return-value]
        return self._ok((self.unwrap(), other.unwrap()))


# ═════════════════════════════════════════════════════════════════════════════
# Function Forms
# ═════════════════════════════════════════════════════════════════════════════


def satisfies(result: Result[T, E], predicate: Callable[[T], bool]) -> bool:
    return result.satisfies(predicate)


def satisfies_err(result: Result[T, E], predicate: Callable[[E], bool]) -> bool:
    return result.satisfies_err(predicate)


def is_err_or(result: Result[T, E], predicate: Callable[[T], bool]) -> bool:
    return result.is_err_or(predicate)


def zip_lazy(result: Result[T, E], f: Callable[[], Result[U, E]]) -> Result[tuple[T, U], E]:
    return result.zip_lazy(f)
