"""Turn one variant of any tagged type into an Option.

``some`` picks a class out of a union (dataclasses, named tuples, anything with
``__match_args__``) and wraps its fields in Some, returning Nothing for every
other variant. It pairs well with comprehensions:

    >>> @dataclass
    ... class Int:
    ...     n: int
    >>> @dataclass
    ... class Other:
    ...     pass
    >>> [x.unwrap() for v in (Int(1), Other(), Int(4)) if (x := some(v, Int)).is_some()]
    [1, 4]
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Callable, TypeVar

from .core.option import NOTHING, Option, Some

R = TypeVar("R")


def _bindings(variant: type, fields: Sequence[str] | None) -> tuple[str, ...]:
    if fields is not None:
        return tuple(fields)
    names = getattr(variant, "__match_args__", None)
    if names is None:
        raise TypeError(f"{variant.__name__} defines no __match_args__; pass fields= explicitly")
    return tuple(names)


def some(
    value: object,
    variant: type,
    *,
    fields: Sequence[str] | None = None,
    when: Callable[..., bool] | None = None,
    then: Callable[..., R] | None = None,
) -> Option[Any]:
    """Extract ``variant``'s fields from ``value`` as an Option.

    Args:
        value: Object to inspect
        variant: Class selecting the variant to keep
        fields: Attribute names to bind; defaults to ``variant.__match_args__``
        when: Guard called with the bound values; falsy result gives Nothing
        then: Mapping called with the bound values; its result is wrapped in Some

    A single bound field is returned as is, several as a tuple.

    Raises:
        TypeError: If no bindings can be determined for ``variant``

    The library's own variants work too; the abstract ``Option``/``Result`` bases
    are unions, not variants, and have no bindings.

    Example:
        >>> @dataclass
        ... class Pair:
        ...     n: int
        ...     flag: bool
        >>> some(Pair(10, True), Pair, when=lambda n, flag: flag, then=lambda n, flag: n + 1)
        Some(11)
        >>> some(Err("timeout"), Err)
        Some('timeout')
        >>> some(Nothing(), Some)
        Nothing
    """
    names = _bindings(variant, fields)
    if not isinstance(value, variant):
        return NOTHING
    bound = tuple(getattr(value, name) for name in names)
    if when is not None and not when(*bound):
        return NOTHING
    if then is not None:
        return Some(then(*bound))
    return Some(bound[0] if len(bound) == 1 else bound)
