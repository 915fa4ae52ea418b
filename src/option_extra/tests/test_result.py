"""Tests for the Result carrier.

Validates:
- Functor laws
- Monad laws
- Extraction panics
- Conversion to Option
"""

from __future__ import annotations

from typing import Callable

import pytest

from option_extra import Err, ErrorCode, Nothing, Ok, Result, Some, UnwrapError


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Functor & Monad Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    """Functor law: fmap id = id"""
    result: Result[int, str] = Ok(42)
    assert result.map(lambda x: x) == result

    err_result: Result[int, str] = Err("fail")
    assert err_result.map(lambda x: x) == err_result


def test_functor_composition() -> None:
    """Functor law: fmap (f . g) = fmap f . fmap g"""
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2
    result: Result[int, str] = Ok(5)

    assert result.map(lambda x: f(g(x))) == result.map(g).map(f)


def test_monad_left_identity() -> None:
    """Monad law: return a >>= f = f a"""
    f: Callable[[int], Result[int, str]] = lambda x: Ok(x * 2)
    assert Ok(42).and_then(f) == f(42)


def test_monad_associativity() -> None:
    """Monad law: (m >>= f) >>= g = m >>= (\\x -> f x >>= g)"""
    m: Result[int, str] = Ok(5)
    f: Callable[[int], Result[int, str]] = lambda x: Ok(x + 1)
    g: Callable[[int], Result[int, str]] = lambda x: Ok(x * 2)

    assert m.and_then(f).and_then(g) == m.and_then(lambda x: f(x).and_then(g))


# ═════════════════════════════════════════════════════════════════════════════
# Operational Tests
# ═════════════════════════════════════════════════════════════════════════════


def test_ok_construction() -> None:
    result: Result[int, str] = Ok(42)

    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap() == 42
    assert result.ok() == Some(42)
    assert result.err() == Nothing()


def test_err_construction() -> None:
    result: Result[int, str] = Err("failed")

    assert result.is_err()
    assert result.unwrap_err() == "failed"
    assert result.ok() == Nothing()
    assert result.err() == Some("failed")


def test_unwrap_on_err_panics() -> None:
    with pytest.raises(UnwrapError) as exc_info:
        Err("boom").unwrap()

    assert str(exc_info.value) == "called `unwrap()` on an `Err` value: 'boom'"
    assert exc_info.value.code is ErrorCode.UNWRAP
    assert exc_info.value.info.value == "'boom'"


def test_unwrap_err_on_ok_panics() -> None:
    with pytest.raises(UnwrapError, match="on an `Ok` value: 1"):
        Ok(1).unwrap_err()


def test_expect_variants() -> None:
    assert Ok(1).expect("needed") == 1
    assert Err("e").expect_err("needed error") == "e"

    with pytest.raises(UnwrapError, match="config missing: 'no file'"):
        Err("no file").expect("config missing")
    with pytest.raises(UnwrapError) as exc_info:
        Ok(3).expect_err("should fail")
    assert exc_info.value.code is ErrorCode.EXPECT_ERR


def test_map_err() -> None:
    assert Err("fail").map_err(lambda e: f"Error: {e}") == Err("Error: fail")
    assert Ok(42).map_err(lambda e: f"Error: {e}") == Ok(42)


def test_and_then_short_circuits() -> None:
    assert Err("fail").and_then(lambda x: Ok(x * 2)) == Err("fail")
    assert Ok(5).and_then(lambda x: Err("failed")) == Err("failed")


def test_or_else() -> None:
    assert Err("fail").or_else(lambda _: Ok(42)) == Ok(42)
    assert Ok(5).or_else(lambda _: Ok(42)) == Ok(5)


def test_unwrap_or_variants() -> None:
    assert Ok(5).unwrap_or(10) == 5
    assert Err("fail").unwrap_or(10) == 10
    assert Err("fail").unwrap_or_else(len) == 4


def test_match() -> None:
    handlers = dict(ok=lambda x: f"success: {x}", err=lambda e: f"failed: {e}")

    assert Ok(42).match(**handlers) == "success: 42"
    assert Err("fail").match(**handlers) == "failed: fail"


def test_truthiness_equality_iteration() -> None:
    assert bool(Ok(42)) is True
    assert bool(Err("fail")) is False
    assert Ok(42) == Ok(42)
    assert Ok(42) != Err(42)
    assert list(Ok(42)) == [42]
    assert list(Err("fail")) == []
    assert repr(Err("x")) == "Err('x')"


def test_structural_match() -> None:
    def describe(result: Result[int, str]) -> str:
        match result:
            case Ok(value):
                return f"ok {value}"
            case Err(error):
                return f"err {error}"
        return "unreachable"

    assert describe(Ok(1)) == "ok 1"
    assert describe(Err("x")) == "err x"


def test_result_base_is_abstract() -> None:
    with pytest.raises(TypeError):
        Result()  # type: ignore[abstract]
    assert Err("x").error == "x"
    assert Ok(1).value == 1


def test_hash_agrees_with_equality() -> None:
    values: list[Result[object, object]] = [Ok(1), Ok(1), Err(1), Err(1), Ok(None), Err(None)]
    for left in values:
        for right in values:
            if left == right:
                assert hash(left) == hash(right)
    assert len(set(values)) == 4


def test_railway_error_path() -> None:
    def parse_int(s: str) -> Result[int, str]:
        try:
            return Ok(int(s))
        except ValueError:
            return Err(f"invalid: {s}")

    result = Ok("bad").and_then(parse_int).map(lambda n: n * 2)

    assert result.is_err()
    assert "invalid: bad" in result.unwrap_err()
