"""Algebraic laws every Result must satisfy, checked with generated inputs."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from resultkit import Err, Ok, UnwrapError, all_ok, any_ok, try_with, validate

pytestmark = pytest.mark.contract

payloads = st.one_of(st.none(), st.integers(), st.text(max_size=8), st.booleans())
results = st.one_of(st.builds(Ok, payloads), st.builds(Err, payloads))
int_results = st.one_of(st.builds(Ok, st.integers()), st.builds(Err, st.text(max_size=4)))


def _step(n: int) -> Ok[int] | Err[str]:
    return Ok(n + 1) if n % 3 else Err(f"divisible: {n}")


def _halve(n: int) -> Ok[int] | Err[str]:
    return Ok(n // 2) if n % 2 == 0 else Err(f"odd: {n}")


def _never(_: object) -> None:
    raise AssertionError("callback must not run")


@given(value=payloads)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_ok_accessors(value: object) -> None:
    result = Ok(value)
    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap() == value
    assert result.ok() == value
    assert result.err() is None


@given(error=payloads, default=payloads)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_err_accessors(error: object, default: object) -> None:
    result = Err(error)
    assert result.is_err()
    assert result.unwrap_or(default) == default
    assert result.err() == error
    with pytest.raises(UnwrapError):
        result.unwrap()


@given(value=payloads)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_map_identity(value: object) -> None:
    assert Ok(value).map(lambda x: x) == Ok(value)


@given(result=results)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_and_then_ok_is_identity(result: Ok[object] | Err[object]) -> None:
    assert result.and_then(Ok) == result


@given(error=payloads, value=payloads)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_short_circuit(error: object, value: object) -> None:
    Err(error).map(_never)
    Err(error).and_then(_never)
    Err(error).filter(_never)
    Ok(value).map_err(_never)
    Ok(value).or_else(_never)


@given(result=int_results)
@settings(max_examples=100, deadline=None, derandomize=True)
def test_and_then_associativity(result: Ok[int] | Err[str]) -> None:
    left = result.and_then(_step).and_then(_halve)
    right = result.and_then(lambda x: _step(x).and_then(_halve))
    assert left == right


@given(items=st.lists(int_results, max_size=8))
@settings(max_examples=100, deadline=None, derandomize=True)
def test_all_ok_matches_first_failure_policy(items: list[Ok[int] | Err[str]]) -> None:
    errors = [r for r in items if r.is_err()]
    expected = errors[0] if errors else Ok([r.unwrap() for r in items])
    assert all_ok(items) == expected


@given(items=st.lists(int_results, min_size=1, max_size=8))
@settings(max_examples=100, deadline=None, derandomize=True)
def test_any_ok_first_success_last_failure(items: list[Ok[int] | Err[str]]) -> None:
    oks = [r for r in items if r.is_ok()]
    expected = oks[0] if oks else items[-1]
    assert any_ok(items) == expected


# --- Documented examples ---


def test_documented_aggregate_examples() -> None:
    assert all_ok([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])
    assert all_ok([Ok(1), Err("x"), Ok(3)]) == Err("x")
    assert any_ok([Err("a"), Ok("b"), Err("c")]) == Ok("b")
    assert any_ok([Err("a"), Err("b")]) == Err("b")


def test_documented_constructor_examples() -> None:
    def load() -> None:
        raise RuntimeError("boom")

    assert try_with("loading", load) == Err("loading: boom")
    assert validate(17, lambda a: a >= 18, "too young") == Err("too young")


def test_documented_filter_examples() -> None:
    def is_even(n: int) -> bool:
        return n % 2 == 0

    assert Ok(5).filter(is_even, "not even") == Err("not even")
    assert Ok(4).filter(is_even, "not even") == Ok(4)
