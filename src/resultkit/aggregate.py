"""Combine many independently produced Results into one."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NoReturn

from resultkit.errors import EmptyInputError
from resultkit.result import Err, Ok


def all_ok[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect every Ok value in order, or return the first Err.

    The input is consumed lazily and nothing after the first Err is pulled,
    so a generator stops at the failure. Empty input gives ``Ok([])``.

    Example:
        all_ok([Ok(1), Ok(2), Ok(3)])       # Ok([1, 2, 3])
        all_ok([Ok(1), Err("x"), Ok(3)])    # Err("x")
    """
    values: list[T] = []
    for result in results:
        match result:
            case Ok(value):
                values.append(value)
            case Err():
                return result
            case _:
                _not_a_result(result)
    return Ok(values)


def any_ok[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[T] | Err[E]:
    """Return the first Ok, or the last Err when every result failed.

    Raises:
        EmptyInputError: ``results`` was empty, so there is neither a success
            nor a failure to return.
    """
    last: Err[E] | None = None
    for result in results:
        match result:
            case Ok():
                return result
            case Err():
                last = result
            case _:
                _not_a_result(result)
    if last is None:
        raise EmptyInputError(
            "any_ok() received no results",
            hint="Check for an empty input before aggregating, or use all_ok().",
        )
    return last


def partition[T, E](results: Iterable[Ok[T] | Err[E]]) -> tuple[list[T], list[E]]:
    """Split results into ``(values, errors)``, preserving order within each."""
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        match result:
            case Ok(value):
                values.append(value)
            case Err(error):
                errors.append(error)
            case _:
                _not_a_result(result)
    return values, errors


def _not_a_result(obj: object) -> NoReturn:
    raise TypeError(f"Expected Ok or Err, got {type(obj).__name__}")
