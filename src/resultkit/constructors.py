"""Build Results from fallible calls and predicates."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any

from resultkit.config import get_config
from resultkit.result import Err, Ok

log = logging.getLogger(__name__)


def try_call[**P, T](
    operation: Callable[P, T], /, *args: P.args, **kwargs: P.kwargs
) -> Ok[T] | Err[Exception]:
    """Call ``operation`` and capture its outcome.

    A normal return becomes ``Ok(value)``. An exception of a configured
    capture type (``Exception`` by default) becomes ``Err(exception)``; only
    that one exception object is kept, with its cause chain attached.
    Interrupts and cancellation always propagate, and side effects performed
    before the failure are not undone.

    Example:
        try_call(int, "42")    # Ok(42)
        try_call(int, "nope")  # Err(ValueError(...))
    """
    config = get_config()
    try:
        value = operation(*args, **kwargs)
    except config.capture as exc:
        if config.log_captures:
            log.debug("Captured %s from %r", type(exc).__name__, operation, exc_info=exc)
        return Err(exc)  # type: ignore[arg-type]
    return Ok(value)


def try_with[**P, T](
    context: str, operation: Callable[P, T], /, *args: P.args, **kwargs: P.kwargs
) -> Ok[T] | Err[str]:
    """Like ``try_call``, but describe a failure as ``"{context}: {error}"``.

    Example:
        try_with("loading", json.loads, "{")  # Err("loading: Expecting ...")
    """
    return try_call(operation, *args, **kwargs).map_err(lambda exc: f"{context}: {exc}")


def validate[T](
    value: T, predicate: Callable[[T], object], error: Any = None
) -> Ok[T] | Err[Any]:
    """Return ``Ok(value)`` if ``predicate(value)`` holds, else ``Err(error)``.

    Without an explicit ``error`` the configured ``validate_error`` is used.
    The predicate is not protected: if it raises, the exception propagates.
    """
    if predicate(value):
        return Ok(value)
    return Err(get_config().validate_error if error is None else error)
