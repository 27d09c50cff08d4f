"""Boundary adapters between Results and futures.

Nothing here schedules work. ``to_future`` hands back a future that is
already resolved (Ok) or rejected (Err) so code written against awaitables
can consume a synchronous Result; ``try_await`` and ``from_future`` go the
other way.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
import concurrent.futures
import logging
from typing import Any

from resultkit.config import get_config
from resultkit.errors import RejectedError
from resultkit.result import Err, Ok

log = logging.getLogger(__name__)


def _rejection(error: Any) -> BaseException:
    # Futures refuse StopIteration outright.
    if isinstance(error, BaseException) and not isinstance(error, StopIteration):
        return error
    return RejectedError(error)


def to_future[T](
    result: Ok[T] | Err[Any], *, loop: asyncio.AbstractEventLoop | None = None
) -> asyncio.Future[T]:
    """Return a completed ``asyncio.Future`` mirroring ``result``.

    Ok resolves with its value. Err rejects with its payload if that is an
    exception, otherwise (or for ``StopIteration``) with
    ``RejectedError(payload)``.

    Raises:
        RuntimeError: No ``loop`` was given and no event loop is running.
    """
    if loop is None:
        loop = asyncio.get_running_loop()
    future: asyncio.Future[T] = loop.create_future()
    match result:
        case Ok(value):
            future.set_result(value)
        case Err(error):
            future.set_exception(_rejection(error))
        case _:
            raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")
    return future


def to_concurrent_future[T](result: Ok[T] | Err[Any]) -> concurrent.futures.Future[T]:
    """Like ``to_future`` for ``concurrent.futures``; needs no event loop."""
    future: concurrent.futures.Future[T] = concurrent.futures.Future()
    match result:
        case Ok(value):
            future.set_result(value)
        case Err(error):
            future.set_exception(_rejection(error))
        case _:
            raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")
    return future


async def try_await[T](awaitable: Awaitable[T]) -> Ok[T] | Err[Exception]:
    """Await ``awaitable`` and capture its outcome like ``try_call``.

    Cancellation is never captured.
    """
    config = get_config()
    try:
        value = await awaitable
    except asyncio.CancelledError:
        raise
    except config.capture as exc:
        if config.log_captures:
            log.debug(
                "Captured %s while awaiting %r",
                type(exc).__name__,
                awaitable,
                exc_info=exc,
            )
        return Err(exc)  # type: ignore[arg-type]
    return Ok(value)


def from_future[T](
    future: asyncio.Future[T] | concurrent.futures.Future[T],
) -> Ok[T] | Err[Any]:
    """Convert a completed future back into a Result.

    A ``RejectedError`` is unwrapped to the payload it carries, so
    ``from_future(to_future(r)) == r`` for non-exception payloads.

    Raises:
        asyncio.InvalidStateError: The future is not done yet.
        CancelledError: The future was cancelled.
    """
    if not future.done():
        raise asyncio.InvalidStateError("from_future() requires a completed future")
    exc = future.exception()
    if exc is None:
        return Ok(future.result())
    if isinstance(exc, RejectedError):
        return Err(exc.error)
    return Err(exc)
