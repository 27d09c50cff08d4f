"""Result: a two-variant success/failure value and its combinators.

``Ok`` carries a success value, ``Err`` carries a failure value. Both are
frozen dataclasses with the same method set, so a chain never needs to check
the tag itself:

    Ok(2).map(lambda n: n * 10).and_then(lambda n: Ok(n + 1))  # Ok(21)
    Err("boom").map(lambda n: n * 10)                           # Err("boom")

Structural pattern matching works on the variants directly:

    match result:
        case Ok(value): ...
        case Err(error): ...
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
import dataclasses
from typing import TYPE_CHECKING, Any, Literal, NoReturn, Self, TypeGuard

from resultkit.config import get_config
from resultkit.errors import UnhandledVariantError, UnwrapError

if TYPE_CHECKING:
    import asyncio

_VARIANTS: tuple[str, ...] = ("Ok", "Err")
_KEYWORD_HANDLERS: dict[str, str] = {"ok": "Ok", "err": "Err"}


@dataclasses.dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    # --- Inspectors ---

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    # --- Extractors ---

    def unwrap(self) -> T:
        return self.value

    def expect(self, message: str) -> T:  # noqa: ARG002
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(
            f"Called unwrap_err on Ok: {self.value!r}",
            error=self.value,
        )

    def unwrap_or(self, default: object) -> T:  # noqa: ARG002
        return self.value

    def unwrap_or_else(self, fn: Callable[[Any], object]) -> T:  # noqa: ARG002
        return self.value

    def ok(self) -> T:
        return self.value

    def err(self) -> None:
        return None

    def match[U](
        self,
        handlers: Mapping[str, Callable[[Any], U]] | None = None,
        /,
        **named: Callable[[Any], U],
    ) -> U:
        on_ok, _ = _resolve_handlers(handlers, named)
        return on_ok(self.value)

    # --- Transformations ---

    def map[U](self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], object]) -> Self:  # noqa: ARG002
        return self

    def filter(self, predicate: Callable[[T], object], error: Any = None) -> Result[T, Any]:
        if predicate(self.value):
            return self
        return Err(get_config().filter_error if error is None else error)

    # --- Chaining ---

    def and_then[R: Ok[Any] | Err[Any]](self, fn: Callable[[T], R]) -> R:
        return _expect_result(fn(self.value), "and_then")

    def or_else(self, fn: Callable[[Any], object]) -> Self:  # noqa: ARG002
        return self

    def and_[R: Ok[Any] | Err[Any]](self, other: R) -> R:
        return other

    def or_(self, other: object) -> Self:  # noqa: ARG002
        return self

    # --- Observation ---

    def inspect(self, fn: Callable[[T], object]) -> Self:
        fn(self.value)
        return self

    def inspect_err(self, fn: Callable[[Any], object]) -> Self:  # noqa: ARG002
        return self

    # --- Adapters ---

    def as_future(self, *, loop: asyncio.AbstractEventLoop | None = None) -> asyncio.Future[T]:
        from resultkit.aio import to_future

        return to_future(self, loop=loop)


@dataclasses.dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result, containing the error."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"

    # --- Inspectors ---

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    # --- Extractors ---

    def unwrap(self) -> NoReturn:
        self._fail(f"Called unwrap on Err: {self.error!r}")

    def expect(self, message: str) -> NoReturn:
        self._fail(f"{message}: {self.error!r}")

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or[D](self, default: D) -> D:
        return default

    def unwrap_or_else[D](self, fn: Callable[[E], D]) -> D:
        return fn(self.error)

    def ok(self) -> None:
        return None

    def err(self) -> E:
        return self.error

    def match[U](
        self,
        handlers: Mapping[str, Callable[[Any], U]] | None = None,
        /,
        **named: Callable[[Any], U],
    ) -> U:
        _, on_err = _resolve_handlers(handlers, named)
        return on_err(self.error)

    # --- Transformations ---

    def map(self, fn: Callable[[Any], object]) -> Self:  # noqa: ARG002
        return self

    def map_err[F](self, fn: Callable[[E], F]) -> Err[F]:
        return Err(fn(self.error))

    def filter(self, predicate: Callable[[Any], object], error: Any = None) -> Self:  # noqa: ARG002
        return self

    # --- Chaining ---

    def and_then(self, fn: Callable[[Any], object]) -> Self:  # noqa: ARG002
        return self

    def or_else[R: Ok[Any] | Err[Any]](self, fn: Callable[[E], R]) -> R:
        return _expect_result(fn(self.error), "or_else")

    def and_(self, other: object) -> Self:  # noqa: ARG002
        return self

    def or_[R: Ok[Any] | Err[Any]](self, other: R) -> R:
        return other

    # --- Observation ---

    def inspect(self, fn: Callable[[Any], object]) -> Self:  # noqa: ARG002
        return self

    def inspect_err(self, fn: Callable[[E], object]) -> Self:
        fn(self.error)
        return self

    # --- Adapters ---

    def as_future(self, *, loop: asyncio.AbstractEventLoop | None = None) -> asyncio.Future[Any]:
        from resultkit.aio import to_future

        return to_future(self, loop=loop)

    def _fail(self, message: str) -> NoReturn:
        if isinstance(self.error, BaseException):
            raise UnwrapError(message, error=self.error) from self.error
        raise UnwrapError(message, error=self.error)


type Result[T, E] = Ok[T] | Err[E]


def is_result(obj: object) -> TypeGuard[Ok[Any] | Err[Any]]:
    """Return True when ``obj`` is an ``Ok`` or an ``Err``."""
    return isinstance(obj, (Ok, Err))


def _expect_result[R](value: R, operation: str) -> R:
    if not is_result(value):
        raise TypeError(
            f"{operation} callback must return Ok or Err, got {type(value).__name__}"
        )
    return value


def _resolve_handlers(
    handlers: Mapping[str, Callable[[Any], Any]] | None,
    named: Mapping[str, Callable[[Any], Any]],
) -> tuple[Callable[[Any], Any], Callable[[Any], Any]]:
    """Merge mapping and keyword handlers; both variants must be covered."""
    table: dict[str, Callable[[Any], Any]] = dict(handlers or {})
    for key, fn in named.items():
        if key not in _KEYWORD_HANDLERS:
            raise TypeError(f"match() got an unexpected handler {key!r}")
        table[_KEYWORD_HANDLERS[key]] = fn

    missing = tuple(v for v in _VARIANTS if table.get(v) is None)
    if missing:
        raise UnhandledVariantError(
            f"match() is missing handlers for: {', '.join(missing)}",
            missing=missing,
            hint="Pass both handlers, e.g. result.match(ok=..., err=...).",
        )
    return table["Ok"], table["Err"]
