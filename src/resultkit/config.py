"""Configuration: frozen Config with context-scoped overrides."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
import os

import dotenv

from resultkit.errors import ConfigurationError

_ENV_PREFIX = "RESULTKIT_"


def _env_flag(name: str) -> bool:
    return os.getenv(f"{_ENV_PREFIX}{name}") == "1"


@dataclass(frozen=True)
class Config:
    """Immutable defaults used by constructors and combinators.

    Example:
        with use_config(Config(validate_error="invalid input")):
            validate(17, lambda a: a >= 18)  # Err("invalid input")
    """

    #: Err payload used by ``validate`` when no error is given.
    validate_error: str = "validation failed"
    #: Err payload used by ``filter`` when no error is given.
    filter_error: str = "filter predicate failed"
    #: Exception types that ``try_call``/``try_with``/``try_await`` capture.
    capture: tuple[type[BaseException], ...] = (Exception,)
    #: Emit a DEBUG record for every captured exception.
    log_captures: bool = field(default_factory=lambda: _env_flag("LOG_CAPTURES"))

    def __post_init__(self) -> None:
        """Validate messages and capture types."""
        for name in ("validate_error", "filter_error"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ConfigurationError(
                    f"{name} must be a non-empty string, got {value!r}",
                    hint="Pass an explicit error to the call instead of an empty default.",
                )

        if not isinstance(self.capture, tuple) or not self.capture:
            raise ConfigurationError(
                f"capture must be a non-empty tuple, got {self.capture!r}",
                hint="Use (Exception,) to capture ordinary failures.",
            )
        for exc_type in self.capture:
            if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
                raise ConfigurationError(
                    f"capture entries must be exception classes, got {exc_type!r}"
                )
            # KeyboardInterrupt, SystemExit, GeneratorExit and
            # asyncio.CancelledError all sit outside Exception.
            if not issubclass(exc_type, Exception):
                raise ConfigurationError(
                    f"{exc_type.__name__} cannot be captured",
                    hint="Interrupts and cancellation must propagate.",
                )

    @classmethod
    def from_env(cls) -> Config:
        """Build a Config from ``RESULTKIT_*`` environment variables."""
        overrides: dict[str, str] = {}
        for name in ("validate_error", "filter_error"):
            value = os.getenv(f"{_ENV_PREFIX}{name.upper()}")
            if value is not None:
                overrides[name] = value
        return cls(**overrides)  # type: ignore[arg-type]


_config_var: ContextVar[Config | None] = ContextVar("resultkit_config", default=None)
_default: Config | None = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Load a .env file from the working directory, at most once per process."""
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))
    _DOTENV_LOADED = True


def get_config() -> Config:
    """Return the active configuration.

    A ``use_config`` override wins; otherwise the environment-derived default
    is built on first use and reused. Building it is the only point where a
    ``.env`` file is read.
    """
    global _default
    scoped = _config_var.get()
    if scoped is not None:
        return scoped
    if _default is None:
        _load_dotenv_once()
        _default = Config.from_env()
    return _default


def reset_config() -> None:
    """Forget the cached environment-derived default."""
    global _default
    _default = None


@contextmanager
def use_config(config: Config) -> Iterator[Config]:
    """Scope ``config`` to the current context (thread or task)."""
    if not isinstance(config, Config):
        raise ConfigurationError(f"Expected Config, got {type(config).__name__}")
    token = _config_var.set(config)
    try:
        yield config
    finally:
        _config_var.reset(token)
