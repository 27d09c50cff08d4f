"""Exception hierarchy for resultkit.

Domain failures never appear here: they travel as ``Err`` payloads. These
exceptions cover usage failures (misuse of the algebra) and configuration.
"""

from __future__ import annotations

from typing import Any


class ResultkitError(Exception):
    """Base exception for all resultkit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(ResultkitError):
    """Configuration validation or resolution failed."""


class UsageError(ResultkitError):
    """The algebra was used incorrectly (a programming error, not a domain failure)."""


class UnwrapError(UsageError):
    """A payload was extracted from the wrong variant.

    ``error`` holds the payload that was found instead: the Err payload for
    ``unwrap``/``expect``, the Ok payload for ``unwrap_err``.
    """

    def __init__(self, message: str, *, error: Any, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.error = error


class UnhandledVariantError(UsageError):
    """``match`` was called without a handler for every variant."""

    def __init__(
        self, message: str, *, missing: tuple[str, ...], hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)
        self.missing = missing


class EmptyInputError(UsageError):
    """An aggregator with no defined result for empty input received none."""


class RejectedError(ResultkitError):
    """A future was rejected with an Err payload that is not an exception."""

    def __init__(self, error: Any) -> None:
        super().__init__(f"Result rejected with {error!r}")
        self.error = error
