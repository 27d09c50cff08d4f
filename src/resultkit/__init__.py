"""resultkit: a two-variant Result value and its combinators.

Public API:
    - Ok / Err: the two variants, with inspectors, extractors and combinators
    - try_call() / try_with() / validate(): build Results from fallible calls
    - all_ok() / any_ok() / partition(): aggregate many Results
    - Config / use_config(): defaults for messages and captured exceptions
"""

from __future__ import annotations

import logging

from resultkit.aggregate import all_ok, any_ok, partition
from resultkit.config import Config, get_config, use_config
from resultkit.constructors import try_call, try_with, validate
from resultkit.errors import (
    ConfigurationError,
    EmptyInputError,
    RejectedError,
    ResultkitError,
    UnhandledVariantError,
    UnwrapError,
    UsageError,
)
from resultkit.result import Err, Ok, Result, is_result

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultkit")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultkit").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "EmptyInputError",
    "Err",
    "Ok",
    "RejectedError",
    "Result",
    "ResultkitError",
    "UnhandledVariantError",
    "UnwrapError",
    "UsageError",
    "all_ok",
    "any_ok",
    "get_config",
    "is_result",
    "partition",
    "try_call",
    "try_with",
    "use_config",
    "validate",
]
