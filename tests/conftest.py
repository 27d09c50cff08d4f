"""Pytest configuration and fixtures.

Provides environment isolation, config reset, marker registration, and a
small callback double. Fixtures here are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
import logging
import os
from typing import Any

import pytest

from resultkit.config import reset_config

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class Recorder:
    """Callable double that records every argument it is called with.

    Use to assert that a combinator did (or did not) invoke its callback.
    """

    returns: Any = None
    raises: BaseException | None = None
    calls: list[Any] = field(default_factory=list)

    def __call__(self, arg: Any) -> Any:
        self.calls.append(arg)
        if self.raises is not None:
            raise self.raises
        return self.returns

    @property
    def called(self) -> bool:
        return bool(self.calls)


@pytest.fixture
def recorder() -> Recorder:
    """Return a fresh Recorder that returns None (not autouse)."""
    return Recorder()


@pytest.fixture
def make_recorder() -> type[Recorder]:
    """Return the Recorder class for tests that need several or a custom one."""
    return Recorder


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_resultkit_env(request, monkeypatch):
    """Clear RESULTKIT_* env vars and the cached default Config for each test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if not request.node.get_closest_marker("allow_env_pollution"):
        for key in list(os.environ.keys()):
            if key.startswith("RESULTKIT_"):
                monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_asyncio_logger():
    """Silence asyncio's 'exception was never retrieved' noise."""
    logging.getLogger("asyncio").setLevel(logging.CRITICAL)


# =============================================================================
# Pytest Hooks
# =============================================================================


def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "contract: Algebraic law and public-surface contract tests",
        "allow_dotenv: Permit python-dotenv to read .env files",
        "allow_env_pollution: Keep RESULTKIT_* environment variables",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)
