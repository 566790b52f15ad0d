# topmark:header:start
#
#   project      : SgrMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the SgrMark test suite.

Sets up global fixtures and verbose logging for test runs.

Notes:
    Build renderers explicitly in tests (`default_registry()` returns a fresh
    registry every time) so no test can leak tags into another.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from sgrmark.config import logging
from sgrmark.core.state import BufferState
from sgrmark.registry.builtins import default_registry

if TYPE_CHECKING:
    from pathlib import Path

    from sgrmark.registry.renderer import RegistryRenderer

F = TypeVar("F", bound=Callable[..., object])


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return cast("Callable[[F], F]", pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_sgrmark_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell environment out of the tests.

    Removes ``SGRMARK_LOG_LEVEL`` (accidental DEBUG/TRACE noise) and
    ``NO_COLOR`` (which would change the CLI's color mode).
    """
    monkeypatch.delenv("SGRMARK_LOG_LEVEL", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so detailed output is captured on failure."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def registry() -> RegistryRenderer:
    """A fresh registry preloaded with the built-in tags."""
    return default_registry()


@pytest.fixture
def buffer() -> BufferState:
    """An empty 8-bit buffer state."""
    return BufferState()


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty project directory.

    The directory carries a ``.git`` marker so config discovery never walks
    into the real filesystem above it.

    Returns:
        Path: The project directory (also the working directory).
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / ".git").mkdir()
    monkeypatch.chdir(cwd)
    return cwd
