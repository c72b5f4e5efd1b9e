"""Shared pytest fixtures and test helpers for spgen tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator, Iterable

import pytest
from click.testing import CliRunner

from spgen.errors import EntropySourceError

# Qt widgets must not need a display in CI.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class ScriptedSource:
    """Entropy source that replays fixed indices, one per draw."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.bounds: list[int] = []

    def randbelow(self, upper: int) -> int:
        self.bounds.append(upper)
        if not self._values:
            raise AssertionError("ScriptedSource ran out of values")
        return self._values.pop(0)


class FailingSource:
    """Entropy source that is always unavailable."""

    def __init__(self) -> None:
        self.calls = 0

    def randbelow(self, upper: int) -> int:
        self.calls += 1
        raise EntropySourceError("entropy pool unavailable")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def failing_source() -> FailingSource:
    return FailingSource()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    spgen_logger = logging.getLogger("spgen")
    spgen_level = spgen_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    spgen_logger.setLevel(spgen_level)


@pytest.fixture
def scripted_source() -> type[ScriptedSource]:
    """Factory: ``scripted_source([5, 0, ...])``."""
    return ScriptedSource
