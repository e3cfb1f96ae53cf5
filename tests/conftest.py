"""Shared pytest fixtures for secure-bytes tests.

Provides reusable seed configurations, deterministic entropy functions and a
scripted generator handle for exercising the word-consuming components
without a real generator.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import numpy as np
import pytest

from secure_bytes import secure
from secure_bytes.config import SeedConfig


class ScriptedHandle:
    """Test double for GeneratorHandle: serves a fixed list of words in order.

    Records the size of every batch requested so tests can assert how many
    words a component consumed.
    """

    def __init__(self, words: Iterable[int]) -> None:
        self._words = list(words)
        self.requests: list[int] = []

    @property
    def words_drawn(self) -> int:
        return sum(self.requests)

    def next_uint32s(self, count: int) -> np.ndarray:
        self.requests.append(count)
        if count > len(self._words):
            raise AssertionError(f"script exhausted: wanted {count}, have {len(self._words)}")
        batch, self._words = self._words[:count], self._words[count:]
        return np.array(batch, dtype=np.uint32)

    def next_uint32(self) -> int:
        return int(self.next_uint32s(1)[0])


class CountingEntropy:
    """Deterministic ``custom_source`` callable that counts invocations."""

    def __init__(self, fill: Callable[[int], bytes] | None = None) -> None:
        self._fill = fill or (lambda n: bytes(range(n)))
        self.calls: list[int] = []

    def __call__(self, n: int) -> bytes:
        self.calls.append(n)
        return self._fill(n)


@pytest.fixture
def default_config() -> SeedConfig:
    """Return a SeedConfig with all default values."""
    return SeedConfig()


@pytest.fixture
def counting_entropy() -> CountingEntropy:
    """Return a counting entropy function producing ``0, 1, 2, ...`` bytes."""
    return CountingEntropy()


@pytest.fixture
def custom_config(counting_entropy: CountingEntropy) -> SeedConfig:
    """Return a config seeded from ``counting_entropy`` with logging silenced."""
    return SeedConfig(custom_source=counting_entropy, log_level="none")


@pytest.fixture
def scripted_handle() -> Callable[[Iterable[int]], ScriptedHandle]:
    """Return a factory for ScriptedHandle instances."""
    return ScriptedHandle


@pytest.fixture
def fresh_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """Give the function-style API a new, unseeded shared instance."""
    monkeypatch.setattr(secure, "_default", None)
