"""Seeded mock entropy source for deterministic tests.

Produces reproducible bytes from a numpy generator. Marked weak with the
lowest preference so it is never chosen for real seeding unless explicitly
restricted to.
"""

from __future__ import annotations

import numpy as np

from secure_bytes.entropy.base import EntropySource
from secure_bytes.entropy.registry import register_entropy_source


@register_entropy_source("mock")
class MockEntropySource(EntropySource):
    """Deterministic byte source for testing.

    Usage:
        - **Reproducible generators**: two handles seeded from
          ``MockEntropySource(seed=1)`` produce identical output.
        - **Constant seeds**: ``fill=0x00`` returns a fixed byte pattern.

    Args:
        seed: Optional RNG seed for reproducible output.
        fill: If given, every byte returned equals this value.
    """

    strong = False
    preference = 1000

    def __init__(self, seed: int | None = None, fill: int | None = None) -> None:
        self._seed = seed
        self._fill = fill
        self._rng = np.random.default_rng(seed)
        self.bytes_served = 0

    @property
    def name(self) -> str:
        """Return ``'mock'``."""
        return "mock"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    def get_random_bytes(self, n: int) -> bytes:
        """Return *n* reproducible bytes.

        Args:
            n: Number of bytes to generate.

        Returns:
            Exactly *n* bytes.
        """
        self.bytes_served += n
        if self._fill is not None:
            return bytes([self._fill]) * n
        return self._rng.bytes(n)

    def close(self) -> None:
        """No-op: no resources to release."""
