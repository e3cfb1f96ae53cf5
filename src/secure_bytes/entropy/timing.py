"""Weak entropy source derived from CPU timing jitter.

For each output byte, eight timing measurements of tight SHA-256 loops are
taken and the least-significant bit of each nanosecond delta is kept. The
result depends on CPU scheduling, cache state and thermal throttling.

Timing noise is not cryptographically strong. This source is only selected
when the caller passes ``allow_weak=True`` and is otherwise ignored.
"""

from __future__ import annotations

import hashlib
import time

from secure_bytes.entropy.base import EntropySource
from secure_bytes.entropy.registry import register_entropy_source

_BITS_PER_BYTE = 8


@register_entropy_source("timing")
class TimingNoiseSource(EntropySource):
    """CPU timing jitter: always available, NOT cryptographically strong.

    Args:
        hash_iterations: SHA-256 iterations per timing measurement. More
            iterations means more timing variance but also more latency.
    """

    strong = False
    preference = 90

    def __init__(self, hash_iterations: int = 64) -> None:
        self._hash_iterations = hash_iterations

    @property
    def name(self) -> str:
        """Return ``'timing'``."""
        return "timing"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    def get_random_bytes(self, n: int) -> bytes:
        """Generate *n* bytes from timing jitter.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes.
        """
        result = bytearray(n)
        for i in range(n):
            byte_val = 0
            for bit in range(_BITS_PER_BYTE):
                t0 = time.perf_counter_ns()
                h = hashlib.sha256(b"secure_bytes.timing")
                for _ in range(self._hash_iterations):
                    h = hashlib.sha256(h.digest())
                delta = time.perf_counter_ns() - t0
                byte_val |= (delta & 1) << bit
            result[i] = byte_val
        return bytes(result)

    def close(self) -> None:
        """No-op: no resources to release."""
