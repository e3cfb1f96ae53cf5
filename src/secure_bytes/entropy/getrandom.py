"""Blocking kernel entropy source using ``os.getrandom()``.

``getrandom(2)`` with no flags blocks until the kernel entropy pool has been
initialised, then behaves like ``/dev/urandom``. It is preferred over
``os.urandom()`` when blocking is acceptable, and skipped when the caller
asks for ``non_blocking`` seeding.
"""

from __future__ import annotations

import os

from secure_bytes.entropy.base import EntropySource
from secure_bytes.entropy.registry import register_entropy_source
from secure_bytes.exceptions import EntropyUnavailableError


@register_entropy_source("getrandom")
class GetrandomEntropySource(EntropySource):
    """``os.getrandom(n, 0)`` wrapper (Linux only)."""

    blocking = True
    preference = 10

    @property
    def name(self) -> str:
        """Return ``'getrandom'``."""
        return "getrandom"

    @property
    def is_available(self) -> bool:
        """``True`` where the interpreter exposes ``os.getrandom``."""
        return hasattr(os, "getrandom")

    def get_random_bytes(self, n: int) -> bytes:
        """Read *n* bytes, looping over short reads.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes of kernel entropy.

        Raises:
            EntropyUnavailableError: If the platform lacks ``getrandom`` or
                the system call fails.
        """
        if not self.is_available:
            raise EntropyUnavailableError("os.getrandom is not available on this platform")
        chunks: list[bytes] = []
        remaining = n
        while remaining > 0:
            try:
                chunk = os.getrandom(remaining, 0)
            except InterruptedError:
                continue
            except OSError as exc:
                raise EntropyUnavailableError(f"getrandom failed: {exc}") from exc
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def close(self) -> None:
        """No-op: no resources to release."""
