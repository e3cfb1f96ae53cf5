"""System entropy source using ``os.urandom()``.

Cryptographically secure, never blocks once the OS pool is initialised, and
available on every platform. This is the default seed source wherever
``getrandom(2)`` is not offered.
"""

from __future__ import annotations

import os

from secure_bytes.entropy.base import EntropySource
from secure_bytes.entropy.registry import register_entropy_source


@register_entropy_source("system")
class SystemEntropySource(EntropySource):
    """``os.urandom()`` wrapper: always available, cryptographically secure."""

    preference = 20

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    def get_random_bytes(self, n: int) -> bytes:
        """Return *n* bytes from the OS CSPRNG.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes of entropy from ``os.urandom()``.
        """
        return os.urandom(n)

    def close(self) -> None:
        """No-op: no resources to release."""
