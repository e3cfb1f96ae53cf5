"""Fallback entropy source: composition wrapper with transparent failover.

``FallbackEntropySource`` wraps a *primary* and a *fallback* source. When the
primary raises :class:`~secure_bytes.exceptions.EntropyUnavailableError`, the
wrapper delegates to the fallback. All other exceptions propagate unchanged.
The seed builder only composes one when the caller allowed weak seeding.
"""

from __future__ import annotations

import logging

from secure_bytes.entropy.base import EntropySource
from secure_bytes.exceptions import EntropyUnavailableError

logger = logging.getLogger("secure_bytes")


class FallbackEntropySource(EntropySource):
    """Composition wrapper: tries primary, falls back on ``EntropyUnavailableError``.

    Reports which source was actually used via :attr:`last_source_used` and
    whether that source was strong via :attr:`last_source_strong`.

    Args:
        primary: The preferred entropy source.
        fallback: The source to use when the primary is unavailable.
    """

    def __init__(self, primary: EntropySource, fallback: EntropySource) -> None:
        self._primary = primary
        self._fallback = fallback
        self._last_source: EntropySource = primary

    @property
    def name(self) -> str:
        """Return a compound name: ``'<primary>+<fallback>'``."""
        return f"{self._primary.name}+{self._fallback.name}"

    @property
    def is_available(self) -> bool:
        """``True`` if either the primary or fallback is available."""
        return self._primary.is_available or self._fallback.is_available

    @property
    def last_source_used(self) -> str:
        """Name of the source that provided bytes on the last call."""
        return self._last_source.name

    @property
    def last_source_strong(self) -> bool:
        """Strength of the source that provided bytes on the last call."""
        return self._last_source.strong

    def get_random_bytes(self, n: int) -> bytes:
        """Fetch bytes from the primary source, falling back if unavailable.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes from the primary or fallback source.

        Raises:
            EntropyUnavailableError: If **both** primary and fallback fail.
        """
        try:
            data = self._primary.get_random_bytes(n)
            self._last_source = self._primary
            return data
        except EntropyUnavailableError:
            logger.warning(
                "Entropy source %r unavailable, falling back to %r",
                self._primary.name,
                self._fallback.name,
            )
            data = self._fallback.get_random_bytes(n)
            self._last_source = self._fallback
            return data

    def close(self) -> None:
        """Close both primary and fallback sources."""
        self._primary.close()
        self._fallback.close()
