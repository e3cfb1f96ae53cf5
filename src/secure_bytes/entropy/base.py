"""Abstract base class for all entropy sources.

Every entropy source, whether the OS CSPRNG, CPU timing jitter, a
caller-supplied function or a test mock, implements this interface. The ABC
carries class-level traits (``strong``, ``blocking``, ``preference``) that the
seed builder reads before instantiating a source. Subclasses must implement
the four abstract members: ``name``, ``is_available``, ``get_random_bytes()``
and ``close()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class EntropySource(ABC):
    """Abstract base for all entropy sources.

    Implementations must provide random bytes on demand. Sources are only
    consulted while seeding a generator, so throughput is irrelevant; quality
    and honest reporting of ``strong``/``blocking`` are what matter.
    """

    strong: ClassVar[bool] = True
    """Whether the source is suitable for cryptographic seeding."""

    blocking: ClassVar[bool] = False
    """Whether ``get_random_bytes()`` may block waiting for entropy."""

    preference: ClassVar[int] = 100
    """Selection order; lower values are tried first."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'system'``)."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the source can currently provide entropy."""

    @abstractmethod
    def get_random_bytes(self, n: int) -> bytes:
        """Return exactly *n* random bytes.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes of entropy.

        Raises:
            EntropyUnavailableError: If the source cannot provide bytes.
        """

    @abstractmethod
    def close(self) -> None:
        """Release resources (file handles, devices)."""
