"""Lazily seeded, seed-once 32-bit generator handle.

A :class:`GeneratorHandle` owns exactly one numpy ``Generator`` (PCG64 bit
generator). It is created empty and seeded on the first demand for output
from a :class:`~secure_bytes.seed.SeedBuilder`. After that the seed
configuration is frozen: :meth:`GeneratorHandle.configure_seed` returns
``False`` and changes nothing.

Seeding, reconfiguration and draws are serialized by one re-entrant lock, so
two threads racing on first use cannot both seed the handle.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

import numpy as np

from secure_bytes.config import SeedConfig, resolve_seed_config
from secure_bytes.logging.logger import SeedLogger
from secure_bytes.seed import SeedBuilder

logger = logging.getLogger("secure_bytes")

_UINT32_SPAN = 1 << 32


class GeneratorHandle:
    """Owner of a single uniform 32-bit generator.

    Args:
        config: Seed configuration. ``None`` loads defaults from the
            environment on first use.
    """

    def __init__(self, config: SeedConfig | None = None) -> None:
        self._config = config
        self._generator: np.random.Generator | None = None
        self._seed_logger: SeedLogger | None = None
        self._lock = threading.RLock()

    @property
    def is_initialized(self) -> bool:
        """Whether the generator has been seeded."""
        return self._generator is not None

    @property
    def config(self) -> SeedConfig:
        """The seed configuration in effect (loaded lazily)."""
        with self._lock:
            if self._config is None:
                self._config = SeedConfig()
            return self._config

    def configure_seed(self, **options: Any) -> bool:
        """Replace the seed configuration if the generator is still unseeded.

        Args:
            **options: :class:`~secure_bytes.config.SeedConfig` field values.

        Returns:
            ``True`` if the options were stored, ``False`` if the handle has
            already been seeded (nothing is changed in that case).

        Raises:
            ConfigValidationError: If the handle is unseeded and the options
                are invalid.
        """
        with self._lock:
            if self._generator is not None:
                logger.debug("Ignoring seed reconfiguration: generator already seeded")
                return False
            self._config = resolve_seed_config(self.config, options)
            return True

    def ensure_initialized(self) -> np.random.Generator:
        """Seed the generator on first call; no-op afterwards.

        Returns:
            The seeded numpy generator.

        Raises:
            EntropyUnavailableError: If seeding fails. The handle stays
                unseeded and a later call retries from scratch.
        """
        generator = self._generator
        if generator is not None:
            return generator
        with self._lock:
            if self._generator is not None:
                return self._generator
            config = self.config
            builder = SeedBuilder(config)
            words = builder.build_seed()
            generator = np.random.Generator(np.random.PCG64(np.random.SeedSequence(words)))

            self._seed_logger = SeedLogger(config.log_level)
            if builder.last_record is not None:
                self._seed_logger.log_seed(builder.last_record)
            self._generator = generator
            return generator

    def next_uint32(self) -> int:
        """Return one pseudo-random value in ``[0, 2**32)``."""
        return int(self.next_uint32s(1)[0])

    def next_uint32s(self, count: int) -> np.ndarray:
        """Return *count* pseudo-random values as a ``uint32`` array.

        Args:
            count: Number of words to draw (``>= 0``).

        Returns:
            1-D array of dtype ``uint32`` and length *count*.
        """
        with self._lock:
            generator = self.ensure_initialized()
            return generator.integers(0, _UINT32_SPAN, size=count, dtype=np.uint32)

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this handle.

        Returns:
            Dictionary with ``'initialized'`` and, once seeded, the seed
            source and width.
        """
        status: dict[str, Any] = {"initialized": self.is_initialized}
        record = self._seed_logger.last_record if self._seed_logger is not None else None
        if record is not None:
            status.update(
                source=record.entropy_source_used,
                weak=record.entropy_is_weak,
                bit_width=record.bit_width,
            )
        return status
