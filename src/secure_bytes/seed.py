"""Seed construction: entropy source selection and seed word extraction.

The builder turns a :class:`~secure_bytes.config.SeedConfig` into a list of
unsigned 32-bit words. The word count is fixed by the (already normalized)
``bit_width`` before any entropy is requested, so a blocking source is never
over- or under-drawn.
"""

from __future__ import annotations

import logging
import struct
import time
from typing import TYPE_CHECKING

from secure_bytes.entropy.custom import CallableEntropySource
from secure_bytes.entropy.fallback import FallbackEntropySource
from secure_bytes.entropy.registry import EntropySourceRegistry
from secure_bytes.exceptions import ConfigValidationError, EntropyUnavailableError
from secure_bytes.logging.types import SeedRecord

if TYPE_CHECKING:
    from secure_bytes.config import SeedConfig
    from secure_bytes.entropy.base import EntropySource

logger = logging.getLogger("secure_bytes")


def _check_source_names(config: SeedConfig) -> None:
    """Reject restrict/exclude names that no registered source carries."""
    known = set(EntropySourceRegistry.list_available())
    named = set(config.exclude_sources)
    if config.restrict_sources is not None:
        named |= set(config.restrict_sources)
    unknown = sorted(named - known)
    if unknown:
        raise ConfigValidationError(
            f"Unknown entropy source(s): {', '.join(unknown)}. "
            f"Available: {', '.join(sorted(known)) or '(none)'}"
        )


def select_source(config: SeedConfig) -> EntropySource:
    """Pick the entropy source that will seed a generator.

    A ``custom_source`` is used alone. Otherwise registered sources are tried
    in ascending ``preference`` after applying ``restrict_sources``,
    ``exclude_sources`` and ``non_blocking``. The first available strong
    source wins; with ``allow_weak`` the first available weak source is
    attached as a fallback, or used directly when no strong source remains.

    Args:
        config: Seed configuration.

    Returns:
        An EntropySource, potentially wrapped in FallbackEntropySource.

    Raises:
        ConfigValidationError: If a restricted or excluded name is unknown.
        EntropyUnavailableError: If no usable source remains.
    """
    if config.custom_source is not None:
        return CallableEntropySource(config.custom_source)

    _check_source_names(config)

    strong: EntropySource | None = None
    weak: EntropySource | None = None
    for name, source_cls in EntropySourceRegistry.by_preference():
        if config.restrict_sources is not None and name not in config.restrict_sources:
            continue
        if name in config.exclude_sources:
            continue
        if config.non_blocking and source_cls.blocking:
            logger.debug("Skipping blocking entropy source %r", name)
            continue
        if not source_cls.strong and not config.allow_weak:
            continue
        if source_cls.strong and strong is not None:
            continue
        if not source_cls.strong and weak is not None:
            continue

        source = source_cls()
        if not source.is_available:
            logger.debug("Entropy source %r is not available", name)
            source.close()
            continue
        if source_cls.strong:
            strong = source
        else:
            weak = source
        if strong is not None and (weak is not None or not config.allow_weak):
            break

    if strong is not None and weak is not None:
        return FallbackEntropySource(strong, weak)
    if strong is not None:
        return strong
    if weak is not None:
        logger.warning("No strong entropy source usable; seeding from weak source %r", weak.name)
        return weak
    raise EntropyUnavailableError(
        "No strong entropy source is available"
        + ("" if config.allow_weak else " (pass allow_weak=True to permit a weak source)")
    )


class SeedBuilder:
    """Fetch seed words for one generator from the configured source.

    Args:
        config: Seed configuration. ``bit_width`` is already normalized by
            the config validator.
    """

    def __init__(self, config: SeedConfig) -> None:
        self._config = config
        self._last_record: SeedRecord | None = None

    @property
    def word_count(self) -> int:
        """Number of 32-bit words :meth:`build_seed` returns."""
        return self._config.word_count

    @property
    def last_record(self) -> SeedRecord | None:
        """Diagnostics for the most recent successful :meth:`build_seed`."""
        return self._last_record

    def build_seed(self) -> list[int]:
        """Draw ``word_count * 4`` bytes and unpack them as uint32 words.

        Returns:
            ``word_count`` unsigned 32-bit integers.

        Raises:
            EntropyUnavailableError: If no source can supply the bytes, or a
                source returns a short read.
        """
        words = self.word_count
        n_bytes = words * 4
        source = select_source(self._config)
        try:
            t0 = time.perf_counter()
            raw = source.get_random_bytes(n_bytes)
            fetch_ms = (time.perf_counter() - t0) * 1000.0
        finally:
            source.close()

        if len(raw) != n_bytes:
            raise EntropyUnavailableError(
                f"Entropy source {source.name!r} returned {len(raw)} bytes, expected {n_bytes}"
            )

        if isinstance(source, FallbackEntropySource):
            used, weak = source.last_source_used, not source.last_source_strong
        else:
            used, weak = source.name, not source.strong

        self._last_record = SeedRecord(
            timestamp_ns=time.time_ns(),
            entropy_fetch_ms=fetch_ms,
            entropy_source_used=used,
            entropy_is_weak=weak,
            bit_width=self._config.bit_width,
            word_count=words,
        )
        return list(struct.unpack(f"<{words}I", raw))
