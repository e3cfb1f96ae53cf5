"""Data types for the seed diagnostics subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SeedRecord:
    """Immutable record of a single generator seeding event.

    Attributes:
        timestamp_ns: Wall-clock time of seeding (nanoseconds since epoch).
        entropy_fetch_ms: Time spent fetching seed entropy (milliseconds).
        entropy_source_used: Name of the entropy source that provided bytes.
        entropy_is_weak: True if a non-cryptographic source was used.
        bit_width: Seed size in bits after normalization.
        word_count: Number of 32-bit seed words.
    """

    timestamp_ns: int
    entropy_fetch_ms: float
    entropy_source_used: str
    entropy_is_weak: bool
    bit_width: int
    word_count: int
