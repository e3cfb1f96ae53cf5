"""Seed configuration for secure-bytes.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (SECURE_BYTES_*) -> .env file -> field
defaults.

Caller options are applied via resolve_seed_config() which creates a new
config instance without mutating the defaults. A config is frozen once built;
the generator that consumes it never sees it change.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from secure_bytes.exceptions import ConfigValidationError

SEED_MIN_BITS: int = 64
SEED_MAX_BITS: int = 512
SEED_WORD_BITS: int = 32

# All known option names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


def normalize_bit_width(bits: int) -> int:
    """Round *bits* up to a multiple of 32, then clamp into the seed bounds.

    Args:
        bits: Requested seed width in bits.

    Returns:
        A multiple of 32 in ``[SEED_MIN_BITS, SEED_MAX_BITS]``.
    """
    rounded = -(-bits // SEED_WORD_BITS) * SEED_WORD_BITS
    return max(SEED_MIN_BITS, min(SEED_MAX_BITS, rounded))


class SeedConfig(BaseSettings):
    """Configuration for seeding a generator.

    Resolution order: init kwargs -> env vars (SECURE_BYTES_*) -> .env file
    -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="SECURE_BYTES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # --- Seed size ---

    bit_width: int = Field(
        default=SEED_MIN_BITS,
        description="Seed size in bits (rounded up to 32, clamped to [64, 512])",
    )

    # --- Entropy source selection ---

    allow_weak: bool = Field(
        default=False,
        description="Permit a non-cryptographic source when no strong one is usable",
    )
    non_blocking: bool = Field(
        default=False,
        description="Skip entropy sources that may block",
    )
    restrict_sources: frozenset[str] | None = Field(
        default=None,
        description="Only these registered source names may be used (None = any)",
    )
    exclude_sources: frozenset[str] = Field(
        default=frozenset(),
        description="Registered source names that must never be used",
    )
    custom_source: Callable[[int], bytes] | None = Field(
        default=None,
        exclude=True,
        description="Caller-supplied entropy function; used exclusively when set",
    )

    # --- Logging ---

    log_level: Literal["none", "summary", "full"] = Field(
        default="summary",
        description="Seed event verbosity: 'none', 'summary', 'full'",
    )

    @field_validator("bit_width")
    @classmethod
    def _normalize_bit_width(cls, value: int) -> int:
        return normalize_bit_width(value)

    @property
    def word_count(self) -> int:
        """Number of 32-bit seed words implied by :attr:`bit_width`."""
        return self.bit_width // SEED_WORD_BITS


# Populate _ALL_FIELDS now that the class is defined.
_ALL_FIELDS = frozenset(SeedConfig.model_fields.keys())


def validate_seed_options(options: dict[str, Any]) -> None:
    """Reject option keys that are not seed configuration fields.

    Args:
        options: Mapping of option names to values.

    Raises:
        ConfigValidationError: If any key is unknown.
    """
    unknown = sorted(key for key in options if key not in _ALL_FIELDS)
    if unknown:
        known = ", ".join(sorted(_ALL_FIELDS))
        raise ConfigValidationError(
            f"Unknown seed option(s): {', '.join(unknown)} (known: {known})"
        )


def resolve_seed_config(
    defaults: SeedConfig | None = None,
    options: dict[str, Any] | None = None,
) -> SeedConfig:
    """Create a config merging *defaults* with caller *options*.

    Args:
        defaults: Base configuration. ``None`` loads one from the environment.
        options: Explicit option overrides.

    Returns:
        A new SeedConfig with overrides applied, or *defaults* itself when
        there is nothing to override.

    Raises:
        ConfigValidationError: If any option is unknown or fails validation.
    """
    if defaults is None:
        defaults = SeedConfig()
    if not options:
        return defaults

    validate_seed_options(options)

    # model_copy(update=...) skips validation, so build through the
    # validating constructor. custom_source is excluded from model_dump.
    merged = defaults.model_dump()
    merged["custom_source"] = defaults.custom_source
    merged.update(options)
    try:
        return SeedConfig(**merged)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
