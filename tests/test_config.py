"""Tests for secure_bytes.config.

Covers:
- Default values
- Bit-width normalization (round up to 32, clamp to [64, 512])
- resolve_seed_config merge logic and validation errors
- Environment variable loading (monkeypatch)
- Frozen immutability of SeedConfig
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from secure_bytes.config import (
    SEED_MAX_BITS,
    SEED_MIN_BITS,
    SeedConfig,
    normalize_bit_width,
    resolve_seed_config,
    validate_seed_options,
)
from secure_bytes.exceptions import ConfigValidationError


class TestSeedConfigDefaults:
    """Verify default values."""

    def test_seed_defaults(self, default_config: SeedConfig) -> None:
        assert default_config.bit_width == 64
        assert default_config.word_count == 2

    def test_source_selection_defaults(self, default_config: SeedConfig) -> None:
        assert default_config.allow_weak is False
        assert default_config.non_blocking is False
        assert default_config.restrict_sources is None
        assert default_config.exclude_sources == frozenset()
        assert default_config.custom_source is None

    def test_logging_default(self, default_config: SeedConfig) -> None:
        assert default_config.log_level == "summary"

    def test_frozen_immutability(self, default_config: SeedConfig) -> None:
        with pytest.raises(ValidationError):
            default_config.bit_width = 128  # type: ignore[misc]


class TestBitWidthNormalization:
    """Seed width is rounded up to a multiple of 32 and clamped."""

    @pytest.mark.parametrize(
        ("requested", "expected"),
        [
            (-5, 64),
            (0, 64),
            (1, 64),
            (64, 64),
            (65, 96),
            (100, 128),
            (256, 256),
            (500, 512),
            (512, 512),
            (513, 512),
            (8192, 512),
        ],
    )
    def test_normalize(self, requested: int, expected: int) -> None:
        assert normalize_bit_width(requested) == expected

    def test_result_is_always_a_multiple_of_32_in_bounds(self) -> None:
        for bits in range(-64, 700):
            width = normalize_bit_width(bits)
            assert width % 32 == 0
            assert SEED_MIN_BITS <= width <= SEED_MAX_BITS

    def test_validator_applies_on_construction(self) -> None:
        cfg = SeedConfig(bit_width=100)
        assert cfg.bit_width == 128
        assert cfg.word_count == 4

    def test_word_count_bounds(self) -> None:
        assert SeedConfig(bit_width=1).word_count == 2
        assert SeedConfig(bit_width=10_000).word_count == 16


class TestResolveSeedConfig:
    """Tests for resolve_seed_config merge logic."""

    def test_none_options_returns_defaults(self, default_config: SeedConfig) -> None:
        assert resolve_seed_config(default_config, None) is default_config

    def test_empty_options_returns_defaults(self, default_config: SeedConfig) -> None:
        assert resolve_seed_config(default_config, {}) is default_config

    def test_none_defaults_loads_fresh_config(self) -> None:
        cfg = resolve_seed_config(None, {"non_blocking": True})
        assert cfg.non_blocking is True
        assert cfg.bit_width == 64

    def test_override_fields(self, default_config: SeedConfig) -> None:
        cfg = resolve_seed_config(
            default_config,
            {"bit_width": 200, "allow_weak": True, "exclude_sources": ["timing"]},
        )
        assert cfg.bit_width == 224
        assert cfg.allow_weak is True
        assert cfg.exclude_sources == frozenset({"timing"})

    def test_returns_new_instance(self, default_config: SeedConfig) -> None:
        cfg = resolve_seed_config(default_config, {"bit_width": 256})
        assert cfg is not default_config
        assert default_config.bit_width == 64

    def test_custom_defaults_preserved(self) -> None:
        def source(n: int) -> bytes:
            return b"\x00" * n

        base = SeedConfig(custom_source=source, bit_width=128)
        cfg = resolve_seed_config(base, {"non_blocking": True})
        assert cfg.custom_source is source
        assert cfg.bit_width == 128
        assert cfg.non_blocking is True

    def test_restrict_sources_coerced_to_frozenset(self, default_config: SeedConfig) -> None:
        cfg = resolve_seed_config(default_config, {"restrict_sources": ["system", "getrandom"]})
        assert cfg.restrict_sources == frozenset({"system", "getrandom"})

    def test_unknown_option_raises(self, default_config: SeedConfig) -> None:
        with pytest.raises(ConfigValidationError, match="bits_please"):
            resolve_seed_config(default_config, {"bits_please": 128})

    def test_bad_type_raises(self, default_config: SeedConfig) -> None:
        with pytest.raises(ConfigValidationError, match="bit_width"):
            resolve_seed_config(default_config, {"bit_width": "lots"})

    def test_non_callable_custom_source_raises(self, default_config: SeedConfig) -> None:
        with pytest.raises(ConfigValidationError, match="custom_source"):
            resolve_seed_config(default_config, {"custom_source": 42})

    def test_bad_log_level_raises(self, default_config: SeedConfig) -> None:
        with pytest.raises(ConfigValidationError, match="log_level"):
            resolve_seed_config(default_config, {"log_level": "verbose"})


class TestValidateSeedOptions:
    """Tests for validate_seed_options."""

    def test_known_options_ok(self) -> None:
        validate_seed_options({"bit_width": 128, "non_blocking": True, "log_level": "none"})

    def test_lists_all_unknown_keys(self) -> None:
        with pytest.raises(ConfigValidationError, match="Weak.*nonblocking|nonblocking.*Weak"):
            validate_seed_options({"Weak": True, "nonblocking": True})


class TestEnvironmentLoading:
    """Environment variables with the SECURE_BYTES_ prefix supply defaults."""

    def test_env_bit_width(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SECURE_BYTES_BIT_WIDTH", "160")
        assert SeedConfig().bit_width == 160

    def test_env_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SECURE_BYTES_NON_BLOCKING", "true")
        assert SeedConfig().non_blocking is True

    def test_explicit_option_beats_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SECURE_BYTES_BIT_WIDTH", "160")
        cfg = resolve_seed_config(None, {"bit_width": 256})
        assert cfg.bit_width == 256
