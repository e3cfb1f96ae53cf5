"""Tests for ByteEmitter."""

from __future__ import annotations

import pytest

from secure_bytes.config import SeedConfig
from secure_bytes.emitter import ByteEmitter
from secure_bytes.generator import GeneratorHandle


class TestWordPacking:
    """Words are packed little-endian; the tail costs one extra word."""

    def test_full_words(self, scripted_handle) -> None:
        handle = scripted_handle([0x04030201, 0x08070605])
        assert ByteEmitter(handle).emit_bytes(8) == bytes(range(1, 9))
        assert handle.words_drawn == 2

    @pytest.mark.parametrize(
        ("n", "expected"),
        [
            (1, b"\x03"),
            (2, b"\x01\x02"),
            (3, b"\x01\x02\x03"),
        ],
    )
    def test_tail_only(self, scripted_handle, n: int, expected: bytes) -> None:
        handle = scripted_handle([0x04030201])
        assert ByteEmitter(handle).emit_bytes(n) == expected
        assert handle.words_drawn == 1

    def test_words_then_tail(self, scripted_handle) -> None:
        handle = scripted_handle([0x04030201, 0x08070605])
        assert ByteEmitter(handle).emit_bytes(7) == b"\x01\x02\x03\x04\x05\x06\x07"
        assert handle.requests == [2]

    def test_single_draw_per_call(self, scripted_handle) -> None:
        handle = scripted_handle([0] * 26)
        ByteEmitter(handle).emit_bytes(101)
        assert handle.requests == [26]


class TestLengths:
    """Output length and the no-op cases."""

    def test_exact_lengths(self, custom_config: SeedConfig) -> None:
        emitter = ByteEmitter(GeneratorHandle(custom_config))
        for n in (1, 2, 3, 4, 5, 15, 16, 17, 1000):
            data = emitter.emit_bytes(n)
            assert isinstance(data, bytes)
            assert len(data) == n

    @pytest.mark.parametrize("n", [0, None, -1, -100])
    def test_empty_without_seeding(self, custom_config: SeedConfig, n: int | None) -> None:
        handle = GeneratorHandle(custom_config)
        assert ByteEmitter(handle).emit_bytes(n) == b""
        assert handle.is_initialized is False

    def test_default_is_empty(self, scripted_handle) -> None:
        handle = scripted_handle([])
        assert ByteEmitter(handle).emit_bytes() == b""
        assert handle.requests == []
