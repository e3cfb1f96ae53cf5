"""Public API: the :class:`SecureRandom` object and module-level functions.

Object style -- each instance owns an independent, lazily seeded generator::

    rng = SecureRandom(bit_width=128, non_blocking=True)
    salt = rng.random_bytes(16)
    token = rng.random_string_from("abcdefghijklmnopqrstuvwxyz0123456789", 24)

Function style -- one process-wide instance, created on first use::

    config_seed(non_blocking=True)   # optional, before any output
    secret = random_bytes_hex(32)

Negative byte counts are clamped to zero; negative string lengths raise
:class:`~secure_bytes.exceptions.InvalidLengthError`.
"""

from __future__ import annotations

import threading
from typing import Any

from secure_bytes.bag import BagSelector
from secure_bytes.config import resolve_seed_config
from secure_bytes.emitter import ByteEmitter
from secure_bytes.encoding import encode_base64, encode_hex, encode_qp
from secure_bytes.generator import GeneratorHandle


class SecureRandom:
    """Cryptographically seeded random bytes and strings.

    The generator is seeded from the strongest usable entropy source the
    first time any output is requested, and never reseeded.

    Args:
        **options: Seed options, see :class:`~secure_bytes.config.SeedConfig`
            (``bit_width``, ``allow_weak``, ``non_blocking``,
            ``restrict_sources``, ``exclude_sources``, ``custom_source``,
            ``log_level``).

    Raises:
        ConfigValidationError: If *options* are invalid.
    """

    def __init__(self, **options: Any) -> None:
        self._handle = GeneratorHandle(resolve_seed_config(None, options) if options else None)
        self._emitter = ByteEmitter(self._handle)
        self._selector = BagSelector(self._handle)

    @property
    def is_seeded(self) -> bool:
        """Whether random output has been produced (seed is frozen)."""
        return self._handle.is_initialized

    def config_seed(self, **options: Any) -> bool:
        """Change seed options; only possible before the first output.

        Returns:
            ``True`` if applied, ``False`` if the generator is already seeded.
        """
        return self._handle.configure_seed(**options)

    def random_bytes(self, count: int | None = 0) -> bytes:
        """Return *count* random bytes (``b""`` for ``count <= 0``)."""
        return self._emitter.emit_bytes(count)

    def random_bytes_hex(self, count: int | None = 0) -> str:
        """Return *count* random bytes as ``2 * count`` lowercase hex digits."""
        return encode_hex(self.random_bytes(count))

    def random_bytes_base64(self, count: int | None = 0, eol: str = "\n") -> str:
        """Return *count* random bytes in base64, wrapped at 76 characters.

        Pass ``eol=""`` for a single unwrapped line.
        """
        return encode_base64(self.random_bytes(count), eol)

    def random_bytes_qp(self, count: int | None = 0, eol: str = "\n") -> str:
        """Return *count* random bytes in quoted-printable, wrapped at 76."""
        return encode_qp(self.random_bytes(count), eol)

    def random_string_from(self, bag: str, count: int | None = 0) -> str:
        """Return *count* characters chosen uniformly from positions in *bag*."""
        return self._selector.select_from(bag, count)

    def irand(self) -> int:
        """Return one random integer in ``[0, 2**32)``."""
        return self._handle.next_uint32()

    def health_check(self) -> dict[str, Any]:
        """Return the generator status dictionary."""
        return self._handle.health_check()


_default: SecureRandom | None = None
_default_lock = threading.Lock()


def _default_instance() -> SecureRandom:
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = SecureRandom()
    return _default


def config_seed(**options: Any) -> bool:
    """Configure seeding of the shared generator before its first use.

    Returns:
        ``True`` if applied, ``False`` if random output was already produced.
    """
    return _default_instance().config_seed(**options)


def random_bytes(count: int | None = 0) -> bytes:
    """Return *count* random bytes from the shared generator."""
    return _default_instance().random_bytes(count)


def random_bytes_hex(count: int | None = 0) -> str:
    """Return *count* random bytes as lowercase hex."""
    return _default_instance().random_bytes_hex(count)


def random_bytes_base64(count: int | None = 0, eol: str = "\n") -> str:
    """Return *count* random bytes as base64 lines terminated by *eol*."""
    return _default_instance().random_bytes_base64(count, eol)


def random_bytes_qp(count: int | None = 0, eol: str = "\n") -> str:
    """Return *count* random bytes as quoted-printable lines ending in *eol*."""
    return _default_instance().random_bytes_qp(count, eol)


def random_string_from(bag: str, count: int | None = 0) -> str:
    """Return *count* characters drawn with replacement from *bag*."""
    return _default_instance().random_string_from(bag, count)


def irand() -> int:
    """Return one random integer in ``[0, 2**32)`` from the shared generator."""
    return _default_instance().irand()
