"""Pack generator words into byte strings of arbitrary length."""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from secure_bytes.generator import GeneratorHandle


class ByteEmitter:
    """Turn 32-bit generator output into raw bytes.

    Every full word contributes 4 bytes. A 1-3 byte tail costs exactly one
    extra word: its low two bytes serve a tail of 2 or 3, and one byte of its
    high half serves an odd tail.

    Args:
        handle: Source of uniform 32-bit words.
    """

    def __init__(self, handle: GeneratorHandle) -> None:
        self._handle = handle

    def emit_bytes(self, n: int | None = 0) -> bytes:
        """Return exactly ``max(n, 0)`` random bytes.

        Negative and ``None`` lengths yield ``b""`` without seeding the
        generator.
        """
        n = 0 if n is None else operator.index(n)
        if n <= 0:
            return b""

        full_words, remainder = divmod(n, 4)
        words = self._handle.next_uint32s(full_words + (1 if remainder else 0))
        out = words[:full_words].astype("<u4").tobytes()
        if remainder:
            tail = int(words[-1]).to_bytes(4, "little")
            if remainder & 2:
                out += tail[:2]
            if remainder & 1:
                out += tail[2:3]
        return out
