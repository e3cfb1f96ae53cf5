"""Adapter turning a caller-supplied function into an entropy source."""

from __future__ import annotations

from typing import TYPE_CHECKING

from secure_bytes.entropy.base import EntropySource
from secure_bytes.exceptions import EntropyUnavailableError

if TYPE_CHECKING:
    from collections.abc import Callable


class CallableEntropySource(EntropySource):
    """Wrap ``func(n) -> bytes`` as an :class:`EntropySource`.

    The caller vouches for the quality of the function; it is treated as
    strong and non-blocking. Not registered: it only exists when a
    ``custom_source`` option is given.

    Args:
        func: Callable returning exactly *n* bytes for an argument *n*.
        name: Identifier reported in logs and health checks.
    """

    def __init__(self, func: Callable[[int], bytes], name: str = "custom") -> None:
        self._func = func
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_available(self) -> bool:
        return True

    def get_random_bytes(self, n: int) -> bytes:
        """Call the wrapped function and check the result.

        Raises:
            EntropyUnavailableError: If the function returns anything other
                than exactly *n* bytes.
        """
        data = self._func(n)
        if not isinstance(data, (bytes, bytearray)) or len(data) != n:
            raise EntropyUnavailableError(
                f"Custom entropy source {self._name!r} returned "
                f"{type(data).__name__} of unexpected length (wanted {n} bytes)"
            )
        return bytes(data)

    def close(self) -> None:
        """No-op: the caller owns the wrapped function."""
