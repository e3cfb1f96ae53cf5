"""Unbiased integer sampling in ``[0, range)`` from a 32-bit generator.

``next_uint32() % range`` over-weights low residues whenever *range* does not
divide ``2**32``. Instead each draw is reduced modulo the smallest power of
two ``d >= range`` (which does divide ``2**32``, so every residue is equally
likely) and candidates ``>= range`` are rejected and redrawn. Surviving values
are uniform on ``[0, range)``.

Since ``d < 2 * range``, at least half of all candidates are accepted, so the
expected number of draws per sample is below 2; it is exactly 1 when *range*
is itself a power of two.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING

import numpy as np

from secure_bytes.exceptions import InvalidLengthError, RangeOutOfBoundsError

if TYPE_CHECKING:
    from secure_bytes.generator import GeneratorHandle

MAX_RANGE: int = 1 << 32


def _check_range(range_: int) -> None:
    if range_ < 0 or range_ > MAX_RANGE:
        raise RangeOutOfBoundsError(f"range must be in [0, 2**32], got {range_}")


def closest_pow2_divisor(range_: int) -> int:
    """Return the smallest ``2**k`` (``0 <= k <= 32``) that is ``>= range_``.

    ``0`` maps to ``1``.

    Args:
        range_: Exclusive upper bound of a sampling range.

    Returns:
        A power of two in ``[1, 2**32]``.

    Raises:
        RangeOutOfBoundsError: If *range_* is negative or above ``2**32``.
    """
    range_ = operator.index(range_)
    _check_range(range_)
    if range_ <= 1:
        return 1
    return 1 << (range_ - 1).bit_length()


class RangedSampler:
    """Draw i.i.d. integers in ``[0, range)`` from a generator handle.

    Args:
        handle: Source of uniform 32-bit words.
    """

    def __init__(self, handle: GeneratorHandle) -> None:
        self._handle = handle

    def sample(self, range_: int, count: int | None = 0) -> list[int]:
        """Return *count* values in ``[0, range_)``, in draw order.

        Words are drawn in batches; each batch is reduced modulo the divisor
        and filtered, and the shortfall is redrawn until *count* values have
        been accepted.

        Args:
            range_: Exclusive upper bound, ``0 <= range_ <= 2**32``.
            count: Number of samples. ``None`` is treated as ``0``.

        Returns:
            List of *count* ints. Empty for ``count == 0``, in which case the
            generator is not touched.

        Raises:
            RangeOutOfBoundsError: If *range_* is out of bounds, or is ``0``
                while *count* is positive.
            InvalidLengthError: If *count* is negative.
        """
        divisor = closest_pow2_divisor(range_)
        count = 0 if count is None else operator.index(count)
        if count < 0:
            raise InvalidLengthError(f"count must be >= 0, got {count}")
        if count == 0:
            return []
        if range_ == 0:
            raise RangeOutOfBoundsError("cannot draw from an empty range")

        modulus = np.uint64(divisor)
        bound = np.uint64(range_)
        accepted: list[int] = []
        while len(accepted) < count:
            words = self._handle.next_uint32s(count - len(accepted)).astype(np.uint64)
            candidates = words % modulus
            accepted.extend(candidates[candidates < bound].tolist())
        return accepted

    def sample_one(self, range_: int) -> int:
        """Return a single value in ``[0, range_)``.

        Raises:
            RangeOutOfBoundsError: If *range_* is out of bounds or ``0``.
        """
        return self.sample(range_, 1)[0]
