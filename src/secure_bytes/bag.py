"""Random strings drawn from a caller-supplied alphabet ("bag")."""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING

from secure_bytes.exceptions import BagTooLargeError, EmptyBagError, InvalidLengthError
from secure_bytes.sampler import MAX_RANGE, RangedSampler

if TYPE_CHECKING:
    from secure_bytes.generator import GeneratorHandle


class BagSelector:
    """Build strings by sampling positions of a bag with replacement.

    Selection is uniform over *positions*, so a character that appears
    twice in the bag is twice as likely as one that appears once. Bags are
    indexed by code point, so any text works.

    Args:
        handle: Source of uniform 32-bit words.
    """

    def __init__(self, handle: GeneratorHandle) -> None:
        self._sampler = RangedSampler(handle)

    def select_from(self, bag: str, count: int | None = 0) -> str:
        """Return a string of *count* characters taken from *bag*.

        Args:
            bag: Alphabet to draw from; duplicates add weight.
            count: Output length. ``None`` is treated as ``0``.

        Returns:
            A string of exactly *count* characters; ``""`` for ``0`` without
            seeding the generator.

        Raises:
            TypeError: If *bag* is not a ``str``.
            EmptyBagError: If *bag* is empty.
            BagTooLargeError: If *bag* has more than ``2**32`` characters.
            InvalidLengthError: If *count* is negative.
        """
        if not isinstance(bag, str):
            raise TypeError(f"bag must be a str, got {type(bag).__name__}")
        size = len(bag)
        if size < 1:
            raise EmptyBagError("bag must contain at least one character")
        if size > MAX_RANGE:
            raise BagTooLargeError(f"bag must not exceed 2**32 characters, got {size}")
        count = 0 if count is None else operator.index(count)
        if count < 0:
            raise InvalidLengthError(f"count must be >= 0, got {count}")
        if count == 0:
            return ""

        return "".join(bag[i] for i in self._sampler.sample(size, count))
