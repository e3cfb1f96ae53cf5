"""Exception hierarchy for secure-bytes.

All exceptions derive from SecureBytesError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
Input-validation errors also derive from ``ValueError``.
"""


class SecureBytesError(Exception):
    """Base exception for all secure-bytes errors."""


class EntropyUnavailableError(SecureBytesError):
    """No entropy source can provide seed bytes.

    Raised when no strong source is usable and the caller has not opted
    into a weak fallback, or when every selected source fails.
    """


class ConfigValidationError(SecureBytesError):
    """Seed configuration validation failed.

    Raised when seed options contain unknown keys, fail type validation,
    or name entropy sources that are not registered.
    """


class InvalidLengthError(SecureBytesError, ValueError):
    """A requested count was negative where a count must be ``>= 0``."""


class RangeOutOfBoundsError(SecureBytesError, ValueError):
    """A sampling range was negative or exceeded ``2**32``."""


class EmptyBagError(SecureBytesError, ValueError):
    """A bag with no elements was passed to string selection."""


class BagTooLargeError(SecureBytesError, ValueError):
    """A bag longer than ``2**32`` elements was passed to string selection."""
