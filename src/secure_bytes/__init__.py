"""secure-bytes: cryptographically seeded random bytes and strings.

Random bytes (raw, hex, base64, quoted-printable) and unbiased random
strings drawn from a caller-supplied alphabet. Output comes from a fast
pseudo-random generator that is seeded exactly once, lazily, from the
strongest entropy source available (``getrandom(2)``, ``os.urandom()``, or a
caller-supplied function).
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("secure-bytes")
except PackageNotFoundError:
    __version__ = "0.0.0"

from secure_bytes.config import SeedConfig, resolve_seed_config
from secure_bytes.exceptions import (
    BagTooLargeError,
    ConfigValidationError,
    EmptyBagError,
    EntropyUnavailableError,
    InvalidLengthError,
    RangeOutOfBoundsError,
    SecureBytesError,
)
from secure_bytes.secure import (
    SecureRandom,
    config_seed,
    irand,
    random_bytes,
    random_bytes_base64,
    random_bytes_hex,
    random_bytes_qp,
    random_string_from,
)

__all__ = [
    "BagTooLargeError",
    "ConfigValidationError",
    "EmptyBagError",
    "EntropyUnavailableError",
    "InvalidLengthError",
    "RangeOutOfBoundsError",
    "SecureBytesError",
    "SecureRandom",
    "SeedConfig",
    "__version__",
    "config_seed",
    "irand",
    "random_bytes",
    "random_bytes_base64",
    "random_bytes_hex",
    "random_bytes_qp",
    "random_string_from",
    "resolve_seed_config",
]
