"""Diagnostic logging subsystem for secure-bytes.

Provides an immutable seeding record and a logger that supports
none/summary/full verbosity.
"""

from secure_bytes.logging.logger import SeedLogger
from secure_bytes.logging.types import SeedRecord

__all__ = [
    "SeedLogger",
    "SeedRecord",
]
