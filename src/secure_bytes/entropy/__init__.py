"""Entropy source subsystem for secure-bytes.

Re-exports the ABC, registry, and all built-in source implementations
for convenient access::

    from secure_bytes.entropy import EntropySource, EntropySourceRegistry
    from secure_bytes.entropy import SystemEntropySource, MockEntropySource
"""

from secure_bytes.entropy.base import EntropySource
from secure_bytes.entropy.custom import CallableEntropySource
from secure_bytes.entropy.fallback import FallbackEntropySource
from secure_bytes.entropy.getrandom import GetrandomEntropySource
from secure_bytes.entropy.mock import MockEntropySource
from secure_bytes.entropy.registry import EntropySourceRegistry, register_entropy_source
from secure_bytes.entropy.system import SystemEntropySource
from secure_bytes.entropy.timing import TimingNoiseSource

__all__ = [
    "CallableEntropySource",
    "EntropySource",
    "EntropySourceRegistry",
    "FallbackEntropySource",
    "GetrandomEntropySource",
    "MockEntropySource",
    "SystemEntropySource",
    "TimingNoiseSource",
    "register_entropy_source",
]
