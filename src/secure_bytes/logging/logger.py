"""Diagnostic logger for generator seeding events.

Uses the standard ``logging`` module with the ``"secure_bytes"`` logger.
Seed material itself is never logged.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from secure_bytes.logging.types import SeedRecord

logger = logging.getLogger("secure_bytes")


class SeedLogger:
    """Seeding event logger.

    Log levels:
        ``"none"``: No output. The last record is still retained.

        ``"summary"``: One line with source, width and fetch time.

        ``"full"``: JSON dump of all record fields.

    Args:
        log_level: One of ``"none"``, ``"summary"``, ``"full"``.
    """

    def __init__(self, log_level: str = "summary") -> None:
        self._log_level = log_level
        self._last: SeedRecord | None = None

    @property
    def last_record(self) -> SeedRecord | None:
        """The most recent record logged, if any."""
        return self._last

    def log_seed(self, record: SeedRecord) -> None:
        """Log one seeding event.

        Args:
            record: Immutable record of the seeding.
        """
        self._last = record

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "seeded generator: source=%s%s bits=%d words=%d fetch=%.2fms",
                record.entropy_source_used,
                " [WEAK]" if record.entropy_is_weak else "",
                record.bit_width,
                record.word_count,
                record.entropy_fetch_ms,
            )
        elif self._log_level == "full":
            logger.info("seed_record: %s", json.dumps(asdict(record)))
