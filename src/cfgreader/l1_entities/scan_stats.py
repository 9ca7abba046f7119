"""L1 entity: per-scan counters."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScanStats:
    processed: int = 0
    skipped: int = 0
    errors: int = 0
