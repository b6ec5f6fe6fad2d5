"""Scan result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Match:
    """Single junk directory found during a scan.

    ``size_bytes`` is best-effort: ``0`` means the size could not be
    measured, not that the directory is empty.
    """

    path: Path
    size_bytes: int


@dataclass(slots=True)
class ScanResult:
    """Matches found under ``root``, in discovery order."""

    root: Path
    matches: list[Match] = field(default_factory=list)

    @property
    def total_bytes(self) -> int:
        """Total reclaimable bytes, always derived from the matches."""
        return sum(m.size_bytes for m in self.matches)

    def __iter__(self) -> Iterator[Match]:
        return iter(self.matches)

    def __len__(self) -> int:
        return len(self.matches)

    def __bool__(self) -> bool:
        return bool(self.matches)
