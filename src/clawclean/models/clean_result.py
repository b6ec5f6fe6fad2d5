"""Cleaning result dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class RunMode(Enum):
    """How the executor treats the matches it is given."""

    DRY_RUN = "dry_run"
    CONFIRM = "confirm"
    FORCE = "force"


class Outcome(Enum):
    """Terminal state reached by a run."""

    CLEAN = "clean"
    REPORTED_ONLY = "reported_only"
    ABORTED = "aborted"
    DONE = "done"


@dataclass(slots=True)
class CleanReport:
    """Result of executing a scan in a given mode."""

    outcome: Outcome
    reclaimed_bytes: int = 0
    deleted: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, str]] = field(default_factory=list)
