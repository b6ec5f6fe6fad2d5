"""Clawclean data models."""

from clawclean.models.scan_result import Match, ScanResult
from clawclean.models.clean_result import CleanReport, Outcome, RunMode

__all__ = [
    "CleanReport",
    "Match",
    "Outcome",
    "RunMode",
    "ScanResult",
]
