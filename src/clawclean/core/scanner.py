"""Recursive junk-directory scanner."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Callable

from clawclean.core.measure import AutoSizeMeasurer, SizeMeasurer
from clawclean.models.scan_result import Match, ScanResult

log = logging.getLogger(__name__)

# Listed in display order; matching uses the frozen set.
TARGET_NAMES: tuple[str, ...] = ("node_modules", "dist", "build", "target", ".cache", "coverage", ".turbo")
TARGETS: frozenset[str] = frozenset(TARGET_NAMES)

MatchCallback = Callable[[Match], None]


class Scanner:
    """Walks a directory tree depth-first and collects junk directories.

    A directory whose name is in ``TARGETS`` is recorded and not descended
    into. Hidden directories that are not targets are skipped entirely.
    Symlinks are never followed.
    """

    def __init__(
        self,
        measurer: SizeMeasurer | None = None,
        on_match: MatchCallback | None = None,
    ) -> None:
        self.measurer = measurer or AutoSizeMeasurer()
        self.on_match = on_match

    def scan(self, root: Path | str) -> ScanResult:
        """Scan below *root* and return matches in discovery order.

        The root itself is never a match, even if its name is a target.
        Directories that cannot be listed contribute nothing.
        """
        root = Path(root)
        result = ScanResult(root=root)
        self._walk(root, result.matches)
        log.debug("Scan of %s found %d match(es)", root, len(result.matches))
        return result

    def _walk(self, directory: Path, matches: list[Match]) -> None:
        try:
            names = sorted(os.listdir(directory))
        except OSError as e:
            log.info("Error scanning %s: %s", directory, e)
            return

        for name in names:
            full_path = directory / name
            try:
                mode = os.lstat(full_path).st_mode
            except OSError as e:
                log.debug("Cannot stat %s: %s", full_path, e)
                continue
            if not stat.S_ISDIR(mode):
                continue

            if name in TARGETS:
                match = Match(path=full_path, size_bytes=self._measure(full_path))
                matches.append(match)
                if self.on_match:
                    self.on_match(match)
            elif not name.startswith("."):
                self._walk(full_path, matches)

    def _measure(self, path: Path) -> int:
        try:
            return max(0, self.measurer.measure(path))
        except Exception as e:
            log.debug("Size measurement failed for %s: %s", path, e)
            return 0
