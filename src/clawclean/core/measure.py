"""Best-effort on-disk size measurement for matched directories."""

from __future__ import annotations

import logging
import os
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from clawclean.utils import has_command

log = logging.getLogger(__name__)

# Timeout for a single ``du`` invocation (seconds).
_DU_TIMEOUT = 120

MEASURE_METHODS = ("auto", "du", "walk")


class SizeMeasurer(ABC):
    """Measures the size of a directory tree in bytes.

    Implementations MUST NOT raise: any failure yields ``0``.
    """

    @abstractmethod
    def measure(self, path: Path) -> int:
        """Return the size of *path* in bytes, or 0 if unmeasurable."""


class DuSizeMeasurer(SizeMeasurer):
    """Asks the platform ``du`` utility for the disk usage of a tree."""

    def measure(self, path: Path) -> int:
        try:
            proc = subprocess.run(
                ["du", "-sk", str(path)],
                capture_output=True,
                timeout=_DU_TIMEOUT,
            )
        except (OSError, subprocess.SubprocessError) as e:
            log.debug("du failed for %s: %s", path, e)
            return 0
        if proc.returncode != 0:
            log.debug("du exited with %d for %s", proc.returncode, path)
            return 0
        try:
            return int(proc.stdout.split()[0]) * 1024
        except (IndexError, ValueError):
            log.debug("Unparsable du output for %s: %r", path, proc.stdout[:80])
            return 0


class WalkSizeMeasurer(SizeMeasurer):
    """Sums file sizes with an ``os.scandir`` walk (pure Python)."""

    def measure(self, path: Path) -> int:
        total = 0
        stack: list[Path | str] = [path]
        while stack:
            current = stack.pop()
            try:
                with os.scandir(current) as it:
                    for entry in it:
                        try:
                            if entry.is_file(follow_symlinks=False):
                                total += entry.stat(follow_symlinks=False).st_size
                            elif entry.is_dir(follow_symlinks=False):
                                stack.append(entry.path)
                        except OSError:
                            continue
            except OSError as e:
                log.debug("Cannot list %s while measuring: %s", current, e)
        return total


class AutoSizeMeasurer(SizeMeasurer):
    """Uses ``du`` when available, falling back to a native walk."""

    def __init__(self) -> None:
        self._du = DuSizeMeasurer() if has_command("du") else None
        self._walk = WalkSizeMeasurer()

    def measure(self, path: Path) -> int:
        if self._du is not None:
            size = self._du.measure(path)
            if size > 0:
                return size
            log.debug("Falling back to walk for %s", path)
        return self._walk.measure(path)


def measurer_for(method: str) -> SizeMeasurer:
    """Return the measurer for a ``measure.method`` setting value."""
    match method:
        case "du":
            return DuSizeMeasurer()
        case "walk":
            return WalkSizeMeasurer()
        case "auto":
            return AutoSizeMeasurer()
        case _:
            log.warning("Unknown measure method '%s', using 'auto'", method)
            return AutoSizeMeasurer()
