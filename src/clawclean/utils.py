"""Shared utility functions."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

import click

log = logging.getLogger(__name__)


def has_command(name: str) -> bool:
    """Check if a command exists on the system."""
    return shutil.which(name) is not None


def xdg_config_home() -> Path:
    """Return XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def relative_display(path: Path, root: Path) -> str:
    """Return *path* relative to *root* for display, or the full path.

    Undecodable bytes in the name are replaced so the result is always
    printable.
    """
    try:
        path = path.relative_to(root)
    except ValueError:
        pass
    return click.format_filename(path)


def bytes_to_human(size_bytes: int) -> str:
    """Convert byte count to a human-readable string."""
    if size_bytes < 0:
        return f"-{bytes_to_human(-size_bytes)}"
    if size_bytes == 0:
        return "0 B"

    units = ("B", "KB", "MB", "GB", "TB")
    value = float(size_bytes)
    for unit in units[:-1]:
        if abs(value) < 1024:
            return f"{value:.1f} {unit}" if unit != "B" else f"{int(value)} B"
        value /= 1024
    return f"{value:.1f} {units[-1]}"
