"""User settings read from ``$XDG_CONFIG_HOME/clawclean/settings.json``.

Example file::

    {"measure": {"method": "walk"}}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from clawclean.core.measure import MEASURE_METHODS
from clawclean.utils import xdg_config_home

log = logging.getLogger(__name__)

_SETTINGS_DIR = "clawclean"
_SETTINGS_FILE = "settings.json"

DEFAULT_MEASURE_METHOD = "auto"


class Settings:
    """Read-only view of the settings file.

    A missing, unreadable or malformed file leaves every setting at its
    default. Invalid values are reported once and replaced by the default.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or (xdg_config_home() / _SETTINGS_DIR / _SETTINGS_FILE)
        self._sections = self._read_sections()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def measure_method(self) -> str:
        """How match sizes are measured: one of ``MEASURE_METHODS``."""
        value = self._section("measure").get("method", DEFAULT_MEASURE_METHOD)
        if value not in MEASURE_METHODS:
            log.warning(
                "Invalid measure.method %r in %s, expected one of %s; using '%s'",
                value,
                self._path,
                ", ".join(MEASURE_METHODS),
                DEFAULT_MEASURE_METHOD,
            )
            return DEFAULT_MEASURE_METHOD
        return value

    def _section(self, name: str) -> dict[str, Any]:
        section = self._sections.get(name, {})
        if not isinstance(section, dict):
            log.warning("Ignoring '%s' in %s: expected an object", name, self._path)
            return {}
        return section

    def _read_sections(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            log.warning("Could not load settings from %s: %s", self._path, e)
            return {}
        if not isinstance(data, dict):
            log.warning("Ignoring settings in %s: top level must be an object", self._path)
            return {}
        return data
