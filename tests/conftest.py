"""Shared test fixtures."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from clawclean.core.measure import SizeMeasurer


class FixedSizeMeasurer(SizeMeasurer):
    """Measurer that reports a fixed size and remembers what it measured."""

    def __init__(self, size: int = 1024) -> None:
        self.size = size
        self.measured: list[Path] = []

    def measure(self, path: Path) -> int:
        self.measured.append(path)
        return self.size


@pytest.fixture
def measurer():
    return FixedSizeMeasurer()


@pytest.fixture
def isolate_config(tmp_path, monkeypatch):
    """Redirect the settings file to a temp directory."""
    config_home = tmp_path / "config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home / "clawclean" / "settings.json"


@pytest.fixture
def project_tree(tmp_path):
    """Build a workspace with source, junk and a hidden VCS folder.

    Layout::

        workspace/
            src/main.txt
            node_modules/{a,b,c}.js
            .git/node_modules/hook.js
            dist/
    """
    root = tmp_path / "workspace"
    (root / "src").mkdir(parents=True)
    (root / "src" / "main.txt").write_text("print('hi')\n")

    node_modules = root / "node_modules"
    node_modules.mkdir()
    for name in ("a.js", "b.js", "c.js"):
        (node_modules / name).write_bytes(b"x" * 100)

    git_modules = root / ".git" / "node_modules"
    git_modules.mkdir(parents=True)
    (git_modules / "hook.js").write_bytes(b"h" * 10)

    (root / "dist").mkdir()
    return root


@pytest.fixture
def undecodable_tree(tmp_path):
    """Workspace where one project folder name is not valid UTF-8.

    Layout::

        workspace/
            ok/dist/
            proj\\xff/node_modules/index.js
    """
    root = tmp_path / "workspace"
    (root / "ok" / "dist").mkdir(parents=True)
    bad = root / os.fsdecode(b"proj\xff")
    try:
        (bad / "node_modules").mkdir(parents=True)
    except OSError as e:
        pytest.skip(f"filesystem rejects non-UTF-8 names: {e}")
    (bad / "node_modules" / "index.js").write_bytes(b"x" * 2048)
    return root
