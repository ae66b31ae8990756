"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from pathlib import Path

import pytest


@pytest.fixture
def listing_dir(tmp_path: Path) -> Path:
    """Directory holding a.txt, B.json, an empty sub/ and link -> a.txt."""
    root = tmp_path / "listing"
    root.mkdir()
    (root / "a.txt").write_text("hello")
    (root / "B.json").write_text('{"key": "value"}')
    (root / "sub").mkdir()
    os.symlink(root / "a.txt", root / "link")
    return root


@pytest.fixture
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home
