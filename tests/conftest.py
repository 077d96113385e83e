"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

# Exactly 11 bytes, the size the filter tests are built around
DIR_LOG_CONTENT = b"hello world"


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory for every test."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small tree and return its parent directory.

    Layout::

        <tmp>/root/dir.log          (11 bytes)
        <tmp>/root/dir2/script.sh
    """
    root = tmp_path / "root"
    (root / "dir2").mkdir(parents=True)
    (root / "dir.log").write_bytes(DIR_LOG_CONTENT)
    (root / "dir2" / "script.sh").write_text("#!/bin/sh\necho hello\n")
    return tmp_path


@pytest.fixture
def make_files(tmp_path: Path) -> Callable[[dict[str, int]], Path]:
    """Return a factory creating ``n`` dummy files per extension in a flat directory.

    Files are named ``file<i><ext>`` (1-based) and contain ``dummy``.
    """
    counter = 0

    def _make(files: dict[str, int]) -> Path:
        nonlocal counter
        counter += 1
        directory = tmp_path / f"walktest{counter}"
        directory.mkdir()
        for ext, count in files.items():
            for i in range(1, count + 1):
                (directory / f"file{i}{ext}").write_text("dummy")
        return directory

    return _make
