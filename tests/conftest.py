"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from pathlib import Path

import notedir.configs.filters as filters_module
import pytest
from notedir.configs.filters import FilterConfig


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory and drop the cached config.

    Returns:
        The notedir config directory (not created).
    """
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setattr(filters_module, "_cached_config", None)
    return config_home / "notedir"


@pytest.fixture
def filter_config() -> FilterConfig:
    """Filter configuration with a small, explicit allow-list."""
    return FilterConfig(
        filetypes=(".md", ".txt"),
        ignore_dirs=(r"^\.git$", "node_modules"),
    )


@pytest.fixture
def note_tree(tmp_path: Path) -> Path:
    """Create a small note library.

    Layout::

        notes/
            .hidden.md
            a.md
            b.md
            c.txt
            image.png
            noext
            link.md -> a.md
            .git/config
            archive/
            projects/
                plan.md
                draft.docx
    """
    root = tmp_path / "notes"
    root.mkdir()
    for name in ("b.md", "a.md", "c.txt", ".hidden.md", "image.png", "noext"):
        (root / name).write_text(f"# {name}\n")

    (root / ".git").mkdir()
    (root / ".git" / "config").write_text("[core]\n")
    (root / "archive").mkdir()
    (root / "projects").mkdir()
    (root / "projects" / "plan.md").write_text("# Plan\n")
    (root / "projects" / "draft.docx").write_bytes(b"PK\x03\x04")

    os.symlink(root / "a.md", root / "link.md")
    return root
