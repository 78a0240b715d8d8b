"""Test fixtures for dotmanager."""

import pytest

from dotmanager.models import MappingEntry


@pytest.fixture
def source_dir(tmp_path):
    """Directory holding the dotfile sources, also the working directory."""
    src = tmp_path / "dotfiles"
    src.mkdir()
    (src / "a.conf").write_text("a = 1\n")
    (src / "bashrc.example").write_text("export EDITOR=vim\n")
    return src


@pytest.fixture
def home_dir(tmp_path):
    """Empty home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def env(monkeypatch, source_dir, home_dir):
    """Run from the source directory with HOME pointing at the test home."""
    monkeypatch.chdir(source_dir)
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.delenv("USERPROFILE", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    return source_dir, home_dir


@pytest.fixture
def mappings():
    """Small mapping table: one present source, one missing source."""
    return (
        MappingEntry("a.conf", ".a_conf"),
        MappingEntry("missing.example", ".missing_conf"),
    )
