"""Test configuration and fixtures for dirr."""

import errno
import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def deny_listing(monkeypatch):
    """Make os.listdir fail with EACCES for the paths added to the returned set.

    chmod-based denial has no effect when the tests run as root, so unreadable
    directories are simulated instead.
    """
    denied = set()
    real_listdir = os.listdir

    def fake_listdir(path="."):
        if Path(path) in denied:
            raise PermissionError(errno.EACCES, "Permission denied", str(path))
        return real_listdir(path)

    monkeypatch.setattr(os, "listdir", fake_listdir)
    return denied


@pytest.fixture
def deny_member_stat(monkeypatch):
    """Make Path.is_symlink fail with EACCES for members of the directories in the returned set.

    This mimics a directory with mode r--: it can be listed, but its members
    cannot be stat'ed.
    """
    denied = set()
    real_is_symlink = Path.is_symlink

    def fake_is_symlink(self):
        if self.parent in denied:
            raise PermissionError(errno.EACCES, "Permission denied", str(self))
        return real_is_symlink(self)

    monkeypatch.setattr(Path, "is_symlink", fake_is_symlink)
    return denied


@pytest.fixture
def sample_tree(tmp_path):
    """Create root/a.txt and root/sub/b.txt."""
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text("alpha")
    (root / "sub" / "b.txt").write_text("beta")
    return root
