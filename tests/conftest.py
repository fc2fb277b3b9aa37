"""Test configuration and fixtures for fileutils."""

import os

import pytest

from fileutils.file_tree.entry import DirectoryEntry, FileEntry


@pytest.fixture
def fox_entries():
    """Entries for the "fox jumps over the lazy dog" tree, with a few explicit permissions."""
    return [
        DirectoryEntry(
            "fox",
            permission=0o500,
            children=[
                FileEntry("the", "article", permission=0o400),
                FileEntry("quick", "adjective"),
                FileEntry("brown", "adjective"),
            ],
        ),
        DirectoryEntry("jumps"),
        DirectoryEntry(
            "over",
            children=[
                DirectoryEntry(
                    "dog",
                    children=[
                        FileEntry("the", "article", permission=0o400),
                        FileEntry("lazy", "adjective"),
                    ],
                ),
            ],
        ),
    ]


@pytest.fixture
def restore_permissions(tmp_path):
    """Make everything under tmp_path writable again so pytest can clean it up."""
    yield tmp_path
    for dirpath, dirnames, _ in os.walk(tmp_path):
        for dirname in dirnames:
            os.chmod(os.path.join(dirpath, dirname), 0o700)


@pytest.fixture
def non_root():
    """Skip tests that rely on permission checks, which root bypasses."""
    if hasattr(os, "geteuid") and os.geteuid() == 0:
        pytest.skip("Permission checks are not enforced when running as root")


@pytest.fixture
def symlinks_supported(tmp_path):
    """Skip tests on platforms where symlinks cannot be created."""
    try:
        os.symlink(tmp_path / "target", tmp_path / ".symlink_probe")
    except (OSError, NotImplementedError):
        pytest.skip("Symlink creation not supported on this platform/environment")
    os.unlink(tmp_path / ".symlink_probe")
