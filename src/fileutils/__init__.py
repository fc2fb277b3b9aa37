"""Filesystem utilities: declarative tree installation, link-aware stat and lazy tree walks.

This package provides tools for creating a tree of files and directories with
per-node permissions, inspecting paths without following symbolic links, and
walking directory trees lazily in sorted depth-first order.
"""

from importlib.metadata import PackageNotFoundError, version

from fileutils.file_tree.entry import DirectoryEntry, FileEntry
from fileutils.file_tree.installer import install_file_tree
from fileutils.path_info import PathMetadata, lstat, lstat_or_raise, stat
from fileutils.results import INVALID_OPTION, MALFORMED_ENTRY, Failure, Success
from fileutils.tree_walk.path_tree_walker import PathTreeWalker, path_tree_walk

try:
    __version__ = version("fileutils")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "DirectoryEntry",
    "FileEntry",
    "Failure",
    "INVALID_OPTION",
    "MALFORMED_ENTRY",
    "PathMetadata",
    "PathTreeWalker",
    "Success",
    "install_file_tree",
    "lstat",
    "lstat_or_raise",
    "path_tree_walk",
    "stat",
]
