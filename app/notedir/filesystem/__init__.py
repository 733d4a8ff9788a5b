"""Filesystem helpers for note trees.

This module provides entry models, display ordering, path filters and
the directory reader.
"""

from notedir.filesystem.filters import PathFilter, ignore_dir, ignore_file
from notedir.filesystem.models import EntryType, Sortable, TreeEntry
from notedir.filesystem.reader import DirectoryReader
from notedir.filesystem.sorting import compare_names, sort_entries

__all__ = [
    "DirectoryReader",
    "EntryType",
    "PathFilter",
    "Sortable",
    "TreeEntry",
    "compare_names",
    "ignore_dir",
    "ignore_file",
    "sort_entries",
]
