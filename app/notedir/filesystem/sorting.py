"""Display ordering for file and directory listings."""

from collections.abc import Iterable
from functools import cmp_to_key
from typing import TypeVar

from notedir.filesystem.models import EntryType, Sortable

T = TypeVar("T", bound=Sortable)


def compare_names(a: Sortable, b: Sortable) -> int:
    """Compare two entries by name.

    The exact-case test decides "smaller"; only the lowercased test can
    decide "greater". Mixed-case pairs therefore do not compare
    symmetrically, and listings rely on this ordering as-is.

    Returns:
        -1 if a sorts before b, 1 if after, 0 otherwise.
    """
    if a.name < b.name:
        return -1
    if a.name.lower() > b.name.lower():
        return 1
    return 0


def sort_entries(entries: Iterable[T]) -> list[T]:
    """Order entries for display: files first, then directories.

    Each group is ordered by ``compare_names``; the sort is stable, so
    entries that compare equal keep their input order. Entries that are
    neither files nor directories are dropped.

    Args:
        entries: Objects exposing ``name`` and ``type``. Not modified.

    Returns:
        New list with all files followed by all directories.
    """
    ordered = sorted(entries, key=cmp_to_key(compare_names))

    files: list[T] = []
    directories: list[T] = []
    for entry in ordered:
        if entry.type == EntryType.FILE:
            files.append(entry)
        elif entry.type == EntryType.DIRECTORY:
            directories.append(entry)

    return files + directories
