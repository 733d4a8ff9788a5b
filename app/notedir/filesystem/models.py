"""Filesystem domain models for note trees.

This module defines the data structures for representing files and
directories read from a note library, and the minimal interface the
sorting helpers rely on.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

from notedir.core.hashing import string_hash


class EntryType(str, Enum):
    """Type of filesystem entry.

    Attributes:
        FILE: Regular file.
        DIRECTORY: Regular directory.
        SYMLINK: Symbolic link (never listed in a sorted tree).
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


class Sortable(Protocol):
    """Anything exposing a name and an entry type."""

    @property
    def name(self) -> str: ...

    @property
    def type(self) -> str: ...


@dataclass(frozen=True, slots=True)
class TreeEntry:
    """Represents a file or directory read from a note tree.

    Attributes:
        path: Absolute filesystem path.
        name: Final path component.
        type: Type of the filesystem entry.
        hash: 32-bit hash of the path, used as a cache key.
        mtime: Last modification time as POSIX timestamp (None if unavailable).
        size_bytes: File size in bytes (None for directories or if unavailable).
        children: Sorted child entries (directories only).
    """

    path: str
    name: str
    type: EntryType
    hash: int
    mtime: float | None = None
    size_bytes: int | None = None
    children: tuple[TreeEntry, ...] = ()

    def __post_init__(self) -> None:
        """Validate tree entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if not self.name:
            msg = "Name cannot be empty"
            raise ValueError(msg)
        if self.children and self.type != EntryType.DIRECTORY:
            msg = f"Only directories can have children, got {self.type.value}"
            raise ValueError(msg)

    @classmethod
    def from_path(
        cls,
        path: str,
        entry_type: EntryType,
        *,
        name: str | None = None,
        mtime: float | None = None,
        size_bytes: int | None = None,
        children: tuple[TreeEntry, ...] = (),
    ) -> TreeEntry:
        """Create an entry whose hash is derived from its path."""
        return cls(
            path=path,
            name=name if name is not None else Path(path).name,
            type=entry_type,
            hash=string_hash(path),
            mtime=mtime,
            size_bytes=size_bytes,
            children=children,
        )

    @property
    def is_file(self) -> bool:
        """Check if this entry is a regular file."""
        return self.type == EntryType.FILE

    @property
    def is_directory(self) -> bool:
        """Check if this entry is a directory."""
        return self.type == EntryType.DIRECTORY
