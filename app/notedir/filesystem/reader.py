"""Directory reader for note trees.

Reads a root directory into a tree of TreeEntry objects, skipping
ignored directories and non-note files, and ordering every level with
sort_entries.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from notedir.configs.filters import FilterConfig
from notedir.filesystem.filters import PathFilter
from notedir.filesystem.models import EntryType, TreeEntry
from notedir.filesystem.sorting import sort_entries

logger = logging.getLogger(__name__)


class DirectoryReader:
    """Reads note trees from the filesystem.

    Args:
        config: Filter configuration. If None, uses the process-wide
            configuration.
        recursive: If True, descend into accepted subdirectories.
            Otherwise subdirectories are listed without children.
    """

    def __init__(self, config: FilterConfig | None = None, *, recursive: bool = True) -> None:
        self._filter = PathFilter(config)
        self._recursive = recursive

    def read(self, root: str | os.PathLike[str]) -> TreeEntry:
        """Read a directory and its accepted contents.

        The root itself is never checked against the ignore patterns.

        Args:
            root: Directory to read.

        Returns:
            TreeEntry for the root directory with sorted children.

        Raises:
            FileNotFoundError: If root does not exist.
            NotADirectoryError: If root is not a directory.
            PermissionError: If root cannot be listed.
        """
        root_path = Path(root).expanduser().absolute()

        if not root_path.exists():
            raise FileNotFoundError(f"Directory not found: {root_path}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Not a directory: {root_path}")

        return self._read_directory(root_path, is_root=True)

    def iter_files(self, root: str | os.PathLike[str]) -> Iterator[TreeEntry]:
        """Iterate over accepted files depth-first, in display order.

        Args:
            root: Directory to read.

        Yields:
            TreeEntry for every accepted file.
        """
        yield from _walk_files(self.read(root))

    def _read_directory(self, directory: Path, *, is_root: bool = False) -> TreeEntry:
        """Build the entry for one directory, descending if recursive."""
        children = tuple(sort_entries(self._read_children(directory, is_root=is_root)))
        logger.debug("Read %d entries from %s", len(children), directory)

        return TreeEntry.from_path(
            str(directory),
            EntryType.DIRECTORY,
            name=directory.name or str(directory),
            mtime=self._get_mtime(directory),
            children=children,
        )

    def _read_children(self, directory: Path, *, is_root: bool = False) -> Iterator[TreeEntry]:
        """Yield accepted entries of a directory in filesystem order.

        An unreadable subdirectory is logged and left empty; an unreadable
        root raises.
        """
        try:
            entries = list(directory.iterdir())
        except PermissionError:
            if is_root:
                raise
            logger.warning("Permission denied reading directory: %s", directory)
            return

        for entry in entries:
            try:
                entry_type = self._get_path_type(entry)
            except OSError:
                logger.warning("Cannot determine type of: %s", entry)
                continue

            if entry_type == EntryType.DIRECTORY:
                if self._filter.ignore_dir(entry):
                    logger.debug("Skipping ignored directory: %s", entry)
                    continue
                if self._recursive:
                    yield self._read_directory(entry)
                else:
                    yield TreeEntry.from_path(
                        str(entry), EntryType.DIRECTORY, mtime=self._get_mtime(entry)
                    )
            elif entry_type == EntryType.FILE:
                if self._filter.ignore_file(entry):
                    continue
                try:
                    stat = entry.stat()
                except OSError:
                    logger.warning("Cannot stat file: %s", entry)
                    continue
                yield TreeEntry.from_path(
                    str(entry),
                    EntryType.FILE,
                    mtime=stat.st_mtime,
                    size_bytes=stat.st_size,
                )
            else:
                yield TreeEntry.from_path(str(entry), entry_type)

    @staticmethod
    def _get_path_type(path: Path) -> EntryType:
        """Determine the type of a filesystem path.

        Checks for symlinks first, since is_dir/is_file follow them.
        """
        if path.is_symlink():
            return EntryType.SYMLINK
        if path.is_dir():
            return EntryType.DIRECTORY
        return EntryType.FILE

    @staticmethod
    def _get_mtime(path: Path) -> float | None:
        """Get last modification time, or None on error."""
        try:
            return path.stat().st_mtime
        except OSError:
            return None


def _walk_files(entry: TreeEntry) -> Iterator[TreeEntry]:
    for child in entry.children:
        if child.is_file:
            yield child
        elif child.is_directory:
            yield from _walk_files(child)
