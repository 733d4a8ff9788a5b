"""Inclusion and exclusion checks for note tree paths.

Directories are skipped when their name matches one of the configured
patterns; files are skipped unless their extension is allow-listed.
Both checks take the configuration explicitly and fall back to the
process-wide configuration when none is given.
"""

import os
import re

from notedir.configs.filters import FilterConfig, get_filter_config


def _base_name(path: str | os.PathLike[str]) -> str:
    """Return the last path component as written, ignoring trailing separators.

    Unlike ``PurePath.name``, ``.`` and ``..`` are kept as the name.
    """
    return os.path.basename(os.fspath(path).rstrip(os.sep))


def _extension(name: str) -> str:
    """Return the extension of a base name, leading dot included.

    Leading dots belong to the stem, so ``.md`` has no extension while
    ``..md`` has ``.md``. A trailing dot is an extension of its own.
    """
    dot = name.rfind(".")
    if dot <= 0 or name == "..":
        return ""
    return name[dot:]


def ignore_dir(path: str | os.PathLike[str], config: FilterConfig | None = None) -> bool:
    """Check if a directory should be excluded from a note tree.

    The final path component is matched case-insensitively against every
    configured pattern; a match anywhere in the name counts.

    Args:
        path: Path to the directory.
        config: Filter configuration. If None, uses get_filter_config().

    Returns:
        True if any pattern matches the directory name, False otherwise.
    """
    if config is None:
        config = get_filter_config()

    name = _base_name(path)
    return any(re.search(pattern, name, re.IGNORECASE) for pattern in config.ignore_dirs)


def ignore_file(path: str | os.PathLike[str], config: FilterConfig | None = None) -> bool:
    """Check if a file should be excluded from a note tree.

    Args:
        path: Path to the file.
        config: Filter configuration. If None, uses get_filter_config().

    Returns:
        True unless the file's extension (leading dot included, case-sensitive)
        is in the allow-list. Files without an extension are always ignored.
    """
    if config is None:
        config = get_filter_config()

    return _extension(_base_name(path)) not in config.filetypes


class PathFilter:
    """Applies one filter configuration to many paths.

    Args:
        config: Filter configuration. If None, uses get_filter_config()
            at construction time.
    """

    def __init__(self, config: FilterConfig | None = None) -> None:
        self._config = config if config is not None else get_filter_config()

    @property
    def config(self) -> FilterConfig:
        """The filter configuration in use."""
        return self._config

    def ignore_dir(self, path: str | os.PathLike[str]) -> bool:
        """Check if a directory should be excluded."""
        return ignore_dir(path, self._config)

    def ignore_file(self, path: str | os.PathLike[str]) -> bool:
        """Check if a file should be excluded."""
        return ignore_file(path, self._config)
