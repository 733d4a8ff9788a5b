"""notedir - helpers for Markdown note libraries.

String fingerprints, listing order, default note names, date display
and note tree filtering.
"""

from notedir.configs.filters import FilterConfig, get_filter_config
from notedir.core.dates import format_date, generate_name
from notedir.core.hashing import string_hash
from notedir.filesystem.filters import ignore_dir, ignore_file
from notedir.filesystem.sorting import sort_entries

__version__ = "0.1.0"

__all__ = [
    "FilterConfig",
    "__version__",
    "format_date",
    "generate_name",
    "get_filter_config",
    "ignore_dir",
    "ignore_file",
    "sort_entries",
    "string_hash",
]
