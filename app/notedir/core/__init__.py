"""Core helpers for notedir.

This module exports the pure string and date helpers.
"""

from notedir.core.dates import format_date, format_timestamp, generate_name
from notedir.core.hashing import string_hash

__all__ = [
    "format_date",
    "format_timestamp",
    "generate_name",
    "string_hash",
]
