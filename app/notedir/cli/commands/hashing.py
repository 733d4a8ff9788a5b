"""Hash command implementation."""

from typing import Annotated

import typer

from notedir.core.hashing import string_hash
from notedir.utils.formatting import console


def hash_text(
    text: Annotated[str, typer.Argument(help="String to hash (e.g. a note path).")],
) -> None:
    """Print the 32-bit hash of a string."""
    console.print(str(string_hash(text)), highlight=False)
