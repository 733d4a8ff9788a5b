"""Name command implementation.

Generates a default note name and optionally creates the empty note.
"""

from pathlib import Path
from typing import Annotated

import typer

from notedir.core.dates import generate_name
from notedir.utils.formatting import console, print_error, print_success


def new_name(
    create_in: Annotated[
        Path | None,
        typer.Option(
            "--create",
            "-c",
            help="Create an empty note with the generated name in this directory.",
        ),
    ] = None,
) -> None:
    """Print a default note name based on the current time."""
    name = generate_name()

    if create_in is None:
        console.print(name, highlight=False, markup=False)
        return

    if not create_in.is_dir():
        print_error(f"Not a directory: {create_in}")
        raise typer.Exit(code=1)

    note_path = create_in / name
    try:
        with open(note_path, "x", encoding="utf-8"):
            pass
    except FileExistsError:
        print_error(f"Note already exists: {note_path}")
        raise typer.Exit(code=1) from None
    except OSError as e:
        print_error(f"Cannot create note {note_path}: {e}")
        raise typer.Exit(code=1) from None

    print_success(f"Created {note_path}")
