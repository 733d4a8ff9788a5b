"""Check command implementation.

Explains whether paths would be part of a note tree.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from notedir.filesystem.filters import PathFilter
from notedir.utils.formatting import console


def check_paths(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Paths to check."),
    ],
    as_dir: Annotated[
        bool,
        typer.Option(
            "--dir",
            "-d",
            help="Treat all paths as directories, even if they don't exist.",
        ),
    ] = False,
) -> None:
    """Show whether each path would be ignored in a note tree.

    Existing directories (or all paths with --dir) are checked against the
    ignored directory patterns; everything else against the file extension
    allow-list.
    """
    path_filter = PathFilter()

    table = Table(
        title="Filter Check",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", no_wrap=True)
    table.add_column("Checked as", style="muted", width=10)
    table.add_column("Result", width=8)

    for path in paths:
        if as_dir or path.is_dir():
            kind = "directory"
            ignored = path_filter.ignore_dir(path)
        else:
            kind = "file"
            ignored = path_filter.ignore_file(path)

        result = "[ignored]ignored[/]" if ignored else "[kept]kept[/]"
        table.add_row(escape(str(path)), kind, result)

    console.print(table)
