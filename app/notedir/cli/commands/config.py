"""Config command implementation.

Shows the active filter configuration or validates a config file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from notedir.configs.filters import (
    FilterConfig,
    FilterConfigError,
    get_filter_config,
    load_filter_config,
)
from notedir.core.paths import get_filter_config_path
from notedir.utils.formatting import console, print_error, print_success


def show_config(
    path: Annotated[
        Path | None,
        typer.Option(
            "--path",
            "-p",
            help="Validate and show this filter config file instead of the active one.",
        ),
    ] = None,
) -> None:
    """Show the filter configuration in use."""
    if path is not None:
        try:
            filter_config = load_filter_config(path)
        except FilterConfigError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from None
        print_success(f"Valid filter config: {path}")
    else:
        user_path = get_filter_config_path()
        if user_path.exists():
            try:
                filter_config = load_filter_config(user_path)
            except FilterConfigError as e:
                print_error(str(e))
                raise typer.Exit(code=1) from None
            state = "loaded"
        else:
            filter_config = get_filter_config()
            state = "not present"
        console.print(f"[muted]User config ({state}):[/] {escape(str(user_path))}")

    _print_config(filter_config)


def _print_config(filter_config: FilterConfig) -> None:
    """Print both filter lists."""
    filetypes = ", ".join(filter_config.filetypes) or "-"
    patterns = ", ".join(filter_config.ignore_dirs) or "-"
    console.print(f"[header]File types:[/] {escape(filetypes)}", highlight=False)
    console.print(f"[header]Ignored directories:[/] {escape(patterns)}", highlight=False)
