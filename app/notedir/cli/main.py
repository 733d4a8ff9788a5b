"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from notedir import __version__
from notedir.cli.commands import check, config, hashing, listing, naming
from notedir.utils.formatting import configure_logging

# Create main Typer app
app = typer.Typer(
    name="notedir",
    help="Helpers for Markdown note libraries.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"notedir version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """notedir - Helpers for Markdown note libraries.

    Hash names, generate default note names, and list note trees
    the way the library sees them.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(verbose)


# Register commands
app.command("hash")(hashing.hash_text)
app.command("name")(naming.new_name)
app.command("ls")(listing.list_tree)
app.command("check")(check.check_paths)
app.command("config")(config.show_config)


if __name__ == "__main__":
    app()
