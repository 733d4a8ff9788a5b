"""CLI package for notedir.

This package contains the Typer application and all subcommands.
"""

from notedir.cli.main import app

__all__ = ["app"]
