"""CLI commands for notedir.

This package contains all subcommand implementations.
"""

from notedir.cli.commands import check, config, hashing, listing, naming

__all__ = ["check", "config", "hashing", "listing", "naming"]
