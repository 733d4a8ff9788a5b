"""List command implementation.

Reads a note tree and displays it in library order: files before
directories, ignored entries left out.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.markup import escape

from notedir.core.dates import format_timestamp
from notedir.filesystem.models import TreeEntry
from notedir.filesystem.reader import DirectoryReader
from notedir.utils.formatting import (
    console,
    create_entry_table,
    format_size,
    print_error,
    print_info,
)


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def list_tree(
    path: Annotated[
        Path,
        typer.Argument(help="Root directory of the note tree."),
    ] = Path("."),
    flat: Annotated[
        bool,
        typer.Option("--flat", help="Only list the top level."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List a note tree in display order."""
    reader = DirectoryReader(recursive=not flat)

    try:
        root = reader.read(path)
    except (FileNotFoundError, NotADirectoryError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None
    except PermissionError:
        print_error(f"Permission denied: {path}")
        raise typer.Exit(code=1) from None

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(_entry_to_dict(root)))
        return

    if not root.children:
        print_info(f"No notes found in {root.path}")
        return

    table = create_entry_table(title=root.path)
    for entry, depth in _walk(root):
        table.add_row(*_format_row(entry, depth))
    console.print(table)

    files, directories = _count(root)
    console.print(f"\n[dim]{files} file(s), {directories} director(ies)[/dim]")


# === Private helper functions ===


def _walk(entry: TreeEntry, depth: int = 0) -> list[tuple[TreeEntry, int]]:
    """Flatten a tree into (entry, depth) pairs in display order."""
    rows: list[tuple[TreeEntry, int]] = []
    for child in entry.children:
        rows.append((child, depth))
        rows.extend(_walk(child, depth + 1))
    return rows


def _format_row(entry: TreeEntry, depth: int) -> tuple[str, str, str, str]:
    """Format an entry as a table row with Rich markup."""
    indent = "  " * depth
    if entry.is_directory:
        name = f"{indent}[entry.directory]{escape(entry.name)}/[/]"
        size = "-"
    else:
        name = f"{indent}[entry.file]{escape(entry.name)}[/]"
        size = format_size(entry.size_bytes)

    modified = format_timestamp(entry.mtime) if entry.mtime is not None else "-"
    return (name, entry.type.value, size, modified)


def _count(entry: TreeEntry) -> tuple[int, int]:
    """Count files and directories below an entry."""
    files = 0
    directories = 0
    for child, _ in _walk(entry):
        if child.is_file:
            files += 1
        else:
            directories += 1
    return files, directories


def _entry_to_dict(entry: TreeEntry) -> dict[str, Any]:
    """Serialize an entry and its children for JSON output."""
    data: dict[str, Any] = {
        "path": entry.path,
        "name": entry.name,
        "type": entry.type.value,
        "hash": entry.hash,
        "mtime": entry.mtime,
        "modified": format_timestamp(entry.mtime) if entry.mtime is not None else None,
        "size_bytes": entry.size_bytes,
    }
    if entry.is_directory:
        data["children"] = [_entry_to_dict(child) for child in entry.children]
    return data
