"""Filesystem inspection commands.

Provides commands to list the classified contents of a directory,
show the metadata of a single path, and print text or JSON files.
"""

from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from fskit.core.settings import Settings, SettingsError, load_settings_or_default
from fskit.filesystem.directories import get_directory_elements
from fskit.filesystem.errors import FilesystemError
from fskit.filesystem.files import read_json_file, read_text_file
from fskit.filesystem.general import get_path_element
from fskit.filesystem.models import DirectoryPathElements, PathElement, SortKey, SortOrder
from fskit.filesystem.options import DirectoryElementsOptions
from fskit.utils.formatting import console, format_size, print_error, print_info

app = typer.Typer(
    help="Inspect directories and files.",
    invoke_without_command=True,
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Output format options for filesystem commands."""

    TABLE = "table"
    JSON = "json"


def validate_exts_callback(value: list[str] | None) -> list[str] | None:
    """Reject extensions given without their leading dot."""
    for ext in value or []:
        if not ext.startswith("."):
            msg = f"Extension must start with '.', got {ext!r}"
            raise typer.BadParameter(msg)
    return value


@app.command(name="ls")
def list_directory(
    path: Annotated[Path, typer.Argument(help="Directory to list.")],
    sort_by_key: Annotated[
        SortKey | None,
        typer.Option(
            "--sort",
            "-s",
            help="Sort key (defaults to the configured key).",
            case_sensitive=False,
        ),
    ] = None,
    desc: Annotated[
        bool | None,
        typer.Option("--desc/--asc", help="Sort direction (defaults to the configured order)."),
    ] = None,
    include_exts: Annotated[
        list[str] | None,
        typer.Option(
            "--ext",
            "-e",
            callback=validate_exts_callback,
            help="Only include files with this extension, e.g. .json (repeatable).",
        ),
    ] = None,
    flat: Annotated[
        bool,
        typer.Option("--flat", help="Do not descend into subdirectories."),
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
    """List the directories, files and symbolic links inside a directory."""
    settings = _load_settings()
    defaults = settings.listing.to_options()

    options = DirectoryElementsOptions(
        sort_by_key=sort_by_key or defaults.sort_by_key,
        sort_order=defaults.sort_order if desc is None else _sort_order(desc),
        include_exts=tuple(include_exts) if include_exts else defaults.include_exts,
    )

    try:
        elements = get_directory_elements(path, options, recursive=not flat)
    except FilesystemError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        console.print_json(data=elements.to_dict(), indent=settings.json_indent or None)
        return

    if elements.total == 0:
        print_info("The directory is empty.")
        return

    _print_listing(elements)


@app.command()
def stat(
    path: Annotated[Path, typer.Argument(help="Path to inspect.")],
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
    """Show the metadata of a path without following symbolic links."""
    el = get_path_element(path)
    if el is None:
        print_error(f"No such file or directory: {path}")
        raise typer.Exit(code=1)

    if output_format == OutputFormat.JSON:
        console.print_json(data=el.to_dict())
        return

    table = Table(title=escape(el.base_name), show_header=False)
    table.add_column("Field", style="muted")
    table.add_column("Value")
    table.add_row("Path", escape(el.path))
    table.add_row("Type", _element_type(el))
    table.add_row("Extension", el.ext_name or "-")
    table.add_row("Size", format_size(el.size))
    table.add_row("Created", _format_creation(el.creation))
    console.print(table)


@app.command()
def cat(
    path: Annotated[Path, typer.Argument(help="File to print.")],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Parse the file as JSON and pretty-print it."),
    ] = False,
) -> None:
    """Print the contents of a text or JSON file."""
    try:
        if as_json:
            data = read_json_file(path)
            settings = _load_settings()
            console.print_json(data=data, indent=settings.json_indent or None)
        else:
            typer.echo(read_text_file(path), nl=False)
    except FilesystemError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


# === Private helper functions ===


def _load_settings() -> Settings:
    """Load user settings, exiting with an error if they are invalid."""
    try:
        return load_settings_or_default()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def _sort_order(desc: bool) -> SortOrder:
    return SortOrder.DESC if desc else SortOrder.ASC


def _print_listing(elements: DirectoryPathElements) -> None:
    """Display a listing as a Rich table."""
    table = Table(show_lines=False)
    table.add_column("Name", style="bold")
    table.add_column("Type", width=9)
    table.add_column("Size", justify="right", width=10)
    table.add_column("Created", style="muted")

    sections = (
        (elements.directories, "directory"),
        (elements.files, "file"),
        (elements.symbolic_links, "symlink"),
    )
    for group, style in sections:
        for el in group:
            table.add_row(
                f"[{style}]{escape(el.base_name)}[/]",
                _element_type(el),
                "-" if el.is_directory else format_size(el.size),
                _format_creation(el.creation),
            )

    console.print(table)
    console.print(
        f"\n[muted]{len(elements.directories)} directories, {len(elements.files)} files, "
        f"{len(elements.symbolic_links)} symbolic links[/muted]"
    )


def _element_type(el: PathElement) -> str:
    """Return a short label for the kind of an element."""
    if el.is_directory:
        return "directory"
    if el.is_file:
        return "file"
    if el.is_symbolic_link:
        return "symlink"
    return "other"


def _format_creation(creation_ms: int) -> str:
    """Format a millisecond timestamp as an ISO 8601 UTC string."""
    dt = datetime.fromtimestamp(creation_ms / 1000, tz=UTC)
    return dt.isoformat(timespec="seconds")
