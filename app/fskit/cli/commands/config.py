"""Settings management commands.

Provides commands to show the effective settings, write a default
settings file, and print where the settings file lives.
"""

from typing import Annotated

import typer

from fskit.core.paths import get_settings_path
from fskit.core.settings import (
    Settings,
    SettingsError,
    load_settings_or_default,
    save_settings,
)
from fskit.utils.formatting import console, print_error, print_info, print_success, print_warning

app = typer.Typer(
    help="Show and initialize fskit settings.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective settings as JSON."""
    try:
        settings = load_settings_or_default()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not get_settings_path().exists():
        print_info("No settings file found, showing defaults.")
    console.print_json(data=settings.model_dump(mode="json"))


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write a settings file with the default values."""
    settings_path = get_settings_path()
    if settings_path.exists() and not force:
        print_warning(f"Settings file already exists: {settings_path} (use --force)")
        raise typer.Exit(code=1)

    try:
        saved = save_settings(Settings(), settings_path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {saved}")


@app.command()
def path() -> None:
    """Print the settings file location."""
    typer.echo(str(get_settings_path()))
