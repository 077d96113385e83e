"""Settings commands.

Shows the effective run defaults and writes a starter settings file.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from walkctl.core.paths import get_settings_path
from walkctl.core.settings import SettingsError, WalkSettings, load_settings, save_settings
from walkctl.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize run defaults.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective run defaults."""
    path = get_settings_path()
    try:
        settings = load_settings(path)
    except SettingsError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    table = Table(title="Run Defaults", show_lines=False)
    table.add_column("Option", style="bold")
    table.add_column("Value")

    table.add_row("--root", escape(settings.root))
    table.add_row("--ext", escape(settings.ext) or "[muted](none)[/]")
    table.add_row("--size", str(settings.size))
    table.add_row("--log", escape(settings.log) if settings.log else "[muted](stdout)[/]")

    console.print(table)
    source = path if path.exists() else "built-in defaults"
    console.print(f"\n[dim]Source: {escape(str(source))}[/dim]")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write a settings file with the built-in defaults."""
    path = get_settings_path()
    if path.exists() and not force:
        print_info(f"Settings file already exists: {escape(str(path))} (use --force)")
        raise typer.Exit(code=0)

    try:
        saved = save_settings(WalkSettings(), path)
    except SettingsError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {escape(str(saved))}")
