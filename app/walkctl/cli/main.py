"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer

from walkctl import __version__
from walkctl.cli.commands import config, run

# Create main Typer app
app = typer.Typer(
    name="walkctl",
    help="Walk a directory tree and list, delete or archive matching files.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"walkctl version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send diagnostics to stderr, at DEBUG level when verbose."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S")


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
            help="Enable verbose output.",
        ),
    ] = False,
) -> None:
    """walkctl - walk a directory tree and act on the files it finds.

    Filter files by extension and minimum size, then list them, delete
    them with an audit trail, or archive them as gzip copies.
    """
    configure_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


# Register commands
app.command(name="run")(run.run_cmd)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
