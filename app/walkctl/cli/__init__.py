"""CLI package for walkctl.

This package contains the Typer application and all subcommands.
"""

from walkctl.cli.main import app

__all__ = ["app"]
