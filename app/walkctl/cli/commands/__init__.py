"""CLI commands for walkctl.

This package contains all subcommand implementations.
"""

from walkctl.cli.commands import config, run

__all__ = ["config", "run"]
