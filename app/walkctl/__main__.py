"""Allow ``python -m walkctl``."""

from walkctl.cli.main import app

app()
