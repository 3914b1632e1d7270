"""Allow running aurctl with ``python -m aurctl``."""

from aurctl.cli.main import app

app(prog_name="aurctl")
