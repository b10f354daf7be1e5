"""Allow running tmexclude as ``python -m tmexclude``."""

from tmexclude.cli.main import app

app(prog_name="tmexclude")
