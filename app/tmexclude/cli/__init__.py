"""CLI package for tmexclude.

This package contains the Typer application and all subcommands.
"""

from tmexclude.cli.main import app

__all__ = ["app"]
