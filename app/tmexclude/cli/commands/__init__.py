"""CLI commands for tmexclude.

This package contains all subcommand implementations.
"""

from tmexclude.cli.commands import rules, run, scan

__all__ = ["rules", "run", "scan"]
