"""Shared options and helpers for CLI commands.

This module provides the option types and the rule set bootstrap used by
more than one command module.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from tmexclude.cli.display import print_rule_errors
from tmexclude.core.paths import get_default_skip_paths, get_rules_path, get_scan_root
from tmexclude.rules.loader import load_rule_set
from tmexclude.rules.models import RuleSet
from tmexclude.utils.formatting import console, format_path, print_error

RootOption = Annotated[
    Path | None,
    typer.Option(
        "--root",
        "-r",
        help="Directory tree to scan. Defaults to your home directory.",
        file_okay=False,
    ),
]

SkipOption = Annotated[
    list[Path] | None,
    typer.Option(
        "--skip",
        "-s",
        help="Additional path to leave untouched (repeatable).",
    ),
]


def resolve_root(root: Path | None) -> Path:
    """Return the scan root, defaulting to the user's home directory."""
    return root.expanduser() if root is not None else get_scan_root()


def load_rules_or_exit(extra_skips: list[Path] | None = None, quiet: bool = False) -> RuleSet:
    """Load the rule set for a command, exiting on setup failure.

    Creates the default rule file on first run, warns about malformed
    lines, and prints how many rules were loaded.

    Args:
        extra_skips: Skip paths given on the command line.
        quiet: Suppress the "rules loaded" line.

    Returns:
        The loaded rule set.

    Raises:
        typer.Exit: With code 1 if the config area or rule file is unusable.
    """
    skips = [*get_default_skip_paths(), *(p.expanduser() for p in extra_skips or [])]
    try:
        rule_set, errors = load_rule_set(skips)
    except RuntimeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_rule_errors(errors)
    if not quiet:
        rules_path = escape(format_path(str(get_rules_path())))
        console.print(
            f"[muted]{len(rule_set)} rules loaded from {rules_path}[/muted]",
            highlight=False,
        )
    return rule_set
