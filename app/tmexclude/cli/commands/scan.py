"""Scan command implementation.

Lists dependency directories that match the rules without touching their
backup exclusion state.
"""

import json
from enum import Enum
from typing import Annotated

import typer

from tmexclude.cli.display import create_matches_table
from tmexclude.cli.types import RootOption, SkipOption, load_rules_or_exit, resolve_root
from tmexclude.scanner.models import MatchedDirectory
from tmexclude.scanner.walker import TreeWalker
from tmexclude.utils.formatting import console, print_success, print_warning

app = typer.Typer(
    help="List dependency directories without excluding them.",
    invoke_without_command=True,
)


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


@app.callback(invoke_without_command=True)
def scan_directories(
    root: RootOption = None,
    skip: SkipOption = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Find dependency directories matching the rules."""
    as_json = output_format == OutputFormat.JSON
    rule_set = load_rules_or_exit(skip, quiet=as_json)

    walker = TreeWalker(rule_set)
    matches = list(walker.walk(resolve_root(root)))

    if as_json:
        _print_json(matches)
        return

    if not matches:
        print_success("No dependency directories found.")
    else:
        console.print(create_matches_table(matches))
        console.print(f"\n[dim]Found {len(matches)} dependency director(ies)[/dim]")

    if walker.stats.errors:
        print_warning(f"{len(walker.stats.errors)} director(ies) could not be scanned")


def _print_json(matches: list[MatchedDirectory]) -> None:
    """Display matches as JSON."""
    data = [
        {
            "path": m.path,
            "directory_name": m.rule.directory_name,
            "sentinel": m.sentinel_path,
        }
        for m in matches
    ]
    console.print_json(json.dumps(data), ensure_ascii=True)
