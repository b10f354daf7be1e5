"""Rules command implementation.

Shows the classification rules in effect, creating the default rule
file on first use.
"""

from typing import Annotated

import typer

from tmexclude.cli.display import create_rules_table
from tmexclude.cli.types import load_rules_or_exit
from tmexclude.core.paths import get_rules_path
from tmexclude.utils.formatting import console, print_info

app = typer.Typer(
    help="Show the classification rules.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def show_rules(
    path_only: Annotated[
        bool,
        typer.Option("--path", "-p", help="Only print the rule file location."),
    ] = False,
) -> None:
    """List the loaded rules and the skip paths."""
    rule_set = load_rules_or_exit(quiet=path_only)

    if path_only:
        typer.echo(str(get_rules_path()))
        return

    console.print(create_rules_table(rule_set.rules))
    if rule_set.skip_paths:
        print_info("Skipped paths:")
        for skip in sorted(rule_set.skip_paths):
            console.print(f"  {skip}", highlight=False, markup=False)
