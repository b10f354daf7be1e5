"""Run command implementation.

Scans the tree and excludes every matched dependency directory from
Time Machine backups, reporting each path as it is handled.
"""

from typing import Annotated

import typer
from rich.markup import escape

from tmexclude.cli.display import print_outcome, print_summary
from tmexclude.cli.types import RootOption, SkipOption, load_rules_or_exit, resolve_root
from tmexclude.core.pipeline import PipelineSummary, run_pipeline
from tmexclude.exclusion.applier import ExclusionApplier
from tmexclude.exclusion.backend import ExclusionBackend, TimeMachineBackend
from tmexclude.utils.formatting import format_path, print_error, print_info

app = typer.Typer(
    help="Exclude dependency directories from backups.",
    invoke_without_command=True,
)


def get_backend() -> ExclusionBackend:
    """Return the backup exclusion backend for this system."""
    return TimeMachineBackend()


@app.callback(invoke_without_command=True)
def run_exclusions(
    root: RootOption = None,
    skip: SkipOption = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Show what would be excluded."),
    ] = False,
) -> None:
    """Find dependency directories and exclude them from backups.

    Already excluded paths are left alone, so running again is safe.
    """
    rule_set = load_rules_or_exit(skip)

    backend = get_backend()
    if not backend.is_available():
        print_error(f"{backend.name} is not available on this system.")
        raise typer.Exit(code=1)

    scan_root = resolve_root(root)
    print_info(f"Scanning {escape(format_path(str(scan_root)))}")

    applier = ExclusionApplier(backend, dry_run=dry_run, on_outcome=print_outcome)
    summary = PipelineSummary(rules_loaded=len(rule_set))
    try:
        run_pipeline(scan_root, rule_set, applier, summary=summary)
    except KeyboardInterrupt:
        print_summary(summary, dry_run=dry_run)
        print_error("Interrupted. Exclusions applied so far are kept.")
        raise typer.Exit(code=130) from None

    print_summary(summary, dry_run=dry_run)

