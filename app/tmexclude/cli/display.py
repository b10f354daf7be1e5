"""Shared Rich display functions for rules, matches, and outcomes.

Outcome lines are printed one at a time while the scan runs; tables are
used for the listing commands.
"""

from rich.markup import escape
from rich.table import Table

from tmexclude.core.pipeline import PipelineSummary
from tmexclude.exclusion.models import ExclusionOutcome, OutcomeKind
from tmexclude.rules.models import ClassificationRule, RuleLineError
from tmexclude.scanner.models import MatchedDirectory
from tmexclude.utils.formatting import console, format_path, format_size, print_warning


def format_outcome(outcome: ExclusionOutcome) -> str:
    """Build the Rich markup line reporting one outcome.

    Args:
        outcome: Outcome to describe.

    Returns:
        A single line of Rich markup.
    """
    path = f"[path]{escape(format_path(outcome.path))}[/path]"

    if outcome.kind == OutcomeKind.ALREADY_EXCLUDED:
        return f"[already_excluded]already excluded[/already_excluded] {path}"
    if outcome.kind == OutcomeKind.SKIPPED_NOT_WRITABLE:
        return f"[skipped]skipped[/skipped] {path} [muted](not writable)[/muted]"
    if outcome.kind == OutcomeKind.FAILED:
        reason = escape(outcome.reason or "Unknown error")
        return f"[failed]failed[/failed] {path} [muted]{reason}[/muted]"
    if outcome.dry_run:
        return f"[info]would exclude[/info] {path}"
    return f"[excluded]excluded[/excluded] {path} [size]({format_size(outcome.size_bytes)})[/size]"


def print_outcome(outcome: ExclusionOutcome) -> None:
    """Print one outcome line."""
    console.print(format_outcome(outcome), highlight=False)


def print_rule_errors(errors: tuple[RuleLineError, ...]) -> None:
    """Warn about every malformed rule line."""
    for error in errors:
        print_warning(f"Ignoring malformed rule, {escape(str(error))}")


def create_rules_table(rules: tuple[ClassificationRule, ...], title: str = "Rules") -> Table:
    """Create a Rich table listing classification rules.

    Args:
        rules: Rules in insertion order.
        title: Table title.

    Returns:
        Rich Table with Directory and Sentinel columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Directory", no_wrap=True, style="rule")
    table.add_column("Sentinel", no_wrap=True)

    for rule in rules:
        table.add_row(escape(rule.directory_name), escape(rule.sentinel_name))

    return table


def create_matches_table(matches: list[MatchedDirectory]) -> Table:
    """Create a Rich table listing matched directories.

    Args:
        matches: Matches in walk order.

    Returns:
        Rich Table with Path and Rule columns.
    """
    table = Table(
        title="Dependency Directories",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="path")
    table.add_column("Rule", style="rule", no_wrap=True)

    for match in matches:
        table.add_row(escape(format_path(match.path)), escape(str(match.rule)))

    return table


def print_summary(summary: PipelineSummary, dry_run: bool = False) -> None:
    """Print the totals of a pipeline run.

    Args:
        summary: Totals to print.
        dry_run: Whether exclusions were only simulated.
    """
    excluded = summary.count(OutcomeKind.EXCLUDED)
    parts: list[str] = []
    if excluded:
        label = "would be excluded" if dry_run else "excluded"
        size = "" if dry_run else f" ({format_size(summary.excluded_bytes)})"
        parts.append(f"[excluded]{excluded} {label}{size}[/excluded]")
    if summary.count(OutcomeKind.ALREADY_EXCLUDED):
        parts.append(
            f"[already_excluded]{summary.count(OutcomeKind.ALREADY_EXCLUDED)} "
            "already excluded[/already_excluded]"
        )
    if summary.count(OutcomeKind.SKIPPED_NOT_WRITABLE):
        parts.append(
            f"[skipped]{summary.count(OutcomeKind.SKIPPED_NOT_WRITABLE)} "
            "not writable[/skipped]"
        )
    if summary.failed:
        parts.append(f"[failed]{summary.failed} failed[/failed]")

    console.print(
        f"\n{summary.rules_loaded} rules loaded, {summary.processed} path(s) processed",
        highlight=False,
    )
    if parts:
        console.print(f"Summary: {', '.join(parts)}", highlight=False)
    if summary.walk_errors:
        print_warning(f"{len(summary.walk_errors)} director(ies) could not be scanned")
