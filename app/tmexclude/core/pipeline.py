"""Scan-and-exclude pipeline.

Connects the tree walker to the exclusion applier. Matches are applied
as soon as they are found; the full match list is never held in memory.
"""

import logging
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from tmexclude.exclusion.applier import ExclusionApplier
from tmexclude.exclusion.models import ExclusionOutcome, OutcomeKind
from tmexclude.rules.models import RuleSet
from tmexclude.scanner.models import MatchedDirectory, WalkError
from tmexclude.scanner.walker import TreeWalker

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PipelineSummary:
    """Counts collected over one pipeline run.

    Attributes:
        rules_loaded: Number of rules in the rule set.
        processed: Matched paths handed to the applier.
        counts: Outcomes per kind.
        excluded_bytes: Sum of known sizes of newly excluded paths.
        walk_errors: Directories the walker could not list.
    """

    rules_loaded: int = 0
    processed: int = 0
    counts: Counter[OutcomeKind] = field(default_factory=Counter)
    excluded_bytes: int = 0
    walk_errors: list[WalkError] = field(default_factory=list)

    def record(self, outcome: ExclusionOutcome) -> None:
        """Add one outcome to the totals."""
        self.processed += 1
        self.counts[outcome.kind] += 1
        if outcome.kind == OutcomeKind.EXCLUDED and outcome.size_bytes is not None:
            self.excluded_bytes += outcome.size_bytes

    def count(self, kind: OutcomeKind) -> int:
        """Number of outcomes of the given kind."""
        return self.counts[kind]

    @property
    def failed(self) -> int:
        return self.counts[OutcomeKind.FAILED]


def run_pipeline(
    root: str | Path,
    rule_set: RuleSet,
    applier: ExclusionApplier,
    *,
    walker: TreeWalker | None = None,
    on_match: Callable[[MatchedDirectory], None] | None = None,
    summary: PipelineSummary | None = None,
) -> PipelineSummary:
    """Walk ``root`` and apply the exclusion to every match, one at a time.

    Args:
        root: Directory tree to scan.
        rule_set: Rules and skip paths.
        applier: Applier that handles each match.
        walker: Walker to use; a new one is built from ``rule_set`` if None.
        on_match: Called with each match before it is applied.
        summary: Summary to update in place, so a caller interrupted
            mid-run still sees the partial totals.

    Returns:
        The run summary.
    """
    if walker is None:
        walker = TreeWalker(rule_set)
    if summary is None:
        summary = PipelineSummary()
    summary.rules_loaded = len(rule_set)

    logger.debug("Scanning %s with %d rule(s)", root, len(rule_set))
    try:
        for match in walker.walk(root):
            if on_match is not None:
                on_match(match)
            summary.record(applier.apply(match.path))
    finally:
        summary.walk_errors = list(walker.stats.errors)

    logger.debug(
        "Scan finished: %d listed, %d skipped, %d matched",
        walker.stats.directories_listed,
        walker.stats.skipped,
        walker.stats.matched,
    )
    return summary
