"""Exclusion applier.

Applies the backup exclusion to matched directories one at a time,
checking the current state and write permission first. Every failure
stays local to its path.
"""

import logging
import os
from collections.abc import Callable

from tmexclude.exclusion.backend import ExclusionBackend, ExclusionError
from tmexclude.exclusion.models import ExclusionOutcome
from tmexclude.exclusion.usage import measure_disk_usage

logger = logging.getLogger(__name__)

OutcomeCallback = Callable[[ExclusionOutcome], None]


class ExclusionApplier:
    """Marks matched directories as excluded from backups.

    For each path, in order:

    1. Already excluded: ALREADY_EXCLUDED, nothing else happens.
    2. Not writable: SKIPPED_NOT_WRITABLE, the backend is not asked to
       exclude it (read-only trees make ``tmutil`` fail).
    3. Exclusion fails: FAILED with the tool's reason.
    4. Otherwise EXCLUDED, with the measured disk usage when available.

    Args:
        backend: Backup service primitives.
        measure: Disk usage function returning bytes or None. Defaults to
            :func:`measure_disk_usage`.
        dry_run: If True, stop before step 3 and report what would be excluded.
        on_outcome: Called with every outcome as soon as it is known.
    """

    def __init__(
        self,
        backend: ExclusionBackend,
        *,
        measure: Callable[[str], int | None] | None = None,
        dry_run: bool = False,
        on_outcome: OutcomeCallback | None = None,
    ) -> None:
        self._backend = backend
        self._measure = measure or measure_disk_usage
        self._dry_run = dry_run
        self._on_outcome = on_outcome

    @property
    def dry_run(self) -> bool:
        """Check if applier is in dry-run mode."""
        return self._dry_run

    def apply(self, path: str) -> ExclusionOutcome:
        """Apply the exclusion to one matched directory.

        Never raises for per-path problems; they become FAILED outcomes.

        Args:
            path: Absolute path of the matched directory.

        Returns:
            The outcome, which is also passed to ``on_outcome``.
        """
        outcome = self._apply(path)
        if self._on_outcome is not None:
            self._on_outcome(outcome)
        return outcome

    def _apply(self, path: str) -> ExclusionOutcome:
        try:
            if self._backend.is_excluded(path):
                logger.debug("Already excluded: %s", path)
                return ExclusionOutcome.already_excluded(path)
        except ExclusionError as e:
            logger.debug("Cannot query exclusion state of %s: %s", path, e.reason)
            return ExclusionOutcome.failed(path, e.reason)

        if not os.access(path, os.W_OK):
            logger.debug("Not writable, skipping: %s", path)
            return ExclusionOutcome.skipped_not_writable(path)

        if self._dry_run:
            logger.info("Dry-run: would exclude %s", path)
            return ExclusionOutcome.excluded(path, dry_run=True)

        try:
            self._backend.add_exclusion(path)
        except ExclusionError as e:
            logger.debug("Failed to exclude %s: %s", path, e.reason)
            return ExclusionOutcome.failed(path, e.reason)

        return ExclusionOutcome.excluded(path, self._measure_size(path))

    def _measure_size(self, path: str) -> int | None:
        try:
            return self._measure(path)
        except (OSError, ValueError) as e:
            logger.warning("Cannot measure disk usage of %s: %s", path, e)
            return None
