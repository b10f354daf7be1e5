"""Exclusion outcome models.

Outcomes exist only for reporting; nothing is persisted.
"""

from dataclasses import dataclass
from enum import Enum


class OutcomeKind(str, Enum):
    """What happened to one matched directory.

    Attributes:
        ALREADY_EXCLUDED: The backup service already excludes the path.
        SKIPPED_NOT_WRITABLE: The path is not writable, so it was left alone.
        EXCLUDED: The path was marked excluded.
        FAILED: Querying or marking the path failed.
    """

    ALREADY_EXCLUDED = "already_excluded"
    SKIPPED_NOT_WRITABLE = "skipped_not_writable"
    EXCLUDED = "excluded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ExclusionOutcome:
    """Result of applying the exclusion to a single path.

    Attributes:
        path: Absolute path that was processed.
        kind: Outcome classification.
        size_bytes: Disk usage for EXCLUDED outcomes (None if unknown).
        reason: Failure description for FAILED outcomes.
        dry_run: Whether the exclusion was only simulated.
    """

    path: str
    kind: OutcomeKind
    size_bytes: int | None = None
    reason: str | None = None
    dry_run: bool = False

    def __post_init__(self) -> None:
        """Validate outcome data after initialization."""
        if self.kind == OutcomeKind.FAILED and not self.reason:
            msg = "Failed outcomes require a reason"
            raise ValueError(msg)
        if self.size_bytes is not None and self.kind != OutcomeKind.EXCLUDED:
            msg = f"Only excluded outcomes carry a size, got {self.kind.value}"
            raise ValueError(msg)

    @classmethod
    def already_excluded(cls, path: str) -> "ExclusionOutcome":
        return cls(path=path, kind=OutcomeKind.ALREADY_EXCLUDED)

    @classmethod
    def skipped_not_writable(cls, path: str) -> "ExclusionOutcome":
        return cls(path=path, kind=OutcomeKind.SKIPPED_NOT_WRITABLE)

    @classmethod
    def excluded(
        cls, path: str, size_bytes: int | None = None, *, dry_run: bool = False
    ) -> "ExclusionOutcome":
        return cls(path=path, kind=OutcomeKind.EXCLUDED, size_bytes=size_bytes, dry_run=dry_run)

    @classmethod
    def failed(cls, path: str, reason: str) -> "ExclusionOutcome":
        return cls(path=path, kind=OutcomeKind.FAILED, reason=reason)
