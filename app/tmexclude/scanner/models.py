"""Tree walk result models."""

import os
from dataclasses import dataclass, field

from tmexclude.rules.models import ClassificationRule


@dataclass(frozen=True, slots=True)
class MatchedDirectory:
    """A dependency directory found during a walk.

    Attributes:
        path: Absolute path of the directory.
        rule: First rule (in insertion order) whose sentinel was found.
    """

    path: str
    rule: ClassificationRule

    def __post_init__(self) -> None:
        """Validate matched directory data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)

    @property
    def sentinel_path(self) -> str:
        """Absolute path of the sentinel file that confirmed the match."""
        return os.path.join(os.path.dirname(self.path), self.rule.sentinel_name)


@dataclass(frozen=True, slots=True)
class WalkError:
    """A directory that could not be listed.

    Attributes:
        path: Directory that failed.
        message: OS error description.
    """

    path: str
    message: str


@dataclass(slots=True)
class WalkStats:
    """Counters collected while walking one tree.

    Attributes:
        directories_listed: Directories whose entries were read.
        skipped: Entries pruned because a skip path covers them.
        matched: Matched directories emitted.
        errors: Directories that could not be listed.
    """

    directories_listed: int = 0
    skipped: int = 0
    matched: int = 0
    errors: list[WalkError] = field(default_factory=list)
