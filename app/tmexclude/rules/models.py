"""Rule domain models.

This module defines the classification rules that identify dependency
directories, the immutable rule set handed to the tree walker, and the
per-line parse results produced by the rule file loader.
"""

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ClassificationRule:
    """A directory name paired with the sentinel file that confirms it.

    A directory matches when its base name equals ``directory_name`` and
    ``sentinel_name`` exists beside it, in the same parent directory.

    Attributes:
        directory_name: Base name of the dependency directory (e.g., "vendor").
        sentinel_name: Sibling file name confirming its type (e.g., "go.mod").
    """

    directory_name: str
    sentinel_name: str

    def __post_init__(self) -> None:
        """Validate rule tokens after initialization."""
        for value in (self.directory_name, self.sentinel_name):
            if not value:
                msg = "Rule names cannot be empty"
                raise ValueError(msg)
            if "/" in value:
                msg = f"Rule names must be plain file names, got {value!r}"
                raise ValueError(msg)

    def __str__(self) -> str:
        return f"{self.directory_name} {self.sentinel_name}"


@dataclass(frozen=True, slots=True)
class RuleLineError:
    """A rule file line that could not be turned into a rule.

    Attributes:
        lineno: 1-based line number in the source.
        line: Raw line text, without the trailing newline.
        message: Why the line was rejected.
    """

    lineno: int
    line: str
    message: str

    def __str__(self) -> str:
        return f"line {self.lineno}: {self.message}: {self.line.strip()!r}"


@dataclass(frozen=True, slots=True)
class ParsedRules:
    """Outcome of parsing a whole rule source.

    Attributes:
        rules: Valid rules in source order (duplicates kept).
        errors: Lines that were skipped because they are malformed.
    """

    rules: tuple[ClassificationRule, ...]
    errors: tuple[RuleLineError, ...] = ()


def _normalize_skip_path(path: str | Path) -> str:
    normalized = os.path.normpath(os.path.abspath(os.fspath(path)))
    if not normalized:
        msg = "Skip path cannot be empty"
        raise ValueError(msg)
    return normalized


@dataclass(frozen=True)
class RuleSet:
    """Immutable rules and skip paths for one scan.

    Built once at startup and passed to the walker. Several rules may
    share a directory name; a directory then matches when any of their
    sentinels is present.

    Attributes:
        rules: Classification rules in insertion order.
        skip_paths: Normalized absolute paths that are never traversed.
    """

    rules: tuple[ClassificationRule, ...]
    skip_paths: frozenset[str] = frozenset()
    _by_name: dict[str, tuple[ClassificationRule, ...]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        by_name: dict[str, list[ClassificationRule]] = {}
        for rule in self.rules:
            by_name.setdefault(rule.directory_name, []).append(rule)
        object.__setattr__(self, "_by_name", {k: tuple(v) for k, v in by_name.items()})

    @classmethod
    def build(
        cls,
        rules: Iterable[ClassificationRule],
        skip_paths: Iterable[str | Path] = (),
    ) -> "RuleSet":
        """Create a rule set, normalizing skip paths to absolute form."""
        return cls(
            rules=tuple(rules),
            skip_paths=frozenset(_normalize_skip_path(p) for p in skip_paths),
        )

    def rules_for(self, directory_name: str) -> tuple[ClassificationRule, ...]:
        """Return the rules whose directory name equals ``directory_name``."""
        return self._by_name.get(directory_name, ())

    def skip_path_for(self, path: str) -> str | None:
        """Return the skip path that covers ``path``, if any.

        A skip path covers itself and every path beneath it.

        Args:
            path: Normalized absolute path to test.

        Returns:
            The covering skip path, or None.
        """
        for skip in self.skip_paths:
            if path == skip:
                return skip
            prefix = skip if skip.endswith(os.sep) else skip + os.sep
            if path.startswith(prefix):
                return skip
        return None

    def __len__(self) -> int:
        return len(self.rules)
