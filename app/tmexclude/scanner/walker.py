"""Pruning tree walker for dependency directories.

Walks a directory tree depth-first and yields every directory that a
classification rule matches. Pruning happens before descent: subtrees
under a skip path and matched directories themselves are never listed.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from tmexclude.rules.models import ClassificationRule, RuleSet
from tmexclude.scanner.models import MatchedDirectory, WalkError, WalkStats

logger = logging.getLogger(__name__)


class TreeWalker:
    """Finds rule-matched directories in a single pruning pass.

    Each entry is handled in this order:

    1. Covered by a skip path: pruned, no rules tested, nothing emitted.
    2. A real directory whose name and sibling sentinel match a rule:
       emitted, then pruned.
    3. Any other real directory: descended into.

    Symbolic links are never followed or matched. Entries are visited in
    sorted name order so results are deterministic.

    Args:
        rule_set: Rules and skip paths to apply.

    Attributes:
        stats: Counters for the most recent walk.
    """

    def __init__(self, rule_set: RuleSet) -> None:
        self._rule_set = rule_set
        self.stats = WalkStats()

    def walk(self, root: str | Path) -> Iterator[MatchedDirectory]:
        """Walk ``root`` and lazily yield matched directories.

        A root that does not exist, is not a directory, is a symbolic
        link, or lies under a skip path yields nothing. Directories that
        cannot be listed are logged, recorded in :attr:`stats`, and skipped.

        Args:
            root: Directory tree to scan.

        Yields:
            MatchedDirectory for each matched directory, once each.
        """
        self.stats = WalkStats()
        root_path = os.path.normpath(os.path.abspath(os.fspath(root)))

        if self._prune_skipped(root_path):
            return
        if os.path.islink(root_path):
            logger.debug("Scan root is a symbolic link, not followed: %s", root_path)
            return
        if not os.path.isdir(root_path):
            logger.debug("Scan root does not exist or is not a directory: %s", root_path)
            return

        rule = self._match(os.path.basename(root_path), os.path.dirname(root_path))
        if rule is not None:
            yield self._emit(root_path, rule)
            return

        pending = [root_path]
        while pending:
            directory = pending.pop()
            subdirectories: list[str] = []

            for entry in self._list_entries(directory):
                if self._prune_skipped(entry.path):
                    continue
                if not self._is_real_directory(entry):
                    continue

                rule = self._match(entry.name, directory)
                if rule is not None:
                    yield self._emit(entry.path, rule)
                    continue

                subdirectories.append(entry.path)

            # Reversed so the alphabetically first child is walked next.
            pending.extend(reversed(subdirectories))

    def _list_entries(self, directory: str) -> list[os.DirEntry[str]]:
        """Read the entries of one directory, sorted by name.

        Args:
            directory: Directory to list.

        Returns:
            Directory entries, or an empty list if listing failed.
        """
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except PermissionError:
            logger.warning("Permission denied scanning directory: %s", directory)
            self.stats.errors.append(WalkError(directory, "Permission denied"))
            return []
        except OSError as e:
            logger.warning("Cannot scan directory %s: %s", directory, e.strerror or e)
            self.stats.errors.append(WalkError(directory, str(e.strerror or e)))
            return []

        self.stats.directories_listed += 1
        return entries

    def _prune_skipped(self, path: str) -> bool:
        skip = self._rule_set.skip_path_for(path)
        if skip is None:
            return False
        logger.debug("Skip %s (covered by skip path %s)", path, skip)
        self.stats.skipped += 1
        return True

    def _match(self, name: str, parent: str) -> ClassificationRule | None:
        """Return the first rule for ``name`` whose sentinel exists in ``parent``.

        Several rules may share a directory name; any present sentinel is
        enough.
        """
        for rule in self._rule_set.rules_for(name):
            sentinel = os.path.join(parent, rule.sentinel_name)
            if os.path.exists(sentinel):
                logger.debug("Rule '%s' fired: sentinel %s exists", rule, sentinel)
                return rule
            logger.debug("Rule '%s' not applied: no sentinel at %s", rule, sentinel)
        return None

    def _emit(self, path: str, rule: ClassificationRule) -> MatchedDirectory:
        self.stats.matched += 1
        logger.debug("Match %s", path)
        return MatchedDirectory(path=path, rule=rule)

    def _is_real_directory(self, entry: os.DirEntry[str]) -> bool:
        """Check for a directory without following symbolic links."""
        try:
            return entry.is_dir(follow_symlinks=False)
        except OSError as e:
            logger.warning("Cannot determine type of %s: %s", entry.path, e.strerror or e)
            self.stats.errors.append(WalkError(entry.path, str(e.strerror or e)))
            return False
