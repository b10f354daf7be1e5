"""Backup exclusion backends.

This module defines the ExclusionBackend interface wrapping the backup
service's "is this path excluded" and "exclude this path" primitives,
and its Time Machine implementation driving ``tmutil``.
"""

import logging
from abc import ABC, abstractmethod

from tmexclude.utils.shell import CommandResult, command_exists, run_command

logger = logging.getLogger(__name__)


class ExclusionError(Exception):
    """Raised when the backup service cannot query or mark a path."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ExclusionBackend(ABC):
    """Abstract base class for backup exclusion backends.

    Example:
        >>> backend = TimeMachineBackend()
        >>> if backend.is_available() and not backend.is_excluded(path):
        ...     backend.add_exclusion(path)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable backend name."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the backup service tooling is present on this system."""

    @abstractmethod
    def is_excluded(self, path: str) -> bool:
        """Check whether the backup service already excludes ``path``.

        Raises:
            ExclusionError: If the state cannot be queried.
        """

    @abstractmethod
    def add_exclusion(self, path: str) -> None:
        """Mark ``path`` as excluded from backups.

        Raises:
            ExclusionError: If the backup service rejects the request.
        """


class TimeMachineBackend(ExclusionBackend):
    """Exclusion backend for macOS Time Machine.

    Uses sticky exclusions (``tmutil addexclusion`` without ``-p``), which
    are stored as an extended attribute on the directory and follow it if
    it moves.
    """

    _TMUTIL = "tmutil"
    _EXCLUDED_PREFIX = "[Excluded]"

    @property
    def name(self) -> str:
        return "Time Machine"

    def is_available(self) -> bool:
        """Check if tmutil is available."""
        return command_exists(self._TMUTIL)

    def is_excluded(self, path: str) -> bool:
        """Check exclusion state with ``tmutil isexcluded``.

        ``tmutil`` prints ``[Excluded]`` or ``[Included]`` followed by the
        path.
        """
        result = self._run("isexcluded", path)
        return result.stdout.lstrip().startswith(self._EXCLUDED_PREFIX)

    def add_exclusion(self, path: str) -> None:
        """Exclude ``path`` with ``tmutil addexclusion``."""
        self._run("addexclusion", path)
        logger.info("Excluded %s from Time Machine backups", path)

    def _run(self, subcommand: str, path: str) -> CommandResult:
        try:
            result = run_command([self._TMUTIL, subcommand, path])
        except FileNotFoundError as e:
            raise ExclusionError(path, f"{self._TMUTIL} not found") from e
        except (OSError, UnicodeError) as e:
            raise ExclusionError(path, str(e)) from e

        if not result.success:
            raise ExclusionError(path, f"{self._TMUTIL} {subcommand}: {result.error_text}")
        return result
