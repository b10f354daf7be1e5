"""Directory tree scanning.

This module provides the pruning tree walker and its result models.
"""

from tmexclude.scanner.models import MatchedDirectory, WalkError, WalkStats
from tmexclude.scanner.walker import TreeWalker

__all__ = [
    "MatchedDirectory",
    "TreeWalker",
    "WalkError",
    "WalkStats",
]
