"""Backup exclusion module.

This module provides the backup service backends, the per-path
exclusion applier, and the outcome models it reports.
"""

from tmexclude.exclusion.applier import ExclusionApplier, OutcomeCallback
from tmexclude.exclusion.backend import ExclusionBackend, ExclusionError, TimeMachineBackend
from tmexclude.exclusion.models import ExclusionOutcome, OutcomeKind
from tmexclude.exclusion.usage import measure_disk_usage

__all__ = [
    "ExclusionApplier",
    "ExclusionBackend",
    "ExclusionError",
    "ExclusionOutcome",
    "OutcomeCallback",
    "OutcomeKind",
    "TimeMachineBackend",
    "measure_disk_usage",
]
