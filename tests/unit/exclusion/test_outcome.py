"""Unit tests for exclusion outcome models."""

import pytest
from tmexclude.exclusion.models import ExclusionOutcome, OutcomeKind


class TestExclusionOutcome:
    """Tests for ExclusionOutcome."""

    def test_constructors_set_kind(self) -> None:
        """Each named constructor produces its kind."""
        assert ExclusionOutcome.already_excluded("/p").kind == OutcomeKind.ALREADY_EXCLUDED
        assert ExclusionOutcome.skipped_not_writable("/p").kind == OutcomeKind.SKIPPED_NOT_WRITABLE
        assert ExclusionOutcome.excluded("/p", 10).kind == OutcomeKind.EXCLUDED
        assert ExclusionOutcome.failed("/p", "boom").kind == OutcomeKind.FAILED

    def test_failed_requires_reason(self) -> None:
        """A failure without a reason is invalid."""
        with pytest.raises(ValueError, match="require a reason"):
            ExclusionOutcome(path="/p", kind=OutcomeKind.FAILED)

    def test_only_excluded_carries_size(self) -> None:
        """Sizes are only meaningful for newly excluded paths."""
        with pytest.raises(ValueError, match="Only excluded outcomes carry a size"):
            ExclusionOutcome(path="/p", kind=OutcomeKind.ALREADY_EXCLUDED, size_bytes=1)

    def test_kind_values(self) -> None:
        """Kinds serialize to stable strings."""
        assert OutcomeKind.SKIPPED_NOT_WRITABLE.value == "skipped_not_writable"
