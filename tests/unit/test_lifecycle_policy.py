"""Tests for fleetdesk.services.lifecycle -- review status rules."""
import pytest
from unittest.mock import MagicMock

from fleetdesk.models.enums import ReviewStatus
from fleetdesk.services.lifecycle import (
    InvalidStatusError,
    ReasonRequiredError,
    TransitionOrigin,
    apply_status_change,
    available_transitions,
    force_review,
    normalize_status,
    requires_reason,
    validate_transition,
)


def _entity(status):
    entity = MagicMock()
    entity.status = status
    entity.status_description = "previous reason"
    return entity


class TestNormalizeStatus:

    def test_null_means_in_review(self):
        assert normalize_status(None) is ReviewStatus.IN_REVIEW
        assert normalize_status("") is ReviewStatus.IN_REVIEW

    def test_string_value(self):
        assert normalize_status("approved") is ReviewStatus.APPROVED

    def test_unknown_value(self):
        with pytest.raises(InvalidStatusError):
            normalize_status("archived")


class TestRequiresReason:

    def test_list_origin(self):
        assert requires_reason(ReviewStatus.APPROVED) is False
        assert requires_reason(ReviewStatus.REJECTED) is True
        assert requires_reason(ReviewStatus.IN_REVIEW) is True

    def test_detail_origin_never_requires(self):
        for status in ReviewStatus:
            assert requires_reason(status, TransitionOrigin.DETAIL) is False


class TestValidateTransition:

    def test_blank_reason_rejected_from_list(self):
        with pytest.raises(ReasonRequiredError):
            validate_transition("rejected", "   ", TransitionOrigin.LIST)

    def test_reason_trimmed(self):
        assert validate_transition("rejected", "  bad scan  ") == (ReviewStatus.REJECTED, "bad scan")

    def test_approve_without_reason(self):
        assert validate_transition("approved") == (ReviewStatus.APPROVED, None)

    def test_detail_without_reason(self):
        assert validate_transition("in_review", None, "detail") == (ReviewStatus.IN_REVIEW, None)

    def test_missing_target(self):
        with pytest.raises(InvalidStatusError):
            validate_transition(None)


class TestAvailableTransitions:

    def test_current_action_disabled(self):
        actions = available_transitions("approved")
        assert actions == {
            ReviewStatus.IN_REVIEW: True,
            ReviewStatus.APPROVED: False,
            ReviewStatus.REJECTED: True,
        }

    def test_null_status_disables_in_review(self):
        assert available_transitions(None)[ReviewStatus.IN_REVIEW] is False


class TestApplyStatusChange:

    def test_returns_previous_and_sets_status(self):
        entity = _entity(None)
        previous = apply_status_change(entity, "rejected", "Wrong plate")
        assert previous is ReviewStatus.IN_REVIEW
        assert entity.status is ReviewStatus.REJECTED
        assert entity.status_description == "Wrong plate"

    def test_description_kept_when_absent(self):
        entity = _entity(ReviewStatus.REJECTED)
        apply_status_change(entity, ReviewStatus.APPROVED)
        assert entity.status_description == "previous reason"

    def test_same_status_allowed(self):
        entity = _entity(ReviewStatus.APPROVED)
        assert apply_status_change(entity, ReviewStatus.APPROVED) is ReviewStatus.APPROVED


class TestForceReview:

    @pytest.mark.parametrize("status", [ReviewStatus.APPROVED, ReviewStatus.REJECTED])
    def test_reviewed_records_go_back(self, status):
        entity = _entity(status)
        assert force_review(entity, "profile update") is True
        assert entity.status is ReviewStatus.IN_REVIEW

    def test_in_review_stays(self):
        entity = _entity(None)
        assert force_review(entity, "profile update") is False
        assert entity.status is ReviewStatus.IN_REVIEW
