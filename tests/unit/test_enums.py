"""Tests for fleetdesk.models.enums -- wire values and display helpers."""
import pytest

from fleetdesk.models.enums import (
    DocumentFilter,
    EntityKind,
    ExpiryClass,
    ReviewStatus,
    TripStatus,
    UserRole,
)


class TestReviewStatus:

    def test_wire_values(self):
        assert [status.value for status in ReviewStatus] == ["in_review", "approved", "rejected"]

    def test_labels(self):
        assert ReviewStatus.IN_REVIEW.label == "In Review"
        assert ReviewStatus.APPROVED.label == "Approved"

    def test_past_tense(self):
        assert ReviewStatus.REJECTED.past_tense == "rejected"
        assert ReviewStatus.IN_REVIEW.past_tense == "marked as in review"

    def test_compares_equal_to_string(self):
        assert ReviewStatus.APPROVED == "approved"


class TestExpiryClass:

    def test_today_and_expiring_need_attention(self):
        assert ExpiryClass.TODAY.needs_attention
        assert ExpiryClass.EXPIRING.needs_attention

    def test_others_do_not(self):
        for cls in (ExpiryClass.UNKNOWN, ExpiryClass.EXPIRED, ExpiryClass.VALID):
            assert not cls.needs_attention


class TestMisc:

    def test_document_filter_values(self):
        assert {f.value for f in DocumentFilter} == {"all", "expired", "expiring", "valid"}

    def test_trip_status_values(self):
        assert TripStatus("canceled") is TripStatus.CANCELED

    def test_user_roles(self):
        assert {role.value for role in UserRole} == {"admin", "driver", "fleet_company"}

    def test_entity_kind_labels(self):
        assert EntityKind.FLEET_PARTNER.label == "Fleet partner"

    def test_unknown_value_rejected(self):
        with pytest.raises(ValueError):
            ReviewStatus("pending")
