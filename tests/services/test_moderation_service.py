import pytest

from volunteerhub.exceptions import ModerationError
from volunteerhub.models import Event, EventStatus, ModerationDecision, Organizer, VerificationStatus, db
from volunteerhub.services.moderation_service import ModerationService
from volunteerhub.services.onboarding_service import OnboardingService


def _reload(model, row_id):
    return db.session.get(model, row_id, populate_existing=True)


class TestOrganizerModeration:
    """Test organizer verification decisions"""

    def test_approve(self, pending_organizer, admin):
        ModerationService.set_organizer_status(pending_organizer.id, ModerationDecision.APPROVED, admin_id=admin.id)
        organizer = _reload(Organizer, pending_organizer.id)
        assert organizer.verification_status is VerificationStatus.APPROVED
        assert organizer.verified_by == admin.id
        assert organizer.verified_at is not None

    def test_reject_with_string_decision(self, pending_organizer, admin):
        ModerationService.set_organizer_status(pending_organizer.id, "rejected", admin_id=admin.id)
        assert _reload(Organizer, pending_organizer.id).verification_status is VerificationStatus.REJECTED

    def test_repeat_decision_is_idempotent(self, pending_organizer, admin):
        ModerationService.set_organizer_status(pending_organizer.id, "approved", admin_id=admin.id)
        ModerationService.set_organizer_status(pending_organizer.id, "approved", admin_id=admin.id)
        assert _reload(Organizer, pending_organizer.id).verification_status is VerificationStatus.APPROVED

    def test_repeat_decision_records_latest_admin(self, pending_organizer, admin, second_admin):
        ModerationService.set_organizer_status(pending_organizer.id, "approved", admin_id=admin.id)
        first_verified_at = _reload(Organizer, pending_organizer.id).verified_at

        ModerationService.set_organizer_status(pending_organizer.id, "approved", admin_id=second_admin.id)
        organizer = _reload(Organizer, pending_organizer.id)
        assert organizer.verification_status is VerificationStatus.APPROVED
        assert organizer.verified_by == second_admin.id
        assert organizer.verified_at >= first_verified_at

    def test_no_prior_state_check(self, approved_organizer, admin):
        """An approved organizer can be rejected, and back again"""
        ModerationService.set_organizer_status(approved_organizer.id, "rejected", admin_id=admin.id)
        assert _reload(Organizer, approved_organizer.id).verification_status is VerificationStatus.REJECTED
        ModerationService.set_organizer_status(approved_organizer.id, "approved", admin_id=admin.id)
        assert _reload(Organizer, approved_organizer.id).verification_status is VerificationStatus.APPROVED

    def test_invalid_decision_touches_nothing(self, pending_organizer):
        with pytest.raises(ValueError, match="Invalid moderation decision"):
            ModerationService.set_organizer_status(pending_organizer.id, "pending")
        assert _reload(Organizer, pending_organizer.id).verification_status is VerificationStatus.PENDING

    def test_unknown_organizer(self, app):
        with pytest.raises(ModerationError, match="not found"):
            ModerationService.set_organizer_status(999, "approved")

    def test_database_failure(self, pending_organizer, mock_database_error):
        with pytest.raises(ModerationError, match="Failed to update organizer"):
            ModerationService.set_organizer_status(pending_organizer.id, "approved")
        assert _reload(Organizer, pending_organizer.id).verification_status is VerificationStatus.PENDING


class TestEventModeration:
    """Test event approval decisions"""

    def test_approve(self, make_event, approved_organizer, category, admin):
        event = make_event(approved_organizer, category, status=EventStatus.PENDING)
        ModerationService.set_event_status(event.id, ModerationDecision.APPROVED, admin_id=admin.id)
        event = _reload(Event, event.id)
        assert event.status is EventStatus.APPROVED
        assert event.approved_by == admin.id
        assert event.approved_at is not None

    def test_reject(self, make_event, approved_organizer, category, admin):
        event = make_event(approved_organizer, category, status=EventStatus.PENDING)
        ModerationService.set_event_status(event.id, "rejected", admin_id=admin.id)
        assert _reload(Event, event.id).status is EventStatus.REJECTED

    def test_repeat_decision_records_latest_admin(self, make_event, approved_organizer, category, admin, second_admin):
        event = make_event(approved_organizer, category, status=EventStatus.PENDING)
        ModerationService.set_event_status(event.id, "approved", admin_id=admin.id)
        first_approved_at = _reload(Event, event.id).approved_at

        ModerationService.set_event_status(event.id, "approved", admin_id=second_admin.id)
        event = _reload(Event, event.id)
        assert event.status is EventStatus.APPROVED
        assert event.approved_by == second_admin.id
        assert event.approved_at >= first_approved_at

    def test_completed_event_can_be_overwritten(self, make_event, approved_organizer, category):
        event = make_event(approved_organizer, category, status=EventStatus.COMPLETED)
        ModerationService.set_event_status(event.id, "approved")
        assert _reload(Event, event.id).status is EventStatus.APPROVED

    def test_invalid_decision(self, event):
        with pytest.raises(ValueError):
            ModerationService.set_event_status(event.id, "completed")

    def test_unknown_event(self, app):
        with pytest.raises(ModerationError):
            ModerationService.set_event_status(999, "rejected")


class TestModerationQueues:
    """Test the admin dashboard data"""

    def test_pending_organizers_newest_first(self, pending_organizer):
        _user, newer = OnboardingService.register_organizer(
            email="newer@example.com",
            password="orgpass123",
            full_name="Newer Org",
            organization_name="Newer",
            contact_email="newer@org.example.com",
        )
        pending = ModerationService.pending_organizers()
        assert [o.id for o in pending] == [newer.id, pending_organizer.id]
        assert pending[0].profile.full_name == "Newer Org"

    def test_decided_organizers_leave_queue(self, pending_organizer):
        ModerationService.set_organizer_status(pending_organizer.id, "approved")
        assert ModerationService.pending_organizers() == []

    def test_pending_events(self, make_event, approved_organizer, category):
        first = make_event(approved_organizer, category, title="First", status=EventStatus.PENDING)
        second = make_event(approved_organizer, category, title="Second", status=EventStatus.PENDING)
        make_event(approved_organizer, category, title="Live")
        assert [e.id for e in ModerationService.pending_events()] == [second.id, first.id]

    def test_dashboard_counts(self, event, volunteer, admin, other_category):
        counts = ModerationService.dashboard_counts()
        # organizer + volunteer + admin profiles
        assert counts.users == 3
        assert counts.organizers == 1
        assert counts.events == 1
        assert counts.categories == 2
