from datetime import timedelta

import pytest

from volunteerhub.models import (
    Category,
    Event,
    EventParticipant,
    EventStatus,
    ModerationDecision,
    Organizer,
    ParticipantStatus,
    Profile,
    Role,
    User,
    VerificationStatus,
    dashboard_endpoint,
    db,
    utcnow,
)


class TestEnums:
    """Test enum parsing and the role dashboard mapping"""

    def test_role_parse(self):
        assert Role.parse("admin") is Role.ADMIN
        assert Role.parse(" Organizer ") is Role.ORGANIZER
        assert Role.parse(Role.USER) is Role.USER

    def test_role_parse_rejects_unknown(self):
        with pytest.raises(ValueError):
            Role.parse("superuser")
        with pytest.raises(ValueError):
            Role.parse(None)

    def test_moderation_decision_parse(self):
        assert ModerationDecision.parse("approved") is ModerationDecision.APPROVED
        assert ModerationDecision.parse("REJECTED") is ModerationDecision.REJECTED

    @pytest.mark.parametrize("value", ["pending", "completed", "", None, "approve"])
    def test_moderation_decision_rejects_other_values(self, value):
        with pytest.raises(ValueError, match="Invalid moderation decision"):
            ModerationDecision.parse(value)

    def test_dashboard_endpoint_is_exhaustive(self):
        assert {dashboard_endpoint(role) for role in Role} == {
            "admin_dashboard",
            "organizer_dashboard",
            "user_dashboard",
        }

    def test_decision_values_match_statuses(self):
        for decision in ModerationDecision:
            assert VerificationStatus(decision.value).value == decision.value
            assert EventStatus(decision.value).value == decision.value


class TestUserAndProfile:
    """Test identity and profile models"""

    def test_profile_shares_user_id(self, volunteer):
        profile = db.session.get(Profile, volunteer.id)
        assert profile is not None
        assert profile.user.email == "volunteer@example.com"
        assert volunteer.profile is profile

    def test_find_by_email_is_case_insensitive(self, volunteer):
        assert User.find_by_email("VOLUNTEER@example.com").id == volunteer.id
        assert User.find_by_email("nobody@example.com") is None
        assert User.find_by_email("") is None

    def test_profile_defaults_and_initials(self, volunteer):
        profile = volunteer.profile
        assert profile.role is Role.USER
        assert profile.phone is None
        assert profile.get_initials() == "VV"
        assert profile.created_at is not None

    def test_initials_fallback(self):
        assert Profile(full_name="").get_initials() == "?"

    def test_safe_update(self, volunteer):
        success, error = volunteer.profile.safe_update(phone="555-0100")
        assert success is True
        assert error is None
        assert db.session.get(Profile, volunteer.id).phone == "555-0100"

    def test_safe_update_reports_database_error(self, volunteer, mock_database_error):
        success, error = volunteer.profile.safe_update(phone="555-0100")
        assert success is False
        assert "db down" in error

    def test_safe_create(self, app):
        category, error = Category.safe_create(name="Health", icon="heart")
        assert error is None
        assert category.id is not None

    def test_safe_create_duplicate_name(self, category):
        duplicate, error = Category.safe_create(name="Environment")
        assert duplicate is None
        assert error


class TestOrganizer:
    """Test organizer model"""

    def test_new_organizer_is_pending(self, pending_organizer):
        assert pending_organizer.verification_status is VerificationStatus.PENDING
        assert pending_organizer.is_approved is False
        assert pending_organizer.verified_at is None

    def test_approved_organizer(self, approved_organizer):
        assert approved_organizer.is_approved is True

    def test_find_by_user_id(self, pending_organizer):
        found = Organizer.find_by_user_id(pending_organizer.user_id)
        assert found.id == pending_organizer.id
        assert found.profile.role is Role.ORGANIZER
        assert Organizer.find_by_user_id(424242) is None


class TestEvent:
    """Test event and participant models"""

    def test_defaults(self, approved_organizer, category):
        event = Event(
            title="Food Drive",
            organizer_id=approved_organizer.id,
            category_id=category.id,
            event_date=utcnow() + timedelta(days=3),
        )
        db.session.add(event)
        db.session.commit()
        assert event.status is EventStatus.PENDING
        assert event.volunteers_needed == 10
        assert event.approved_at is None

    def test_participant_defaults(self, event, volunteer):
        participant = EventParticipant(event_id=event.id, user_id=volunteer.id)
        db.session.add(participant)
        db.session.commit()
        assert participant.status is ParticipantStatus.JOINED
        assert participant.joined_at is not None
        assert participant.completed_at is None
        assert event.participants == [participant]
        assert participant.profile.full_name == "Vera Volunteer"
