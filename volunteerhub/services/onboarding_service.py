# volunteerhub/services/onboarding_service.py
"""
Organizer onboarding and profile maintenance.

Organizer registration is two writes: the account (user + profile) and then the
organizer row. They are committed separately. If the second write fails the
account stays in place and the caller is told only about the organizer row; the
organizer can finish later through complete_organizer_profile(), which is safe
to repeat.
"""

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from volunteerhub.exceptions import OrganizerProfileError
from volunteerhub.models import Organizer, Profile, Role, VerificationStatus, db
from volunteerhub.services.auth_service import AuthService


class OnboardingService:
    """Account onboarding flows"""

    @staticmethod
    def register_volunteer(email, password, full_name):
        return AuthService.sign_up(email, password, full_name, Role.USER)

    @staticmethod
    def register_organizer(email, password, full_name, organization_name, contact_email, description=None):
        """
        Create an organizer account and its pending organizer row.

        Returns:
            (user, organizer)

        Raises:
            AuthError: the account could not be created (nothing was written).
            OrganizerProfileError: the account exists but the organizer row was not written.
        """
        user = AuthService.sign_up(email, password, full_name, Role.ORGANIZER)
        organizer = OnboardingService._insert_organizer(
            user.id,
            organization_name=organization_name,
            contact_email=contact_email,
            description=description,
        )
        return user, organizer

    @staticmethod
    def complete_organizer_profile(user_id, organization_name, contact_email, description=None):
        """Create the organizer row for an account that lacks one; return the existing row otherwise"""
        existing = Organizer.query.filter_by(user_id=user_id).first()
        if existing is not None:
            return existing
        return OnboardingService._insert_organizer(
            user_id,
            organization_name=organization_name,
            contact_email=contact_email,
            description=description,
        )

    @staticmethod
    def _insert_organizer(user_id, organization_name, contact_email, description=None):
        organization_name = (organization_name or "").strip()
        contact_email = (contact_email or "").strip()
        if not organization_name or not contact_email:
            current_app.logger.warning(f"Organizer row for user {user_id} missing required fields")
            raise OrganizerProfileError("Failed to create organizer profile")

        try:
            organizer = Organizer(
                user_id=user_id,
                organization_name=organization_name,
                description=(description or "").strip() or None,
                contact_email=contact_email,
                verification_status=VerificationStatus.PENDING,
            )
            db.session.add(organizer)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Error creating organizer profile for user {user_id}: {str(e)}")
            raise OrganizerProfileError("Failed to create organizer profile") from e

        current_app.logger.info(f"Organizer '{organizer.organization_name}' created for user {user_id}, pending verification")
        return organizer

    @staticmethod
    def update_profile(profile_id, full_name, phone=None, profile_image=None):
        """Update the owner-editable profile fields. Returns (success, error)."""
        profile = Profile.find_by_id(profile_id)
        if profile is None:
            return False, "Profile not found"

        full_name = (full_name or "").strip()
        if not full_name:
            return False, "Full name is required"

        return profile.safe_update(
            full_name=full_name,
            phone=(phone or "").strip() or None,
            profile_image=(profile_image or "").strip() or None,
        )
