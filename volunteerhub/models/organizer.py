# volunteerhub/models/organizer.py

from flask import current_app
from sqlalchemy import Enum, Index
from sqlalchemy.exc import SQLAlchemyError

from .base import BaseModel, db
from .enums import VerificationStatus


class Organizer(BaseModel):
    """Organization profile attached to an organizer account, subject to admin verification"""

    __tablename__ = "organizers"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("profiles.id"), unique=True, nullable=False)
    organization_name = db.Column(db.String(200), nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)
    contact_email = db.Column(db.String(255), nullable=False)
    verification_status = db.Column(
        Enum(VerificationStatus, name="verification_status_enum"),
        default=VerificationStatus.PENDING,
        nullable=False,
        index=True,
    )
    verification_documents = db.Column(db.String(500), nullable=True)
    verified_at = db.Column(db.DateTime, nullable=True)
    verified_by = db.Column(db.Integer, db.ForeignKey("profiles.id"), nullable=True)

    # Relationships
    profile = db.relationship("Profile", back_populates="organizer", foreign_keys=[user_id])
    verifier = db.relationship("Profile", foreign_keys=[verified_by])
    events = db.relationship("Event", back_populates="organizer")

    __table_args__ = (Index("idx_organizer_status_created", "verification_status", "created_at"),)

    def __repr__(self):
        return f"<Organizer {self.organization_name} ({self.verification_status.value})>"

    @staticmethod
    def find_by_user_id(user_id):
        """Find the organizer row owned by a profile with error handling"""
        try:
            return Organizer.query.filter_by(user_id=user_id).first()
        except SQLAlchemyError as e:
            current_app.logger.error(f"Database error finding organizer for user {user_id}: {str(e)}")
            return None

    @property
    def is_approved(self):
        return self.verification_status == VerificationStatus.APPROVED
