# volunteerhub/models/event/models.py

from sqlalchemy import Enum, Index

from ..base import BaseModel, db, utcnow
from .enums import EventStatus, ParticipantStatus


class Event(BaseModel):
    """Volunteer event proposed by an organizer and published after admin approval"""

    __tablename__ = "events"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False, index=True)
    description = db.Column(db.Text, nullable=False, default="")
    organizer_id = db.Column(db.Integer, db.ForeignKey("organizers.id"), nullable=False)
    category_id = db.Column(db.Integer, db.ForeignKey("categories.id"), nullable=False)
    event_date = db.Column(db.DateTime, nullable=False, index=True)
    location = db.Column(db.String(300), nullable=False, default="")
    image_url = db.Column(db.String(500), nullable=True)
    volunteers_needed = db.Column(db.Integer, nullable=False, default=10)
    status = db.Column(
        Enum(EventStatus, name="event_status_enum"),
        default=EventStatus.PENDING,
        nullable=False,
        index=True,
    )
    approved_by = db.Column(db.Integer, db.ForeignKey("profiles.id"), nullable=True)
    approved_at = db.Column(db.DateTime, nullable=True)

    # Relationships
    organizer = db.relationship("Organizer", back_populates="events")
    category = db.relationship("Category", back_populates="events")
    approver = db.relationship("Profile", foreign_keys=[approved_by])
    participants = db.relationship("EventParticipant", back_populates="event")

    # Indexes for performance
    __table_args__ = (
        Index("idx_event_status_date", "status", "event_date"),
        Index("idx_event_status_created", "status", "created_at"),
    )

    def __repr__(self):
        return f"<Event {self.title} ({self.status.value})>"


class EventParticipant(BaseModel):
    """Participation ledger row linking a profile to an event"""

    __tablename__ = "event_participants"

    id = db.Column(db.Integer, primary_key=True)
    event_id = db.Column(db.Integer, db.ForeignKey("events.id"), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("profiles.id"), nullable=False)
    status = db.Column(
        Enum(ParticipantStatus, name="participant_status_enum"),
        default=ParticipantStatus.JOINED,
        nullable=False,
        index=True,
    )
    joined_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    completed_at = db.Column(db.DateTime, nullable=True)

    # Relationships
    event = db.relationship("Event", back_populates="participants")
    profile = db.relationship("Profile", foreign_keys=[user_id])

    # No unique constraint on (event_id, user_id): the join path enforces one joined row per pair
    __table_args__ = (
        Index("idx_participant_event_status", "event_id", "status"),
        Index("idx_participant_user_status", "user_id", "status"),
    )

    def __repr__(self):
        return f"<EventParticipant event={self.event_id} user={self.user_id} status={self.status.value}>"
