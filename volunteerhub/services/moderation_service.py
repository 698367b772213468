# volunteerhub/services/moderation_service.py
"""
Moderation workflow: admins approve or reject organizers and events.

Each decision is one UPDATE that sets the status, the acting admin and the
timestamp. The current status is not consulted, so any status can be replaced by
either decision and repeating a decision only refreshes the admin/timestamp
pair. Concurrent decisions on the same row resolve as last write wins.

Authorization is the caller's job: these functions trust that the route guard
already admitted an admin.
"""

from dataclasses import dataclass
from typing import List

from flask import current_app
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from volunteerhub.exceptions import ModerationError
from volunteerhub.models import (
    Category,
    Event,
    EventStatus,
    ModerationDecision,
    Organizer,
    Profile,
    VerificationStatus,
    db,
    utcnow,
)


@dataclass
class DashboardCounts:
    users: int = 0
    organizers: int = 0
    events: int = 0
    categories: int = 0


class ModerationService:
    """Admin status transitions and the queries behind the admin dashboard"""

    @staticmethod
    def _apply(statement, entity_label, entity_id):
        try:
            result = db.session.execute(statement)
            if result.rowcount == 0:
                db.session.rollback()
                raise ModerationError(f"{entity_label} {entity_id} not found")
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Error updating {entity_label.lower()} {entity_id}: {str(e)}")
            raise ModerationError(f"Failed to update {entity_label.lower()}") from e

    @staticmethod
    def set_organizer_status(organizer_id, decision, admin_id=None):
        """Set an organizer's verification status to approved or rejected"""
        decision = ModerationDecision.parse(decision)
        statement = (
            update(Organizer)
            .where(Organizer.id == organizer_id)
            .values(
                verification_status=VerificationStatus(decision.value),
                verified_at=utcnow(),
                verified_by=admin_id,
            )
        )
        ModerationService._apply(statement, "Organizer", organizer_id)
        current_app.logger.info(f"Organizer {organizer_id} {decision.value} by admin {admin_id}")
        return decision

    @staticmethod
    def set_event_status(event_id, decision, admin_id=None):
        """Set an event's status to approved or rejected"""
        decision = ModerationDecision.parse(decision)
        statement = (
            update(Event)
            .where(Event.id == event_id)
            .values(
                status=EventStatus(decision.value),
                approved_at=utcnow(),
                approved_by=admin_id,
            )
        )
        ModerationService._apply(statement, "Event", event_id)
        current_app.logger.info(f"Event {event_id} {decision.value} by admin {admin_id}")
        return decision

    @staticmethod
    def pending_organizers() -> List[Organizer]:
        """Organizers awaiting verification, newest first"""
        return (
            Organizer.query.options(joinedload(Organizer.profile))
            .filter(Organizer.verification_status == VerificationStatus.PENDING)
            .order_by(Organizer.created_at.desc(), Organizer.id.desc())
            .all()
        )

    @staticmethod
    def pending_events() -> List[Event]:
        """Events awaiting approval, newest first"""
        return (
            Event.query.options(
                joinedload(Event.organizer),
                joinedload(Event.category),
            )
            .filter(Event.status == EventStatus.PENDING)
            .order_by(Event.created_at.desc(), Event.id.desc())
            .all()
        )

    @staticmethod
    def dashboard_counts() -> DashboardCounts:
        """Row counts of profiles, organizers, events and categories"""
        return DashboardCounts(
            users=db.session.query(Profile).count(),
            organizers=db.session.query(Organizer).count(),
            events=db.session.query(Event).count(),
            categories=db.session.query(Category).count(),
        )
