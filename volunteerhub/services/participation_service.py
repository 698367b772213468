# volunteerhub/services/participation_service.py
"""
Participation ledger: who joined which event.

join() reads the joined count and inserts the participant row as two separate
round-trips with no transaction or lock around them. Two volunteers joining the
last open spot at the same moment can both pass the capacity check, so the
joined count can end up above volunteers_needed. This matches the behavior the
rest of the system was built around; a locking or constraint-based check would
change it.
"""

from dataclasses import dataclass
from typing import List

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from volunteerhub.exceptions import AlreadyJoinedError, EventFullError, EventNotFoundError, ParticipationError
from volunteerhub.models import Event, EventParticipant, Organizer, ParticipantStatus, db, utcnow


@dataclass
class JoinResult:
    participant: EventParticipant
    joined_count: int


class ParticipationService:
    """Join, count and membership checks over event_participants"""

    @staticmethod
    def count_joined(event_id) -> int:
        """Number of rows for the event with status joined"""
        return EventParticipant.query.filter_by(event_id=event_id, status=ParticipantStatus.JOINED).count()

    @staticmethod
    def has_joined(event_id, user_id) -> bool:
        return (
            db.session.query(EventParticipant.id)
            .filter_by(event_id=event_id, user_id=user_id, status=ParticipantStatus.JOINED)
            .first()
            is not None
        )

    @staticmethod
    def join(event_id, user_id) -> JoinResult:
        """
        Add a joined participant row for the user.

        Raises:
            EventNotFoundError: no such event
            EventFullError: the joined count already reached volunteers_needed
            AlreadyJoinedError: the user has an active joined row for the event
            ParticipationError: the datastore failed during the lookup or the insert
        """
        try:
            event = db.session.get(Event, event_id)
            if event is None:
                raise EventNotFoundError(f"Event {event_id} not found")

            current_count = ParticipationService.count_joined(event_id)
            if current_count >= event.volunteers_needed:
                current_app.logger.warning(
                    f"User {user_id} could not join event {event_id}: full ({current_count}/{event.volunteers_needed})"
                )
                raise EventFullError("This event is already full")

            if ParticipationService.has_joined(event_id, user_id):
                raise AlreadyJoinedError("You have already joined this event")

            participant = EventParticipant(
                event_id=event_id,
                user_id=user_id,
                status=ParticipantStatus.JOINED,
                joined_at=utcnow(),
            )
            db.session.add(participant)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Error joining user {user_id} to event {event_id}: {str(e)}")
            raise ParticipationError("Failed to join event") from e

        # Report the stored count rather than current_count + 1
        joined_count = ParticipationService.count_joined(event_id)
        current_app.logger.info(f"User {user_id} joined event {event_id} ({joined_count}/{event.volunteers_needed})")
        return JoinResult(participant=participant, joined_count=joined_count)

    @staticmethod
    def _ledger_with_event():
        return EventParticipant.query.join(Event, EventParticipant.event_id == Event.id).options(
            joinedload(EventParticipant.event).joinedload(Event.category),
            joinedload(EventParticipant.event).joinedload(Event.organizer).joinedload(Organizer.profile),
        )

    @staticmethod
    def upcoming_for_user(user_id, now=None) -> List[EventParticipant]:
        """Joined rows for events dated now or later, earliest first"""
        now = now or utcnow()
        return (
            ParticipationService._ledger_with_event()
            .filter(
                EventParticipant.user_id == user_id,
                EventParticipant.status == ParticipantStatus.JOINED,
                Event.event_date >= now,
            )
            .order_by(Event.event_date.asc())
            .all()
        )

    @staticmethod
    def past_for_user(user_id, now=None, limit=None) -> List[EventParticipant]:
        """Joined or completed rows for events already past, most recent first"""
        now = now or utcnow()
        if limit is None:
            limit = current_app.config.get("DASHBOARD_PAST_EVENTS_LIMIT", 5)
        return (
            ParticipationService._ledger_with_event()
            .filter(
                EventParticipant.user_id == user_id,
                EventParticipant.status.in_([ParticipantStatus.COMPLETED, ParticipantStatus.JOINED]),
                Event.event_date < now,
            )
            .order_by(Event.event_date.desc())
            .limit(limit)
            .all()
        )
