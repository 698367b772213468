# volunteerhub/services/organizer_service.py
"""
Organizer workspace: the organizer's own events and event submission.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from volunteerhub.exceptions import OrganizerNotApprovedError, VolunteerHubError
from volunteerhub.models import Category, Event, EventParticipant, EventStatus, Organizer, ParticipantStatus, db


@dataclass
class OrganizerSummary:
    """Figures shown at the top of the organizer dashboard"""

    total_events: int = 0
    pending_events: int = 0
    approved_events: int = 0
    total_volunteers: int = 0
    participant_counts: Dict[int, int] = field(default_factory=dict)


class OrganizerService:
    """Queries and writes scoped to a single organizer"""

    @staticmethod
    def get_organizer_for_user(user_id) -> Optional[Organizer]:
        return Organizer.find_by_user_id(user_id)

    @staticmethod
    def list_events(organizer_id) -> List[Event]:
        """All of the organizer's events, any status, earliest first"""
        return (
            Event.query.options(joinedload(Event.category))
            .filter(Event.organizer_id == organizer_id)
            .order_by(Event.event_date.asc())
            .all()
        )

    @staticmethod
    def participant_counts(event_ids) -> Dict[int, int]:
        """Joined-participant count per event id"""
        event_ids = list(event_ids)
        if not event_ids:
            return {}
        rows = (
            db.session.query(EventParticipant.event_id, func.count(EventParticipant.id))
            .filter(
                EventParticipant.event_id.in_(event_ids),
                EventParticipant.status == ParticipantStatus.JOINED,
            )
            .group_by(EventParticipant.event_id)
            .all()
        )
        counts = {event_id: 0 for event_id in event_ids}
        counts.update({event_id: count for event_id, count in rows})
        return counts

    @staticmethod
    def summarize(events) -> OrganizerSummary:
        counts = OrganizerService.participant_counts(event.id for event in events)
        return OrganizerSummary(
            total_events=len(events),
            pending_events=sum(1 for event in events if event.status == EventStatus.PENDING),
            approved_events=sum(1 for event in events if event.status == EventStatus.APPROVED),
            total_volunteers=sum(counts.values()),
            participant_counts=counts,
        )

    @staticmethod
    def create_event(
        organizer,
        title,
        description,
        category_id,
        event_date,
        location,
        volunteers_needed,
        image_url=None,
    ) -> Event:
        """
        Submit a new event for approval.

        Raises:
            OrganizerNotApprovedError: the organizer is not verified
            VolunteerHubError: unknown category or a datastore failure
        """
        if organizer is None or not organizer.is_approved:
            raise OrganizerNotApprovedError("Your organizer account must be approved before you can create events")

        if db.session.get(Category, category_id) is None:
            raise VolunteerHubError("Please choose a valid category")

        try:
            event = Event(
                title=title.strip(),
                description=(description or "").strip(),
                organizer_id=organizer.id,
                category_id=category_id,
                event_date=event_date,
                location=(location or "").strip(),
                volunteers_needed=int(volunteers_needed),
                image_url=(image_url or "").strip() or None,
                status=EventStatus.PENDING,
            )
            db.session.add(event)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Error creating event for organizer {organizer.id}: {str(e)}")
            raise VolunteerHubError("Failed to create event") from e

        current_app.logger.info(f"Organizer {organizer.id} submitted event {event.id} '{event.title}' for approval")
        return event
