# volunteerhub/services/catalog_service.py
"""
Catalog Service - the public listing of approved, upcoming events
"""

from typing import Iterable, List, Optional

from flask import current_app
from sqlalchemy.orm import joinedload

from volunteerhub.models import Category, Event, EventStatus, Organizer, db, utcnow


class CatalogService:
    """Read-only queries behind the home page, the catalog and the event detail page"""

    @staticmethod
    def _with_relations(query):
        return query.options(
            joinedload(Event.category),
            joinedload(Event.organizer).joinedload(Organizer.profile),
        )

    @staticmethod
    def list_upcoming(category_id=None, now=None, limit=None) -> List[Event]:
        """
        Approved events dated now or later, earliest first.

        Args:
            category_id: Restrict to one category when given
            now: Reference time (defaults to the current UTC time)
            limit: Maximum number of rows, None for the full result set
        """
        now = now or utcnow()
        query = CatalogService._with_relations(Event.query).filter(
            Event.status == EventStatus.APPROVED,
            Event.event_date >= now,
        )
        if category_id is not None:
            query = query.filter(Event.category_id == category_id)
        query = query.order_by(Event.event_date.asc(), Event.id.asc())
        if limit is not None:
            query = query.limit(limit)

        events = query.all()
        current_app.logger.debug(f"Catalog query (category={category_id}) returned {len(events)} events")
        return events

    @staticmethod
    def filter_text(events: Iterable[Event], search_query: Optional[str]) -> List[Event]:
        """Case-insensitive substring match on title, description or location, applied to fetched rows"""
        events = list(events)
        if not search_query:
            return events
        needle = search_query.lower()
        return [
            event
            for event in events
            if needle in (event.title or "").lower()
            or needle in (event.description or "").lower()
            or needle in (event.location or "").lower()
        ]

    @staticmethod
    def featured(limit=None, now=None) -> List[Event]:
        if limit is None:
            limit = current_app.config.get("CATALOG_FEATURED_LIMIT", 6)
        return CatalogService.list_upcoming(now=now, limit=limit)

    @staticmethod
    def list_categories() -> List[Category]:
        return Category.query.order_by(Category.name.asc()).all()

    @staticmethod
    def get_category(category_id) -> Optional[Category]:
        return db.session.get(Category, category_id)

    @staticmethod
    def get_event(event_id) -> Optional[Event]:
        """One event with its category and organizer, whatever its status"""
        return CatalogService._with_relations(Event.query).filter(Event.id == event_id).first()
