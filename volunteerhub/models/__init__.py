# volunteerhub/models/__init__.py
"""
Database models package
"""

from .base import BaseModel, db, utcnow
from .category import Category
from .enums import ModerationDecision, Role, VerificationStatus, dashboard_endpoint
from .event import Event, EventParticipant, EventStatus, ParticipantStatus
from .organizer import Organizer
from .user import Profile, User

__all__ = [
    "db",
    "utcnow",
    "BaseModel",
    "User",
    "Profile",
    "Organizer",
    "Category",
    "Event",
    "EventParticipant",
    # Enums
    "Role",
    "VerificationStatus",
    "ModerationDecision",
    "EventStatus",
    "ParticipantStatus",
    "dashboard_endpoint",
]
