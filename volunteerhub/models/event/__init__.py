# volunteerhub/models/event/__init__.py
"""
Event models package.
"""

from .enums import EventStatus, ParticipantStatus
from .models import Event, EventParticipant

__all__ = [
    # Models
    "Event",
    "EventParticipant",
    # Enums
    "EventStatus",
    "ParticipantStatus",
]
