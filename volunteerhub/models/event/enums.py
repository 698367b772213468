# volunteerhub/models/event/enums.py
"""
Enums for event models.
"""

from enum import Enum as PyEnum


class EventStatus(PyEnum):
    """Event status enumeration"""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    COMPLETED = "completed"


class ParticipantStatus(PyEnum):
    """Event participation status enumeration"""

    JOINED = "joined"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
