# volunteerhub/models/enums.py
"""
Enums for account and moderation models.
"""

from enum import Enum as PyEnum


class Role(PyEnum):
    """Account role enumeration"""

    USER = "user"
    ORGANIZER = "organizer"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value):
        """Return the Role for a Role or its string value; raise ValueError otherwise"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(value.strip().lower())
        raise ValueError(f"Unknown role: {value!r}")


class VerificationStatus(PyEnum):
    """Organizer verification status enumeration"""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ModerationDecision(PyEnum):
    """Target statuses an admin may assign to an organizer or event"""

    APPROVED = "approved"
    REJECTED = "rejected"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Invalid moderation decision: {value!r}") from None


def dashboard_endpoint(role):
    """Endpoint name of the dashboard for a role"""
    role = Role.parse(role)
    if role is Role.ADMIN:
        return "admin_dashboard"
    if role is Role.ORGANIZER:
        return "organizer_dashboard"
    if role is Role.USER:
        return "user_dashboard"
    raise ValueError(f"Unhandled role: {role!r}")
