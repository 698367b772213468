# volunteerhub/exceptions.py
"""
Domain errors raised by the service layer and translated to notifications by the routes.
"""


class VolunteerHubError(Exception):
    """Base class for all application errors"""


class AuthError(VolunteerHubError):
    """Sign-up, sign-in or password change rejected"""


class ParticipationError(VolunteerHubError):
    """Joining an event failed"""


class EventNotFoundError(ParticipationError):
    pass


class EventFullError(ParticipationError):
    """The joined count has reached volunteers_needed"""


class AlreadyJoinedError(ParticipationError):
    pass


class OrganizerProfileError(VolunteerHubError):
    """The organizer row could not be written after the account was created"""


class OrganizerNotApprovedError(VolunteerHubError):
    """Only approved organizers may create events"""


class ModerationError(VolunteerHubError):
    """A moderation status update was rejected by the datastore"""
