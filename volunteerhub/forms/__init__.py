# volunteerhub/forms/__init__.py
"""
WTForms package
"""

from .auth import LoginForm, OrganizerRegistrationForm, VolunteerRegistrationForm
from .event import ActionForm, CreateEventForm
from .profile import ChangePasswordForm, OrganizerProfileForm, ProfileForm

__all__ = [
    "LoginForm",
    "VolunteerRegistrationForm",
    "OrganizerRegistrationForm",
    "ProfileForm",
    "ChangePasswordForm",
    "OrganizerProfileForm",
    "CreateEventForm",
    "ActionForm",
]
