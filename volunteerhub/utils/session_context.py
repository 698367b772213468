# volunteerhub/utils/session_context.py
"""
Per-request account context: who is signed in and which profile (and role) they resolve to.

Created at request start by the session context middleware, refreshed after the
profile changes, and cleared at sign-out. Views and templates read it instead of
reaching for ambient globals.
"""

from dataclasses import dataclass
from typing import Optional

from flask import current_app, g, has_request_context
from sqlalchemy.exc import SQLAlchemyError

from volunteerhub.models import Profile, Role, db


@dataclass
class SessionContext:
    user_id: Optional[int] = None
    profile: Optional[Profile] = None
    resolved: bool = False

    @classmethod
    def start(cls, user):
        """Build a context for a Flask-Login user (authenticated or anonymous) and resolve it"""
        if user is None or not getattr(user, "is_authenticated", False):
            return cls(resolved=True)
        context = cls(user_id=user.id)
        context.resolve()
        return context

    @property
    def has_session(self) -> bool:
        return self.user_id is not None

    @property
    def role(self) -> Optional[Role]:
        return self.profile.role if self.profile is not None else None

    def resolve(self, populate_existing=False):
        """Load the profile for the signed-in user. Leaves the context pending if the lookup fails."""
        if not self.has_session:
            self.profile = None
            self.resolved = True
            return self
        try:
            self.profile = db.session.get(Profile, self.user_id, populate_existing=populate_existing)
            self.resolved = True
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Error resolving profile for user {self.user_id}: {str(e)}")
            self.profile = None
            self.resolved = False
        return self

    def refresh(self):
        """Re-read the profile from the datastore"""
        self.resolved = False
        return self.resolve(populate_existing=True)

    def clear(self):
        """Tear down at sign-out"""
        self.user_id = None
        self.profile = None
        self.resolved = True


def get_session_context() -> SessionContext:
    """Return the context for the current request, creating it on first use"""
    if not has_request_context():
        return SessionContext(resolved=True)
    context = g.get("session_context")
    if context is None:
        from flask_login import current_user

        context = SessionContext.start(current_user)
        g.session_context = context
    return context


def set_session_context(context: SessionContext):
    g.session_context = context
