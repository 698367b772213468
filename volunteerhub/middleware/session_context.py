# volunteerhub/middleware/session_context.py

from flask import g, request
from flask_login import current_user

from volunteerhub.utils.permissions import dashboard_url_for
from volunteerhub.utils.session_context import SessionContext, get_session_context, set_session_context


def init_session_context_middleware(app):
    """Initialize the per-request session context"""

    @app.before_request
    def load_session_context():
        """Resolve the signed-in account and its profile once per request"""
        g.session_context = None

        # Static files never need an account
        if request.endpoint == "static":
            return

        set_session_context(SessionContext.start(current_user))

    @app.context_processor
    def inject_session_context():
        context = get_session_context()
        return {
            "session_context": context,
            "dashboard_url": dashboard_url_for(context.role) if context.has_session else None,
        }
