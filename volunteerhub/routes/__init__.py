# volunteerhub/routes/__init__.py
"""
Application routes package
"""

from .admin import register_admin_routes
from .api import register_api_routes
from .auth import register_auth_routes
from .event import register_event_routes
from .main import register_main_routes
from .organizer import register_organizer_routes
from .volunteer import register_volunteer_routes


def init_routes(app):
    """Initialize all application routes"""
    register_main_routes(app)
    register_auth_routes(app)
    register_event_routes(app)
    register_volunteer_routes(app)
    register_organizer_routes(app)
    register_admin_routes(app)
    register_api_routes(app)
