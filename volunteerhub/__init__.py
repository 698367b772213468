# volunteerhub/__init__.py
"""
VolunteerHub: volunteers, event organizers and administrators around a shared event catalog.
"""

__version__ = "1.0.0"
