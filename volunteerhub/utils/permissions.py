# volunteerhub/utils/permissions.py

from enum import Enum as PyEnum
from functools import wraps

from flask import flash, redirect, render_template, request, url_for

from volunteerhub.models import Role, dashboard_endpoint
from volunteerhub.utils.session_context import get_session_context


class AccessDecision(PyEnum):
    """Outcome of the access guard"""

    PENDING = "pending"
    RENDER = "render"
    REDIRECT_LOGIN = "redirect_login"
    REDIRECT_HOME = "redirect_home"


def _normalize_roles(allowed_roles):
    if allowed_roles is None:
        return None
    return frozenset(Role.parse(role) for role in allowed_roles)


def evaluate_access(has_session, role, allowed_roles=None, resolved=True):
    """
    Decide what a guarded page does for the current account.

    Args:
        has_session: Whether a signed-in session exists
        role: The resolved profile role, or None when no profile was found
        allowed_roles: Iterable of roles allowed in, or None to admit any signed-in account
        resolved: False while the session/profile lookup has not completed

    Returns:
        AccessDecision. Nothing but PENDING is returned before resolution completes.
    """
    if not resolved:
        return AccessDecision.PENDING
    if not has_session:
        return AccessDecision.REDIRECT_LOGIN
    roles = _normalize_roles(allowed_roles)
    if roles is None:
        return AccessDecision.RENDER
    if role is None:
        return AccessDecision.REDIRECT_HOME
    if Role.parse(role) in roles:
        return AccessDecision.RENDER
    return AccessDecision.REDIRECT_HOME


def check_access(allowed_roles=None, context=None):
    """Evaluate the guard against a SessionContext (the current request's by default)"""
    context = context or get_session_context()
    return evaluate_access(context.has_session, context.role, allowed_roles, context.resolved)


def role_required(*roles):
    """
    Decorator guarding a view.

    With no roles, any signed-in account is admitted; otherwise the profile role
    must be one of the given roles.
    """
    allowed_roles = roles or None

    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            decision = check_access(allowed_roles)

            if decision is AccessDecision.RENDER:
                return f(*args, **kwargs)

            if decision is AccessDecision.PENDING:
                # loading.html refreshes with GET, so only GET views may render it
                if request.method != "GET":
                    flash("Your account is still loading. Please try again.", "info")
                    return redirect(url_for("index"))
                return render_template("loading.html")

            if decision is AccessDecision.REDIRECT_LOGIN:
                flash("Please log in to access this page.", "warning")
                return redirect(url_for("login", next=request.path))

            flash("You do not have permission to access this page.", "danger")
            return redirect(url_for("index"))

        return decorated_function

    return decorator


session_required = role_required()
admin_required = role_required(Role.ADMIN)
organizer_required = role_required(Role.ORGANIZER)
volunteer_required = role_required(Role.USER)


def dashboard_url_for(role):
    """URL of the dashboard for a role, or the home page when there is none"""
    if role is None:
        return url_for("index")
    return url_for(dashboard_endpoint(role))
