# volunteerhub/routes/volunteer.py
"""
Volunteer dashboard routes
"""

from flask import current_app, flash, render_template

from volunteerhub.services.participation_service import ParticipationService
from volunteerhub.utils.permissions import volunteer_required
from volunteerhub.utils.session_context import get_session_context


def register_volunteer_routes(app):
    """Register volunteer dashboard routes"""

    @app.route("/user/dashboard")
    @volunteer_required
    def user_dashboard():
        """Upcoming and recent past events the volunteer joined"""
        context = get_session_context()
        try:
            upcoming = ParticipationService.upcoming_for_user(context.user_id)
            past = ParticipationService.past_for_user(context.user_id)
        except Exception as e:
            current_app.logger.error(f"Error loading dashboard for user {context.user_id}: {str(e)}", exc_info=True)
            flash("An error occurred while loading your events.", "danger")
            upcoming, past = [], []

        return render_template(
            "user/dashboard.html",
            profile=context.profile,
            upcoming_participations=upcoming,
            past_participations=past,
        )
