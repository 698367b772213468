# volunteerhub/routes/admin.py
"""
Admin dashboard and moderation routes
"""

from flask import current_app, flash, redirect, render_template, url_for

from volunteerhub.exceptions import ModerationError
from volunteerhub.forms import ActionForm
from volunteerhub.models import ModerationDecision
from volunteerhub.services.moderation_service import DashboardCounts, ModerationService
from volunteerhub.utils.permissions import admin_required
from volunteerhub.utils.session_context import get_session_context


def _parse_decision(raw_decision):
    try:
        return ModerationDecision.parse(raw_decision)
    except ValueError:
        return None


def register_admin_routes(app):
    """Register admin dashboard routes"""

    @app.route("/admin/dashboard")
    @admin_required
    def admin_dashboard():
        """Platform counts plus the organizers and events awaiting a decision"""
        try:
            counts = ModerationService.dashboard_counts()
            pending_organizers = ModerationService.pending_organizers()
            pending_events = ModerationService.pending_events()
        except Exception as e:
            current_app.logger.error(f"Error in admin dashboard: {str(e)}", exc_info=True)
            flash("An error occurred while loading the dashboard.", "danger")
            counts, pending_organizers, pending_events = DashboardCounts(), [], []

        return render_template(
            "admin/dashboard.html",
            counts=counts,
            pending_organizers=pending_organizers,
            pending_events=pending_events,
            form=ActionForm(),
        )

    @app.route("/admin/organizers/<int:organizer_id>/<decision>", methods=["POST"])
    @admin_required
    def admin_moderate_organizer(organizer_id, decision):
        target = _parse_decision(decision)
        form = ActionForm()
        if target is None or not form.validate_on_submit():
            flash("Failed to update organizer", "danger")
            return redirect(url_for("admin_dashboard"))

        context = get_session_context()
        try:
            ModerationService.set_organizer_status(organizer_id, target, admin_id=context.user_id)
        except ModerationError:
            flash("Failed to update organizer", "danger")
        else:
            flash(f"Organizer {target.value}", "success")

        # The dashboard re-reads the pending lists
        return redirect(url_for("admin_dashboard"))

    @app.route("/admin/events/<int:event_id>/<decision>", methods=["POST"])
    @admin_required
    def admin_moderate_event(event_id, decision):
        target = _parse_decision(decision)
        form = ActionForm()
        if target is None or not form.validate_on_submit():
            flash("Failed to update event", "danger")
            return redirect(url_for("admin_dashboard"))

        context = get_session_context()
        try:
            ModerationService.set_event_status(event_id, target, admin_id=context.user_id)
        except ModerationError:
            flash("Failed to update event", "danger")
        else:
            flash(f"Event {target.value}", "success")

        return redirect(url_for("admin_dashboard"))
