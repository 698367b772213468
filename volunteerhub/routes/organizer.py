# volunteerhub/routes/organizer.py
"""
Organizer dashboard, event submission and organizer profile routes
"""

from flask import current_app, flash, redirect, render_template, url_for

from volunteerhub.exceptions import OrganizerNotApprovedError, OrganizerProfileError, VolunteerHubError
from volunteerhub.forms import CreateEventForm, OrganizerProfileForm
from volunteerhub.services.organizer_service import OrganizerService
from volunteerhub.services.onboarding_service import OnboardingService
from volunteerhub.utils.permissions import organizer_required
from volunteerhub.utils.session_context import get_session_context


def _render_dashboard(organizer, form):
    events = OrganizerService.list_events(organizer.id) if organizer else []
    summary = OrganizerService.summarize(events)
    return render_template(
        "organizer/dashboard.html",
        organizer=organizer,
        events=events,
        summary=summary,
        form=form,
    )


def register_organizer_routes(app):
    """Register organizer routes"""

    @app.route("/organizer/dashboard")
    @organizer_required
    def organizer_dashboard():
        context = get_session_context()
        organizer = OrganizerService.get_organizer_for_user(context.user_id)
        if organizer is None:
            flash("Please complete your organizer profile.", "warning")
            return redirect(url_for("organizer_profile"))
        return _render_dashboard(organizer, CreateEventForm())

    @app.route("/organizer/events", methods=["POST"])
    @organizer_required
    def organizer_create_event():
        context = get_session_context()
        organizer = OrganizerService.get_organizer_for_user(context.user_id)
        if organizer is None:
            flash("Please complete your organizer profile.", "warning")
            return redirect(url_for("organizer_profile"))

        form = CreateEventForm()
        if not form.validate_on_submit():
            flash("Please correct the errors in the event form.", "danger")
            return _render_dashboard(organizer, form)

        try:
            OrganizerService.create_event(
                organizer,
                title=form.title.data,
                description=form.description.data,
                category_id=form.category_id.data,
                event_date=form.event_date.data,
                location=form.location.data,
                volunteers_needed=form.volunteers_needed.data,
                image_url=form.image_url.data,
            )
        except OrganizerNotApprovedError as e:
            flash(str(e), "warning")
            return redirect(url_for("organizer_dashboard"))
        except VolunteerHubError as e:
            current_app.logger.error(f"Event submission failed for organizer {organizer.id}: {str(e)}")
            flash("Failed to create event", "danger")
            return _render_dashboard(organizer, form)

        flash("Event created! Awaiting admin approval.", "success")
        return redirect(url_for("organizer_dashboard"))

    @app.route("/organizer/profile", methods=["GET", "POST"])
    @organizer_required
    def organizer_profile():
        """Finish an organizer profile that was not written at registration"""
        context = get_session_context()
        existing = OrganizerService.get_organizer_for_user(context.user_id)
        if existing is not None:
            return redirect(url_for("organizer_dashboard"))

        form = OrganizerProfileForm()
        if form.validate_on_submit():
            try:
                OnboardingService.complete_organizer_profile(
                    context.user_id,
                    organization_name=form.organization_name.data,
                    contact_email=form.contact_email.data,
                    description=form.description.data,
                )
            except OrganizerProfileError as e:
                flash(str(e), "danger")
                return render_template("organizer/profile.html", form=form)

            flash("Organizer profile submitted! Awaiting admin verification.", "success")
            return redirect(url_for("organizer_dashboard"))

        return render_template("organizer/profile.html", form=form)
