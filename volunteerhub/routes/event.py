# volunteerhub/routes/event.py
"""
Event catalog, event detail and join routes
"""

from flask import abort, current_app, flash, redirect, render_template, request, url_for

from volunteerhub.exceptions import EventFullError, EventNotFoundError, ParticipationError
from volunteerhub.forms import ActionForm
from volunteerhub.services.catalog_service import CatalogService
from volunteerhub.services.participation_service import ParticipationService
from volunteerhub.utils.permissions import AccessDecision, check_access
from volunteerhub.utils.session_context import get_session_context


def parse_category_id(raw_value):
    """Category filter from a query string value; blank or 'all' means no filter"""
    if raw_value is None:
        return None
    raw_value = str(raw_value).strip()
    if not raw_value or raw_value.lower() == "all":
        return None
    try:
        return int(raw_value)
    except ValueError:
        return None


def register_event_routes(app):
    """Register event catalog routes"""

    @app.route("/events")
    def events_list():
        """Approved upcoming events, optionally filtered by category and search text"""
        category_id = parse_category_id(request.args.get("category_id"))
        search_query = request.args.get("q", "")

        try:
            events = CatalogService.list_upcoming(category_id=category_id)
            categories = CatalogService.list_categories()
        except Exception as e:
            current_app.logger.error(f"Error in events list page: {str(e)}", exc_info=True)
            flash("An error occurred while loading events.", "danger")
            return redirect(url_for("index"))

        filtered_events = CatalogService.filter_text(events, search_query)
        return render_template(
            "events/list.html",
            events=filtered_events,
            categories=categories,
            selected_category_id=category_id,
            search_query=search_query,
        )

    @app.route("/events/<int:event_id>")
    def events_view(event_id):
        """Event details with participation status"""
        event = CatalogService.get_event(event_id)
        if not event:
            abort(404)

        context = get_session_context()
        participants_count = ParticipationService.count_joined(event.id)
        has_joined = context.has_session and ParticipationService.has_joined(event.id, context.user_id)

        return render_template(
            "events/view.html",
            event=event,
            participants_count=participants_count,
            has_joined=has_joined,
            is_full=participants_count >= event.volunteers_needed,
            form=ActionForm(),
        )

    @app.route("/events/<int:event_id>/join", methods=["POST"])
    def events_join(event_id):
        """Join an event as the signed-in account"""
        decision = check_access()
        if decision is AccessDecision.PENDING:
            flash("Your account is still loading. Please try again.", "info")
            return redirect(url_for("events_view", event_id=event_id))
        if decision is AccessDecision.REDIRECT_LOGIN:
            flash("Please sign in to join this event", "warning")
            return redirect(url_for("login", next=url_for("events_view", event_id=event_id)))

        form = ActionForm()
        if not form.validate_on_submit():
            flash("Failed to join event", "danger")
            return redirect(url_for("events_view", event_id=event_id))

        context = get_session_context()
        try:
            ParticipationService.join(event_id, context.user_id)
        except EventNotFoundError:
            abort(404)
        except EventFullError as e:
            flash(str(e), "warning")
            return redirect(url_for("events_view", event_id=event_id))
        except ParticipationError:
            # Duplicate joins land here too
            flash("Failed to join event", "danger")
            return redirect(url_for("events_view", event_id=event_id))

        flash("Successfully joined the event!", "success")
        return redirect(url_for("events_view", event_id=event_id))
