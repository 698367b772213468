# volunteerhub/routes/api.py

"""
API routes for AJAX/JSON endpoints
"""

from flask import current_app, jsonify, request

from volunteerhub.exceptions import AlreadyJoinedError, EventFullError, EventNotFoundError, ParticipationError
from volunteerhub.routes.event import parse_category_id
from volunteerhub.services.catalog_service import CatalogService
from volunteerhub.services.participation_service import ParticipationService
from volunteerhub.utils.permissions import AccessDecision, check_access
from volunteerhub.utils.session_context import get_session_context


def serialize_event(event):
    """Catalog representation of an event"""
    organizer = event.organizer
    return {
        "id": event.id,
        "title": event.title,
        "description": event.description,
        "location": event.location,
        "event_date": event.event_date.isoformat() if event.event_date else None,
        "image_url": event.image_url,
        "volunteers_needed": event.volunteers_needed,
        "status": event.status.value,
        "category": (
            {"id": event.category.id, "name": event.category.name, "icon": event.category.icon}
            if event.category
            else None
        ),
        "organizer": (
            {
                "id": organizer.id,
                "organization_name": organizer.organization_name,
                "contact_name": organizer.profile.full_name if organizer.profile else None,
            }
            if organizer
            else None
        ),
    }


def register_api_routes(app):
    """Register API routes"""

    @app.route("/api/events", methods=["GET"])
    def api_events():
        """
        Catalog endpoint.
        Returns JSON list of approved upcoming events, with the same filters as the catalog page.
        """
        try:
            category_id = parse_category_id(request.args.get("category_id"))
            search_query = request.args.get("q", "")
            events = CatalogService.list_upcoming(category_id=category_id)
            events = CatalogService.filter_text(events, search_query)
            current_app.logger.debug(f"Catalog API returning {len(events)} events")
            return jsonify({"results": [serialize_event(event) for event in events], "count": len(events)})
        except Exception as e:
            current_app.logger.error(f"Error in catalog API: {str(e)}", exc_info=True)
            return jsonify({"error": "An error occurred while loading events", "results": []}), 500

    @app.route("/api/events/<int:event_id>/participation", methods=["GET"])
    def api_event_participation(event_id):
        """Joined count and, for a signed-in account, whether it has joined"""
        event = CatalogService.get_event(event_id)
        if event is None:
            return jsonify({"success": False, "error": "Event not found"}), 404

        context = get_session_context()
        return jsonify(
            {
                "event_id": event_id,
                "joined_count": ParticipationService.count_joined(event_id),
                "volunteers_needed": event.volunteers_needed,
                "has_joined": bool(context.has_session and ParticipationService.has_joined(event_id, context.user_id)),
            }
        )

    @app.route("/api/events/<int:event_id>/join", methods=["POST"])
    def api_join_event(event_id):
        """Join an event via AJAX; the response carries the stored joined count"""
        decision = check_access()
        if decision is AccessDecision.PENDING:
            return jsonify({"success": False, "error": "Session is still loading"}), 503
        if decision is AccessDecision.REDIRECT_LOGIN:
            return jsonify({"success": False, "error": "Authentication required"}), 401

        context = get_session_context()
        try:
            result = ParticipationService.join(event_id, context.user_id)
        except EventNotFoundError:
            return jsonify({"success": False, "error": "Event not found"}), 404
        except EventFullError as e:
            return jsonify({"success": False, "error": str(e)}), 409
        except AlreadyJoinedError:
            return jsonify({"success": False, "error": "Failed to join event"}), 409
        except ParticipationError:
            return jsonify({"success": False, "error": "Failed to join event"}), 500

        return jsonify({"success": True, "joined_count": result.joined_count, "has_joined": True})
