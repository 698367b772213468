# volunteerhub/routes/main.py
"""
Public pages: home and about
"""

from flask import current_app, flash, render_template

from volunteerhub.services.catalog_service import CatalogService


def register_main_routes(app):
    """Register public page routes"""

    @app.route("/")
    def index():
        """Home page with featured upcoming events and categories"""
        try:
            featured_events = CatalogService.featured()
            categories = CatalogService.list_categories()
        except Exception as e:
            current_app.logger.error(f"Error loading home page: {str(e)}", exc_info=True)
            flash("An error occurred while loading events.", "danger")
            featured_events, categories = [], []

        return render_template("index.html", featured_events=featured_events, categories=categories)

    @app.route("/about")
    def about():
        """About page"""
        return render_template("about.html")
