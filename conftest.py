# conftest.py

import os
import tempfile
from datetime import timedelta
from unittest.mock import patch

import pytest

# Set testing environment BEFORE importing app so app.py picks TestingConfig
os.environ["FLASK_ENV"] = "testing"

# Now import app and other modules after environment is set
from app import app as flask_app  # noqa: E402
from volunteerhub.models import (  # noqa: E402
    Category,
    Event,
    EventStatus,
    Role,
    VerificationStatus,
    db,
    utcnow,
)
from volunteerhub.services.auth_service import AuthService  # noqa: E402
from volunteerhub.services.onboarding_service import OnboardingService  # noqa: E402

VOLUNTEER_PASSWORD = "volunteerpass123"
ORGANIZER_PASSWORD = "organizerpass123"
ADMIN_PASSWORD = "adminpass123"


@pytest.fixture(scope="function")
def app():
    """Create and configure a test Flask application"""
    import uuid

    # Create a unique temporary database file for each test
    db_fd, temp_db = tempfile.mkstemp(suffix=f"_{uuid.uuid4().hex[:8]}.db")

    try:
        flask_app.config.update(
            {
                "TESTING": True,
                "WTF_CSRF_ENABLED": False,
                "SQLALCHEMY_DATABASE_URI": f"sqlite:///{temp_db}",
                "SQLALCHEMY_ECHO": False,
                "SECRET_KEY": "test-secret-key-for-testing-only",
                "DEBUG": True,
                "TEMPLATES_AUTO_RELOAD": True,
                "ENABLE_FILE_LOGGING": False,
                "ENABLE_CONSOLE_LOGGING": True,
                "LOG_LEVEL": "DEBUG",
                "LOG_FORMAT": "text",
                "CATALOG_FEATURED_LIMIT": 6,
                "DASHBOARD_PAST_EVENTS_LIMIT": 5,
                "MIN_PASSWORD_LENGTH": 6,
            }
        )
        flask_app.jinja_env.auto_reload = True
        flask_app.jinja_env.cache = {}

        # Re-initialize logging with updated config to pick up LOG_LEVEL=DEBUG
        from volunteerhub.utils.logging_config import setup_logging

        setup_logging(flask_app)

        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            yield flask_app
            db.session.remove()
            db.session.close()
            db.drop_all()
    finally:
        # Always close and remove the temporary database file, even on error
        try:
            os.close(db_fd)
        except OSError:
            pass
        try:
            if os.path.exists(temp_db):
                os.unlink(temp_db)
        except OSError:
            pass


@pytest.fixture(autouse=True)
def app_context(app):
    """Automatically provide app context for all tests"""
    with app.app_context():
        yield


@pytest.fixture
def client(app):
    """Create a test client for the Flask application"""
    return app.test_client()


@pytest.fixture
def runner(app):
    """Create a test CLI runner for the Flask application"""
    return app.test_cli_runner()


@pytest.fixture
def category(app):
    """A single event category"""
    category = Category(name="Environment", description="Outdoor and green causes", icon="leaf")
    db.session.add(category)
    db.session.commit()
    return category


@pytest.fixture
def other_category(app):
    category = Category(name="Education", description="Tutoring and mentoring", icon="book")
    db.session.add(category)
    db.session.commit()
    return category


@pytest.fixture
def volunteer(app):
    """A volunteer account (role user)"""
    return AuthService.sign_up("volunteer@example.com", VOLUNTEER_PASSWORD, "Vera Volunteer", Role.USER)


@pytest.fixture
def second_volunteer(app):
    return AuthService.sign_up("second@example.com", VOLUNTEER_PASSWORD, "Sam Second", Role.USER)


@pytest.fixture
def admin(app):
    """An admin account"""
    return AuthService.sign_up("admin@example.com", ADMIN_PASSWORD, "Ada Admin", Role.ADMIN)


@pytest.fixture
def second_admin(app):
    """Another admin account, for decisions made by a different moderator"""
    return AuthService.sign_up("admin2@example.com", ADMIN_PASSWORD, "Abe Admin", Role.ADMIN)


@pytest.fixture
def pending_organizer(app):
    """An organizer account whose organization awaits verification"""
    _user, organizer = OnboardingService.register_organizer(
        email="organizer@example.com",
        password=ORGANIZER_PASSWORD,
        full_name="Olive Organizer",
        organization_name="Green Shores",
        contact_email="contact@greenshores.org",
        description="Coastal cleanups",
    )
    return organizer


@pytest.fixture
def approved_organizer(pending_organizer):
    """An organizer account with an approved organization"""
    pending_organizer.verification_status = VerificationStatus.APPROVED
    pending_organizer.verified_at = utcnow()
    db.session.commit()
    return pending_organizer


@pytest.fixture
def make_event(app):
    """Factory for events; defaults to an approved event a week out"""

    def _make_event(organizer, category, title="Beach Cleanup", days_ahead=7, **overrides):
        fields = {
            "title": title,
            "description": "Help clean up the shoreline",
            "location": "Santa Monica Beach",
            "event_date": utcnow() + timedelta(days=days_ahead),
            "volunteers_needed": 10,
            "status": EventStatus.APPROVED,
        }
        fields.update(overrides)
        event = Event(organizer_id=organizer.id, category_id=category.id, **fields)
        db.session.add(event)
        db.session.commit()
        return event

    return _make_event


@pytest.fixture
def event(make_event, approved_organizer, category):
    """An approved upcoming event"""
    return make_event(approved_organizer, category)


@pytest.fixture
def login(client):
    """Log a client in through the login form"""

    def _login(email, password, follow_redirects=False):
        return client.post(
            "/login",
            data={"email": email, "password": password},
            follow_redirects=follow_redirects,
        )

    return _login


@pytest.fixture
def logged_in_volunteer(client, volunteer, login):
    login("volunteer@example.com", VOLUNTEER_PASSWORD)
    return client, volunteer


@pytest.fixture
def logged_in_organizer(client, pending_organizer, login):
    login("organizer@example.com", ORGANIZER_PASSWORD)
    return client, pending_organizer


@pytest.fixture
def logged_in_admin(client, admin, login):
    login("admin@example.com", ADMIN_PASSWORD)
    return client, admin


@pytest.fixture
def mock_database_error():
    """Make the next commit fail the way a datastore outage would"""
    from sqlalchemy.exc import OperationalError

    with patch.object(db.session, "commit", side_effect=OperationalError("COMMIT", {}, Exception("db down"))) as m:
        yield m


@pytest.fixture
def failing_lookup(monkeypatch):
    """Make db.session.get raise for one model class, leaving other lookups intact"""
    from sqlalchemy.exc import OperationalError

    def _fail(model):
        original_get = db.session.get

        def failing_get(entity, *args, **kwargs):
            if entity is model:
                raise OperationalError("SELECT", {}, Exception("db down"))
            return original_get(entity, *args, **kwargs)

        monkeypatch.setattr(db.session, "get", failing_get)

    return _fail


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers and ensure testing environment"""
    os.environ["FLASK_ENV"] = "testing"

    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers"""
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.slow)
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
