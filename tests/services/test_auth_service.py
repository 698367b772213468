import pytest
from werkzeug.security import check_password_hash

from volunteerhub.exceptions import AuthError
from volunteerhub.models import Profile, Role, User, db
from volunteerhub.services.auth_service import AuthService


class TestSignUp:
    """Test account creation"""

    def test_creates_user_and_profile(self, app):
        user = AuthService.sign_up("Someone@Example.com ", "secret123", " Some One ", Role.ORGANIZER)
        assert user.email == "someone@example.com"
        assert user.is_active is True
        assert check_password_hash(user.password_hash, "secret123")
        profile = db.session.get(Profile, user.id)
        assert profile.full_name == "Some One"
        assert profile.role is Role.ORGANIZER

    def test_default_role_is_user(self, app):
        assert AuthService.sign_up("a@example.com", "secret123", "A").profile.role is Role.USER

    def test_role_accepts_string(self, app):
        assert AuthService.sign_up("b@example.com", "secret123", "B", "admin").profile.role is Role.ADMIN

    def test_duplicate_email(self, volunteer):
        with pytest.raises(AuthError, match="User already registered"):
            AuthService.sign_up("VOLUNTEER@example.com", "another123", "Copy Cat")
        assert User.query.count() == 1

    @pytest.mark.parametrize(
        "email,password,full_name,message",
        [
            ("", "secret123", "Name", "Email and password are required"),
            ("x@example.com", "", "Name", "Email and password are required"),
            ("x@example.com", "secret123", "  ", "Full name is required"),
        ],
    )
    def test_missing_fields(self, app, email, password, full_name, message):
        with pytest.raises(AuthError, match=message):
            AuthService.sign_up(email, password, full_name)
        assert User.query.count() == 0

    def test_database_failure(self, app, mock_database_error):
        with pytest.raises(AuthError, match="Registration failed"):
            AuthService.sign_up("x@example.com", "secret123", "X")


class TestSignIn:
    """Test credential checks"""

    def test_valid_credentials(self, volunteer):
        user = AuthService.sign_in("volunteer@example.com", "volunteerpass123")
        assert user.id == volunteer.id
        assert user.last_login is not None

    def test_wrong_password(self, volunteer):
        with pytest.raises(AuthError, match="Invalid login credentials"):
            AuthService.sign_in("volunteer@example.com", "wrong")

    def test_unknown_email(self, app):
        with pytest.raises(AuthError, match="Invalid login credentials"):
            AuthService.sign_in("ghost@example.com", "whatever")

    def test_inactive_account(self, volunteer):
        volunteer.is_active = False
        db.session.commit()
        with pytest.raises(AuthError):
            AuthService.sign_in("volunteer@example.com", "volunteerpass123")

    def test_last_login_failure_does_not_block_sign_in(self, volunteer, mock_database_error):
        assert AuthService.sign_in("volunteer@example.com", "volunteerpass123").id == volunteer.id


class TestUpdatePassword:
    """Test password changes"""

    def test_changes_hash(self, volunteer):
        AuthService.update_password(volunteer.id, "newpass456", "newpass456")
        assert AuthService.sign_in("volunteer@example.com", "newpass456").id == volunteer.id
        with pytest.raises(AuthError):
            AuthService.sign_in("volunteer@example.com", "volunteerpass123")

    def test_mismatch(self, volunteer):
        with pytest.raises(AuthError, match="Passwords do not match"):
            AuthService.update_password(volunteer.id, "newpass456", "different")

    def test_too_short(self, volunteer):
        with pytest.raises(AuthError, match="at least 6 characters"):
            AuthService.update_password(volunteer.id, "abc")

    def test_minimum_length_from_config(self, app, volunteer):
        app.config["MIN_PASSWORD_LENGTH"] = 10
        with pytest.raises(AuthError, match="at least 10 characters"):
            AuthService.update_password(volunteer.id, "ninechars")

    def test_unknown_user(self, app):
        with pytest.raises(AuthError, match="Failed to update password"):
            AuthService.update_password(999, "newpass456")

    def test_database_failure(self, volunteer, mock_database_error):
        with pytest.raises(AuthError, match="Failed to update password"):
            AuthService.update_password(volunteer.id, "newpass456")
