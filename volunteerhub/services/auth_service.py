# volunteerhub/services/auth_service.py
"""
Identity operations: account creation, credential checks and password changes.
"""

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from werkzeug.security import check_password_hash, generate_password_hash

from volunteerhub.exceptions import AuthError
from volunteerhub.models import Profile, Role, User, db, utcnow


class AuthService:
    """Sign-up, sign-in and password management over the users/profiles tables"""

    DUPLICATE_MESSAGE = "User already registered"
    INVALID_CREDENTIALS_MESSAGE = "Invalid login credentials"

    @staticmethod
    def sign_up(email, password, full_name, role=Role.USER):
        """
        Create the identity and its profile in one commit.

        Returns:
            The new User.

        Raises:
            AuthError: duplicate email, missing fields or a datastore failure.
        """
        role = Role.parse(role)
        email = (email or "").strip().lower()
        full_name = (full_name or "").strip()

        if not email or not password:
            raise AuthError("Email and password are required")
        if not full_name:
            raise AuthError("Full name is required")

        if User.find_by_email(email):
            raise AuthError(AuthService.DUPLICATE_MESSAGE)

        try:
            user = User(email=email, password_hash=generate_password_hash(password), is_active=True)
            user.profile = Profile(full_name=full_name, role=role)
            db.session.add(user)
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise AuthError(AuthService.DUPLICATE_MESSAGE) from None
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Error signing up {email}: {str(e)}")
            raise AuthError("Registration failed") from e

        current_app.logger.info(f"Account created for {email} with role {role.value}")
        return user

    @staticmethod
    def sign_in(email, password):
        """Check credentials and stamp last_login. Returns the User or raises AuthError."""
        user = User.find_by_email(email)
        if not user or not user.is_active or not check_password_hash(user.password_hash, password or ""):
            current_app.logger.warning(f"Failed sign-in attempt for {email}")
            raise AuthError(AuthService.INVALID_CREDENTIALS_MESSAGE)

        try:
            user.last_login = utcnow()
            db.session.commit()
        except SQLAlchemyError as e:
            # Not worth failing the sign-in over
            db.session.rollback()
            current_app.logger.error(f"Error recording last login for {email}: {str(e)}")

        return user

    @staticmethod
    def update_password(user_id, new_password, confirm_password=None):
        """Replace a user's password hash. Raises AuthError on any rejection."""
        min_length = current_app.config.get("MIN_PASSWORD_LENGTH", 6)

        if confirm_password is not None and new_password != confirm_password:
            raise AuthError("Passwords do not match")
        if not new_password or len(new_password) < min_length:
            raise AuthError(f"Password must be at least {min_length} characters")

        user = db.session.get(User, user_id)
        if user is None:
            raise AuthError("Failed to update password")

        success, error = user.safe_update(password_hash=generate_password_hash(new_password))
        if not success:
            raise AuthError("Failed to update password")

        current_app.logger.info(f"Password updated for user {user_id}")
        return user
