# volunteerhub/models/user.py

from flask import current_app
from flask_login import UserMixin
from sqlalchemy import Enum
from sqlalchemy.exc import SQLAlchemyError

from .base import BaseModel, db
from .enums import Role


class User(BaseModel, UserMixin):
    """Identity record: credentials and login state"""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    last_login = db.Column(db.DateTime, nullable=True)

    profile = db.relationship("Profile", back_populates="user", uselist=False, cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User {self.email}>"

    @staticmethod
    def find_by_email(email):
        """Find user by email (case-insensitive) with error handling"""
        if not email:
            return None
        try:
            return User.query.filter(db.func.lower(User.email) == email.strip().lower()).first()
        except SQLAlchemyError as e:
            current_app.logger.error(f"Database error finding user by email {email}: {str(e)}")
            return None


class Profile(BaseModel):
    """Application-level account record layered over a User"""

    __tablename__ = "profiles"

    id = db.Column(db.Integer, db.ForeignKey("users.id"), primary_key=True)
    full_name = db.Column(db.String(200), nullable=False)
    role = db.Column(
        Enum(Role, name="role_enum"),
        default=Role.USER,
        nullable=False,
        index=True,
    )
    profile_image = db.Column(db.String(500), nullable=True)
    phone = db.Column(db.String(20), nullable=True)

    user = db.relationship("User", back_populates="profile")
    organizer = db.relationship(
        "Organizer",
        back_populates="profile",
        uselist=False,
        foreign_keys="Organizer.user_id",
    )

    def __repr__(self):
        return f"<Profile {self.full_name} ({self.role.value})>"

    @staticmethod
    def find_by_id(profile_id):
        try:
            return db.session.get(Profile, profile_id)
        except SQLAlchemyError as e:
            current_app.logger.error(f"Database error finding profile by id {profile_id}: {str(e)}")
            return None

    def get_initials(self):
        parts = [part for part in (self.full_name or "").split() if part]
        return "".join(part[0].upper() for part in parts[:2]) or "?"
