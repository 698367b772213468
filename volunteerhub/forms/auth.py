# volunteerhub/forms/auth.py
"""
Forms for sign-in and registration
"""

from flask_wtf import FlaskForm
from wtforms import PasswordField, StringField, SubmitField, TextAreaField
from wtforms.validators import DataRequired, Email, Length, Optional


class LoginForm(FlaskForm):
    """Form for signing in"""

    email = StringField(
        "Email",
        validators=[DataRequired(message="Email is required."), Email(message="Invalid email address.")],
        render_kw={"placeholder": "you@example.com"},
    )
    password = PasswordField(
        "Password",
        validators=[DataRequired(message="Password is required.")],
    )
    submit = SubmitField("Sign In")


class VolunteerRegistrationForm(FlaskForm):
    """Form for creating a volunteer account"""

    full_name = StringField(
        "Full Name",
        validators=[
            DataRequired(message="Full name is required."),
            Length(max=200, message="Full name must be less than 200 characters."),
        ],
        render_kw={"placeholder": "John Doe"},
    )
    email = StringField(
        "Email",
        validators=[
            DataRequired(message="Email is required."),
            Email(message="Invalid email address."),
            Length(max=255, message="Email must be less than 255 characters."),
        ],
        render_kw={"placeholder": "you@example.com"},
    )
    password = PasswordField(
        "Password",
        validators=[
            DataRequired(message="Password is required."),
            Length(min=6, message="Password must be at least 6 characters."),
        ],
    )
    submit = SubmitField("Create Volunteer Account")


class OrganizerRegistrationForm(VolunteerRegistrationForm):
    """Form for creating an organizer account together with its organization"""

    organization_name = StringField(
        "Organization Name",
        validators=[
            DataRequired(message="Organization name is required."),
            Length(max=200, message="Organization name must be less than 200 characters."),
        ],
        render_kw={"placeholder": "Green Earth Foundation"},
    )
    description = TextAreaField(
        "Description",
        validators=[Optional(), Length(max=5000, message="Description must be less than 5000 characters.")],
        render_kw={"placeholder": "Tell us about your organization", "rows": 3},
    )
    contact_email = StringField(
        "Contact Email",
        validators=[
            DataRequired(message="Contact email is required."),
            Email(message="Invalid email address."),
            Length(max=255, message="Email must be less than 255 characters."),
        ],
        render_kw={"placeholder": "contact@organization.org"},
    )
    submit = SubmitField("Create Organizer Account")
