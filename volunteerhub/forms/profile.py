# volunteerhub/forms/profile.py
"""
Forms for account settings and organizer profile completion
"""

from urllib.parse import urlparse

from flask_wtf import FlaskForm
from wtforms import PasswordField, StringField, SubmitField, TextAreaField
from wtforms.validators import DataRequired, Email, EqualTo, Length, Optional, ValidationError


class ProfileForm(FlaskForm):
    """Form for the owner-editable profile fields"""

    full_name = StringField(
        "Full Name",
        validators=[
            DataRequired(message="Full name is required."),
            Length(max=200, message="Full name must be less than 200 characters."),
        ],
    )
    phone = StringField(
        "Phone",
        validators=[Optional(), Length(max=20, message="Phone number must be less than 20 characters.")],
        render_kw={"placeholder": "+1 (555) 000-0000"},
    )
    profile_image = StringField(
        "Profile Image URL",
        validators=[Optional(), Length(max=500, message="Image URL must be less than 500 characters.")],
        render_kw={"placeholder": "https://example.com/avatar.jpg"},
    )
    submit = SubmitField("Save Changes")

    def validate_profile_image(self, field):
        if field.data:
            field.data = field.data.strip()
            result = urlparse(field.data)
            if not all([result.scheme, result.netloc]):
                raise ValidationError("Please enter a valid URL.")


class ChangePasswordForm(FlaskForm):
    """Form for changing the signed-in account's password"""

    new_password = PasswordField(
        "New Password",
        validators=[
            DataRequired(message="New password is required."),
            Length(min=6, message="Password must be at least 6 characters"),
        ],
    )
    confirm_password = PasswordField(
        "Confirm New Password",
        validators=[
            DataRequired(message="Please confirm the new password."),
            EqualTo("new_password", message="Passwords do not match"),
        ],
    )
    submit = SubmitField("Update Password")


class OrganizerProfileForm(FlaskForm):
    """Form for finishing an organizer profile whose creation failed at registration"""

    organization_name = StringField(
        "Organization Name",
        validators=[
            DataRequired(message="Organization name is required."),
            Length(max=200, message="Organization name must be less than 200 characters."),
        ],
    )
    description = TextAreaField(
        "Description",
        validators=[Optional(), Length(max=5000, message="Description must be less than 5000 characters.")],
        render_kw={"rows": 3},
    )
    contact_email = StringField(
        "Contact Email",
        validators=[DataRequired(message="Contact email is required."), Email(message="Invalid email address.")],
    )
    submit = SubmitField("Submit for Verification")
