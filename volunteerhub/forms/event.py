# volunteerhub/forms/event.py
"""
Forms for event submission and event actions
"""

from urllib.parse import urlparse

from flask_wtf import FlaskForm
from wtforms import DateTimeField, IntegerField, SelectField, StringField, SubmitField, TextAreaField
from wtforms.validators import DataRequired, Length, NumberRange, Optional, ValidationError
from wtforms.widgets import NumberInput


class CreateEventForm(FlaskForm):
    """Form for organizers submitting a new event"""

    title = StringField(
        "Event Title",
        validators=[
            DataRequired(message="Event title is required."),
            Length(max=200, message="Event title must be less than 200 characters."),
        ],
        render_kw={"placeholder": "Beach Cleanup Drive"},
    )
    description = TextAreaField(
        "Description",
        validators=[
            DataRequired(message="Description is required."),
            Length(max=5000, message="Description must be less than 5000 characters."),
        ],
        render_kw={"placeholder": "Describe the event and what volunteers will do", "rows": 4},
    )
    category_id = SelectField(
        "Category",
        validators=[DataRequired(message="Category is required.")],
        choices=[],  # Will be populated in __init__
        coerce=int,
    )
    event_date = DateTimeField(
        "Date & Time",
        validators=[DataRequired(message="Event date and time is required.")],
        format="%Y-%m-%dT%H:%M",
        render_kw={"type": "datetime-local"},
    )
    location = StringField(
        "Location",
        validators=[
            DataRequired(message="Location is required."),
            Length(max=300, message="Location must be less than 300 characters."),
        ],
        render_kw={"placeholder": "Santa Monica Beach, CA"},
    )
    volunteers_needed = IntegerField(
        "Volunteers Needed",
        validators=[
            DataRequired(message="Number of volunteers is required."),
            NumberRange(min=1, max=10000, message="Volunteers needed must be between 1 and 10000."),
        ],
        default=10,
        widget=NumberInput(),
    )
    image_url = StringField(
        "Image URL (Optional)",
        validators=[Optional(), Length(max=500, message="Image URL must be less than 500 characters.")],
        render_kw={"placeholder": "https://example.com/image.jpg"},
    )
    submit = SubmitField("Create Event")

    def __init__(self, *args, **kwargs):
        super(CreateEventForm, self).__init__(*args, **kwargs)
        # Import here to avoid circular imports
        from volunteerhub.models import Category

        categories = Category.query.order_by(Category.name).all()
        self.category_id.choices = [(category.id, category.name) for category in categories]

    def validate_event_date(self, field):
        """Events cannot be scheduled in the past"""
        from volunteerhub.models import utcnow

        if field.data and field.data < utcnow():
            raise ValidationError("Event date cannot be in the past.")

    def validate_image_url(self, field):
        if field.data:
            field.data = field.data.strip()
            result = urlparse(field.data)
            if not all([result.scheme, result.netloc]):
                raise ValidationError("Please enter a valid URL.")


class ActionForm(FlaskForm):
    """Button-only form carrying the CSRF token for join and moderation actions"""

    submit = SubmitField("Submit")
