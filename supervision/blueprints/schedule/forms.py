"""
Schedule blueprint forms.

Forms are filled from JSON request bodies. Timestamps are ISO 8601; values
with an offset or a trailing Z are converted to UTC, values without one are
taken as UTC already. They are stored as naive UTC datetimes.
"""

from datetime import datetime, timezone

from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, DateTimeField
from wtforms.validators import DataRequired, InputRequired, Optional, Length, ValidationError


def parse_utc_timestamp(value):
    """
    Parse an ISO 8601 timestamp into a naive UTC datetime.

    Raises:
        ValueError: The value is not an ISO 8601 timestamp.
    """
    if not isinstance(value, str):
        raise ValueError(f'expected a string, got {type(value).__name__}')
    text = value.strip()
    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


class UTCDateTimeField(DateTimeField):
    """DateTimeField accepting ISO 8601 with or without an offset."""

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        try:
            self.data = parse_utc_timestamp(valuelist[0])
        except ValueError:
            self.data = None
            raise ValueError(f'{self.name} is not a valid ISO 8601 datetime.') from None


class ScheduleForm(FlaskForm):
    """Form for proposing and editing a supervision schedule."""

    proposed_at = UTCDateTimeField('Proposed At', validators=[
        InputRequired(message='proposed_at is required.')
    ])

    start_time = UTCDateTimeField('Start Time', validators=[
        InputRequired(message='start_time is required.')
    ])

    end_time = UTCDateTimeField('End Time', validators=[
        InputRequired(message='end_time is required.')
    ])

    description = TextAreaField('Description', validators=[
        Optional(),
        Length(max=2000, message='Description must be at most 2000 characters.')
    ])

    location = StringField('Location', validators=[
        Optional(),
        Length(max=255, message='Location must be at most 255 characters.')
    ])

    def validate_end_time(self, field):
        """Validate end time is after start time."""
        if field.data and self.start_time.data:
            if field.data <= self.start_time.data:
                raise ValidationError('end_time must be after start_time.')

    def schedule_fields(self):
        """Field values as keyword arguments for the schedule workflow."""
        return {
            'proposed_at': self.proposed_at.data,
            'start_time': self.start_time.data,
            'end_time': self.end_time.data,
            'description': self.description.data or None,
            'location': self.location.data or None
        }


class ApprovalForm(FlaskForm):
    """Form for approving or rejecting a schedule."""

    status = StringField('Status', validators=[
        DataRequired(message='status is required.')
    ])
