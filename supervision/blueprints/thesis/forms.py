"""
Thesis blueprint forms.
"""

from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, SelectField
from wtforms.validators import DataRequired, Optional, Length

from supervision.models import ThesisProgress


class ThesisForm(FlaskForm):
    """Form for updating a thesis."""

    title = StringField('Title', validators=[
        DataRequired(message='title is required.'),
        Length(min=3, max=255, message='Title must be between 3 and 255 characters.')
    ])

    description = TextAreaField('Description', validators=[Optional()])

    progress = SelectField('Progress', validators=[DataRequired(message='progress is required.')],
        choices=[(p.value, p.value.replace('_', ' ').title()) for p in ThesisProgress]
    )
