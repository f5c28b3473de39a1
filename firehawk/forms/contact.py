"""Contact and reply forms."""

from flask_wtf import FlaskForm
from werkzeug.datastructures import MultiDict
from wtforms import StringField, TextAreaField
from wtforms.validators import DataRequired, Email, InputRequired, Length


class JSONForm(FlaskForm):
    """Form populated from a decoded JSON body instead of request.form."""

    class Meta:
        # Called from a cross-origin front-end with a JSON body
        csrf = False

    @classmethod
    def from_json(cls, payload):
        """Build the form from a JSON payload.

        Anything that is not an object, and any value that is not a string,
        is treated as missing.
        """
        if not isinstance(payload, dict):
            payload = {}
        formdata = MultiDict(
            (key, value) for key, value in payload.items()
            if isinstance(value, str)
        )
        return cls(formdata=formdata)

    def error_summary(self):
        """One line naming every failed field."""
        parts = []
        for field_name, messages in self.errors.items():
            for message in messages:
                parts.append(f'{message} at "{field_name}"')
        return 'Validation error: ' + '; '.join(parts)


class ContactForm(JSONForm):
    """Public contact form."""
    name = StringField('Name', validators=[
        InputRequired(message='Name is required'),
        Length(min=1, message='Name is required')
    ])
    email = StringField('Email', validators=[
        DataRequired(message='Valid email is required'),
        Email(message='Valid email is required')
    ])
    subject = StringField('Subject', validators=[
        InputRequired(message='Subject is required'),
        Length(min=1, message='Subject is required')
    ])
    message = TextAreaField('Message', validators=[
        InputRequired(message='Message must be at least 10 characters'),
        Length(min=10, message='Message must be at least 10 characters')
    ])

    def to_fields(self):
        return {
            'name': self.name.data,
            'email': self.email.data,
            'subject': self.subject.data,
            'message': self.message.data,
        }


class ReplyForm(JSONForm):
    """Operator reply to a contact message."""
    reply = TextAreaField('Reply', validators=[
        InputRequired(message='Reply is required'),
        Length(min=1, message='Reply is required')
    ])
