"""Contact message operations shared by both routing front-ends.

Each function validates its input before touching the store and raises an
``APIError`` subclass instead of returning error responses.
"""

from flask import current_app

from firehawk.errors import NotFoundError, ValidationError
from firehawk.forms import ContactForm, ReplyForm
from firehawk.models import STATUSES


def get_store():
    """The message store built for the current application."""
    return current_app.extensions['message_store']


def submit_message(payload):
    """Validate a contact form submission and store it."""
    form = ContactForm.from_json(payload)
    if not form.validate():
        current_app.logger.info('Rejected contact submission: %s',
                                ', '.join(form.errors))
        raise ValidationError(form.error_summary(), fields=form.errors)

    message = get_store().create(form.to_fields())
    current_app.logger.info('Stored contact message %s', message.id)
    return message


def list_messages(status=None):
    """All messages, newest first, optionally filtered by status."""
    if status and status not in STATUSES:
        raise ValidationError(
            f'Validation error: Unknown status "{status}" at "status"',
            fields={'status': [f'Status must be one of: {", ".join(STATUSES)}']}
        )
    return get_store().list_all(status=status)


def get_message(message_id):
    message = get_store().get(message_id)
    if message is None:
        raise NotFoundError()
    return message


def reply_to_message(message_id, payload):
    """Validate a reply and record it against the message."""
    form = ReplyForm.from_json(payload)
    if not form.validate():
        raise ValidationError(form.error_summary(), fields=form.errors)

    message = get_store().reply(message_id, form.reply.data)
    if message is None:
        raise NotFoundError()

    current_app.logger.info('Recorded reply to contact message %s', message.id)
    return message


def message_stats():
    return get_store().counts()
