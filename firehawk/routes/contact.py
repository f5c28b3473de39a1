"""Contact message JSON API.

Two front-ends over the same operations; ``CONTACT_ROUTING`` selects which
one is registered:

- ``contact_bp`` (path routing): ``/contact/<id>`` and ``/contact/<id>/reply``
- ``contact_query_bp`` (query routing): ``/contact?id=<id>`` for both,
  with POST meaning reply
"""

from flask import Blueprint, jsonify, request
from firehawk.services import contact as service
from firehawk.utils.decorators import admin_required, check_admin

contact_bp = Blueprint('contact', __name__)
contact_query_bp = Blueprint('contact_query', __name__)


def _json_body():
    return request.get_json(silent=True)


# --- Path routing ---
@contact_bp.route('/contact', methods=['POST'])
def submit():
    """Store a contact form submission."""
    message = service.submit_message(_json_body())
    return jsonify(message.to_dict())


@contact_bp.route('/contact', methods=['GET'])
@admin_required
def list_messages():
    """All messages, newest first."""
    messages = service.list_messages(request.args.get('status', ''))
    return jsonify([m.to_dict() for m in messages])


@contact_bp.route('/contact/stats')
@contact_query_bp.route('/contact/stats')
@admin_required
def stats():
    """Message counts per status."""
    return jsonify(service.message_stats())


@contact_bp.route('/contact/<message_id>')
@admin_required
def get_message(message_id):
    return jsonify(service.get_message(message_id).to_dict())


@contact_bp.route('/contact/<message_id>/reply', methods=['POST'])
@admin_required
def reply(message_id):
    """Record an operator reply."""
    message = service.reply_to_message(message_id, _json_body())
    return jsonify(message.to_dict())


# --- Query routing ---
@contact_query_bp.route('/contact', methods=['GET'])
@admin_required
def query_get():
    """List messages, or fetch one when ``id`` is given."""
    message_id = request.args.get('id')
    if message_id:
        return jsonify(service.get_message(message_id).to_dict())

    messages = service.list_messages(request.args.get('status', ''))
    return jsonify([m.to_dict() for m in messages])


@contact_query_bp.route('/contact', methods=['POST'])
def query_post():
    """Submit a message, or reply to one when ``id`` is given."""
    message_id = request.args.get('id')
    if message_id:
        check_admin()
        message = service.reply_to_message(message_id, _json_body())
    else:
        message = service.submit_message(_json_body())
    return jsonify(message.to_dict())
