"""Access decorators for operator endpoints."""

import hmac
from functools import wraps
from flask import current_app, request
from firehawk.errors import UnauthorizedError


def check_admin():
    """Raise unless the request carries the configured operator token.

    With no ``ADMIN_API_TOKEN`` configured every request passes (demo mode).
    """
    token = current_app.config.get('ADMIN_API_TOKEN')
    if not token:
        return

    header = request.headers.get('Authorization', '')
    scheme, _, supplied = header.partition(' ')
    supplied = supplied.strip().encode()
    if scheme.lower() != 'bearer' or not hmac.compare_digest(supplied, token.encode()):
        current_app.logger.warning('Rejected operator request to %s from %s',
                                   request.path, request.remote_addr)
        raise UnauthorizedError('A valid operator token is required')


def admin_required(f):
    """Decorator to require the operator token."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        check_admin()
        return f(*args, **kwargs)
    return decorated_function
