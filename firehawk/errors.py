"""API error types and their JSON handlers."""

from flask import jsonify
from werkzeug.exceptions import HTTPException


class APIError(Exception):
    """Error reported to the caller as a JSON body."""
    status_code = 500
    error = 'Server error'

    def __init__(self, message=None, fields=None):
        super().__init__(message or self.error)
        self.message = message
        self.fields = fields

    def to_dict(self):
        body = {'error': self.error}
        if self.message:
            body['message'] = self.message
        if self.fields:
            body['fields'] = self.fields
        return body


class ValidationError(APIError):
    """Client sent missing or malformed fields."""
    status_code = 400
    error = 'Validation failed'


class NotFoundError(APIError):
    status_code = 404
    error = 'Message not found'


class UnauthorizedError(APIError):
    status_code = 401
    error = 'Unauthorized'


def register_error_handlers(app):
    """Answer every error with JSON."""

    @app.errorhandler(APIError)
    def api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def http_error(error):
        if error.code == 405:
            body = {'error': 'Method not allowed'}
        else:
            body = {'error': error.name}
        return jsonify(body), error.code

    @app.errorhandler(Exception)
    def internal_error(error):
        app.logger.exception('Unhandled error: %s', error)
        return jsonify({'error': 'Server error'}), 500
