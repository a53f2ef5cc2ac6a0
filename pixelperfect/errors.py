"""
Domain errors and their JSON rendering.
"""

import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors that map onto an HTTP status."""
    status_code = 500
    message = 'Internal server error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {'message': self.message}


class ValidationError(AppError):
    """Malformed or missing input. Carries every offending field."""
    status_code = 400
    message = 'Invalid data'

    def __init__(self, errors, message=None):
        super().__init__(message)
        self.errors = errors

    def to_dict(self):
        return {'message': self.message, 'errors': self.errors}


class AuthenticationError(AppError):
    status_code = 401
    message = 'Invalid username or password'


class AuthorizationError(AppError):
    # Same body whether there was no session or a non-admin one
    status_code = 403
    message = 'Forbidden'


class NotFoundError(AppError):
    status_code = 404
    message = 'Not found'


class ConflictError(AppError):
    status_code = 409
    message = 'Username already exists'


def register_error_handlers(app):
    """Render every error leaving a view as JSON."""

    @app.errorhandler(AppError)
    def handle_app_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'message': error.name}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception('Unhandled error: %s', error)
        return jsonify({'message': 'Internal server error'}), 500
