"""
Error kinds raised by the stores and turned into JSON responses.
"""

from flask import jsonify


class SafeNetError(Exception):
    """Base class for errors surfaced to the HTTP caller."""
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(SafeNetError):
    """A required field is missing."""
    status_code = 400


class NotFoundError(SafeNetError):
    status_code = 404


class DuplicateError(SafeNetError):
    """Unique constraint violated (email, username)."""
    status_code = 400


class StorageError(SafeNetError):
    status_code = 500


def register_error_handlers(app):
    @app.errorhandler(SafeNetError)
    def handle_safenet_error(error):
        return jsonify(success=False, error=error.message), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        return 'Not found', 404
