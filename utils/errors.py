"""Error types for the check-in API and the handlers that render them as JSON."""
from flask import jsonify
from werkzeug.exceptions import HTTPException


class WellbeingError(Exception):
    """Base error carrying the HTTP status and client-facing message."""

    status_code = 500
    message = "Something went wrong"

    def __init__(self, message=None, fields=None):
        super().__init__(message or self.message)
        self.message = message or self.message
        self.fields = fields

    def to_dict(self):
        payload = {'error': self.message}
        if self.fields:
            payload['fields'] = self.fields
        return payload


class ValidationFailure(WellbeingError):
    """Bad client input: a missing field or an out-of-range value."""

    status_code = 400
    message = "Missing required fields"


class AnalysisFailure(WellbeingError):
    """The remote classification was unavailable or malformed."""

    message = "Failed to analyze mental state"


class StorageFailure(WellbeingError):
    """The persistence layer rejected a read or a write."""

    message = "Failed to save check-in"


def register_error_handlers(app):
    """Register JSON error handlers on the app."""

    @app.errorhandler(WellbeingError)
    def handle_wellbeing_error(error):
        if error.status_code >= 500:
            # Chained cause holds the underlying transport or database error
            app.logger.error(
                f"{type(error).__name__}: {error.message}",
                exc_info=error.__cause__ or error,
            )
        else:
            app.logger.info(f"Rejected request: {error.message} {error.fields or ''}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        if isinstance(error, HTTPException):
            return jsonify({'error': error.description}), error.code

        app.logger.exception(f"Unhandled error: {error}")
        return jsonify({'error': WellbeingError.message}), 500

    return app
