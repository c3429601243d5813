import logging
from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base for errors that map onto the public error envelope."""
    status_code = 400
    code = 'BAD_REQUEST'
    default_message = 'Bad request'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {
            'status': 'error',
            'error': {'code': self.code, 'message': self.message},
        }


class MissingParameters(ApiError):
    code = 'MISSING_PARAMETERS'
    default_message = 'location, start_time, end_time are required'


class InvalidLocation(ApiError):
    code = 'INVALID_LOCATION'
    default_message = 'Invalid location format. Use "latitude,longitude"'


class InvalidRadius(ApiError):
    code = 'INVALID_RADIUS'
    default_message = 'radius must be a non-negative number'


class InvalidTimeRange(ApiError):
    code = 'INVALID_TIME_RANGE'
    default_message = 'start_time and end_time must be ISO-8601 timestamps with start_time <= end_time'


class ValidationFailed(ApiError):
    code = 'VALIDATION_ERROR'
    default_message = 'Invalid request format'


class MissingQuery(ApiError):
    code = 'MISSING_QUERY'
    default_message = 'search query is required'


class MissingLocation(ApiError):
    code = 'MISSING_LOCATION'
    default_message = 'location parameter is required'


class Unauthorized(ApiError):
    status_code = 401
    code = 'UNAUTHORIZED'
    default_message = 'API key required'


class InvalidApiKey(ApiError):
    status_code = 401
    code = 'INVALID_API_KEY'
    default_message = 'Invalid API key'


class LocationNotFound(ApiError):
    status_code = 404
    code = 'LOCATION_NOT_FOUND'
    default_message = 'The requested location could not be found'


class InternalError(ApiError):
    status_code = 500
    code = 'INTERNAL_ERROR'
    default_message = 'An internal error occurred'


def error_response(code, message, status_code):
    return jsonify({'status': 'error', 'error': {'code': code, 'message': message}}), status_code


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(e):
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        code = (e.name or 'error').upper().replace(' ', '_')
        return error_response(code, e.description, e.code)

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        logger.exception(f"Unhandled error: {e}")
        from envmeasure.extensions import db
        db.session.rollback()
        return error_response(InternalError.code, InternalError.default_message, 500)
