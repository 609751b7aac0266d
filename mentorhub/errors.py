from flask import jsonify
from pydantic import ValidationError


class MentorHubError(Exception):
    """Base error rendered as a JSON response with ``status_code``."""

    status_code = 500
    reason = 'Internal Server Error'

    def __init__(self, message=None):
        super().__init__(message or self.reason)
        self.message = message or self.reason

    def to_dict(self):
        return {
            'statusCode': self.status_code,
            'message': self.message,
            'error': self.reason,
        }


class ConflictError(MentorHubError):
    status_code = 409
    reason = 'Conflict'


class NotFoundError(MentorHubError):
    status_code = 404
    reason = 'Not Found'


class UnauthorizedError(MentorHubError):
    status_code = 401
    reason = 'Unauthorized'


class ForbiddenError(MentorHubError):
    status_code = 403
    reason = 'Forbidden'


def register_error_handlers(app):
    @app.errorhandler(MentorHubError)
    def handle_mentorhub_error(error):
        app.logger.info(f"{error.reason}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        details = [
            {'loc': list(err['loc']), 'msg': err['msg'], 'type': err['type']}
            for err in error.errors()
        ]
        return jsonify({'statusCode': 400, 'message': details, 'error': 'Bad Request'}), 400
