# hotel_booking/errors.py
import enum
from dataclasses import dataclass
from typing import Any, Optional

from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException


class ErrorKind(enum.Enum):
    NOT_FOUND = 'NotFoundError'
    UNAUTHORIZED = 'UnauthorizedError'


ERROR_STATUS = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UNAUTHORIZED: 401,
}

ERROR_MESSAGES = {
    ErrorKind.NOT_FOUND: 'No result for this search!',
    ErrorKind.UNAUTHORIZED: 'You must be signed in to continue',
}


@dataclass(frozen=True)
class Result:
    value: Any = None
    error: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, value):
        return cls(value=value)

    @classmethod
    def fail(cls, kind):
        return cls(error=kind)

    @property
    def is_ok(self):
        return self.error is None


class ApiError(Exception):
    def __init__(self, kind):
        super().__init__(kind.value)
        self.kind = kind


def error_response(kind):
    return jsonify({'error': kind.value, 'message': ERROR_MESSAGES[kind]}), ERROR_STATUS[kind]


def to_response(result, status=200):
    if not result.is_ok:
        return error_response(result.error)
    return jsonify(result.value), status


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return error_response(error.kind)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({'error': error.name, 'message': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        current_app.logger.exception('Unhandled error while serving request')
        return jsonify({'error': 'InternalServerError', 'message': 'Internal server error'}), 500
