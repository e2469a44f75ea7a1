# hotel_booking/auth.py
from functools import wraps

from flask import current_app, g, request
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request

from hotel_booking.errors import ApiError, ErrorKind, error_response


def register_jwt_callbacks(jwt):
    # flask_jwt_extended answers 422 for malformed tokens by default
    @jwt.unauthorized_loader
    def missing_token(reason):
        return error_response(ErrorKind.UNAUTHORIZED)

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return error_response(ErrorKind.UNAUTHORIZED)

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return error_response(ErrorKind.UNAUTHORIZED)


def _bearer_token():
    parts = request.headers.get('Authorization', '').split()
    return parts[1] if len(parts) == 2 else ''


def authenticate_token(fn):
    """Require a valid bearer token that still has a session row.

    Sets ``g.user_id`` for the wrapped view.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()

        sessions = current_app.extensions['hotel_booking'].sessions
        session = sessions.find_by_token(_bearer_token())
        if session is None or str(session.user_id) != get_jwt_identity():
            current_app.logger.info('Rejected token without an active session')
            raise ApiError(ErrorKind.UNAUTHORIZED)

        g.user_id = session.user_id
        return fn(*args, **kwargs)

    return wrapper
