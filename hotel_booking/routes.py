# hotel_booking/routes.py
from flask import Blueprint, current_app, g

from hotel_booking.auth import authenticate_token
from hotel_booking.errors import to_response

api = Blueprint('hotels', __name__)


def _hotels_service():
    return current_app.extensions['hotel_booking'].hotels_service


MAX_ID = 2 ** 63 - 1


def _coerce_id(raw):
    try:
        hotel_id = int(raw)
    except ValueError:
        return None
    # fuera de rango para una columna INTEGER
    if not -MAX_ID - 1 <= hotel_id <= MAX_ID:
        return None
    return hotel_id


@api.route('/hotels', methods=['GET'])
@authenticate_token
def get_hotels():
    result = _hotels_service().list_hotels(g.user_id)
    return to_response(result)


@api.route('/hotels/<hotel_id>', methods=['GET'])
@authenticate_token
def get_hotel_by_id(hotel_id):
    result = _hotels_service().get_hotel_by_id(g.user_id, _coerce_id(hotel_id))
    return to_response(result)
