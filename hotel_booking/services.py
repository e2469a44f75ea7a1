# hotel_booking/services.py
import logging

from hotel_booking.errors import ErrorKind, Result
from hotel_booking.models import hotel_to_dict

logger = logging.getLogger(__name__)


class HotelsService:
    def __init__(self, hotels, visibility):
        self.hotels = hotels
        self.visibility = visibility

    def _denied(self, user_id):
        decision = self.visibility.check(user_id)
        if decision.permitted:
            return False
        logger.info('Hotel access denied for user %s: %s', user_id, decision.reason.value)
        return True

    def list_hotels(self, user_id) -> Result:
        if self._denied(user_id):
            return Result.fail(ErrorKind.NOT_FOUND)

        hotels = self.hotels.find_hotels()
        if hotels is None:
            return Result.fail(ErrorKind.NOT_FOUND)

        return Result.ok([hotel_to_dict(hotel) for hotel in hotels])

    def get_hotel_by_id(self, user_id, hotel_id) -> Result:
        if self._denied(user_id):
            return Result.fail(ErrorKind.NOT_FOUND)

        hotel = self.hotels.find_hotel_by_id(hotel_id)
        if hotel is None:
            return Result.fail(ErrorKind.NOT_FOUND)

        return Result.ok(hotel_to_dict(hotel, with_rooms=True))
