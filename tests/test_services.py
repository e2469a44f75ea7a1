import logging
from datetime import datetime
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from hotel_booking.errors import ErrorKind
from hotel_booking.services import HotelsService
from hotel_booking.visibility import PERMIT, Decision, DenyReason

CREATED = datetime(2024, 1, 31, 12, 0, 0, 123456)


def _hotel(hotel_id=1, rooms=()):
    return SimpleNamespace(
        id=hotel_id, name='Ibis', image='http://x/y.png',
        created_at=CREATED, updated_at=CREATED, rooms=list(rooms),
    )


def _room(room_id=10, hotel_id=1):
    return SimpleNamespace(
        id=room_id, name='101', capacity=2, hotel_id=hotel_id,
        created_at=CREATED, updated_at=CREATED,
    )


@pytest.fixture
def visibility():
    rule = MagicMock()
    rule.check.return_value = PERMIT
    return rule


class TestListHotels:
    def test_returns_serialized_hotels(self, mock_repository, visibility):
        mock_repository.find_hotels.return_value = [_hotel(rooms=[_room()])]
        service = HotelsService(hotels=mock_repository, visibility=visibility)

        result = service.list_hotels(1)

        assert result.is_ok
        assert result.value == [{
            'id': 1,
            'name': 'Ibis',
            'image': 'http://x/y.png',
            'createdAt': '2024-01-31T12:00:00.123Z',
            'updatedAt': '2024-01-31T12:00:00.123Z',
        }]

    def test_empty_list_is_not_an_error(self, mock_repository, visibility):
        mock_repository.find_hotels.return_value = []
        service = HotelsService(hotels=mock_repository, visibility=visibility)

        result = service.list_hotels(1)

        assert result.is_ok
        assert result.value == []

    def test_absent_collection_is_not_found(self, mock_repository, visibility):
        mock_repository.find_hotels.return_value = None
        service = HotelsService(hotels=mock_repository, visibility=visibility)

        assert service.list_hotels(1).error is ErrorKind.NOT_FOUND

    def test_denied_user_is_not_found_without_reading_hotels(self, mock_repository, visibility, caplog):
        visibility.check.return_value = Decision(DenyReason.NOT_PAID)
        service = HotelsService(hotels=mock_repository, visibility=visibility)

        with caplog.at_level(logging.INFO, logger='hotel_booking.services'):
            result = service.list_hotels(1)

        assert result.error is ErrorKind.NOT_FOUND
        mock_repository.find_hotels.assert_not_called()
        assert 'payment not confirmed' in caplog.text


class TestGetHotelById:
    def test_returns_hotel_with_rooms(self, mock_repository, visibility):
        mock_repository.find_hotel_by_id.return_value = _hotel(rooms=[_room()])
        service = HotelsService(hotels=mock_repository, visibility=visibility)

        result = service.get_hotel_by_id(1, 1)

        assert result.is_ok
        assert result.value['Rooms'] == [{
            'id': 10,
            'name': '101',
            'capacity': 2,
            'hotelId': 1,
            'createdAt': '2024-01-31T12:00:00.123Z',
            'updatedAt': '2024-01-31T12:00:00.123Z',
        }]
        mock_repository.find_hotel_by_id.assert_called_once_with(1)

    def test_hotel_without_rooms(self, mock_repository, visibility):
        mock_repository.find_hotel_by_id.return_value = _hotel()
        service = HotelsService(hotels=mock_repository, visibility=visibility)

        result = service.get_hotel_by_id(1, 1)

        assert result.is_ok
        assert result.value['Rooms'] == []

    def test_unknown_hotel_is_not_found(self, mock_repository, visibility):
        mock_repository.find_hotel_by_id.return_value = None
        service = HotelsService(hotels=mock_repository, visibility=visibility)

        assert service.get_hotel_by_id(1, 0).error is ErrorKind.NOT_FOUND

    def test_denied_user_is_not_found(self, mock_repository, visibility):
        visibility.check.return_value = Decision(DenyReason.NO_ENROLLMENT)
        service = HotelsService(hotels=mock_repository, visibility=visibility)

        assert service.get_hotel_by_id(1, 1).error is ErrorKind.NOT_FOUND
        mock_repository.find_hotel_by_id.assert_not_called()
