from unittest.mock import MagicMock

import pytest

from hotel_booking import create_app, db


@pytest.fixture
def app():
    app = create_app('hotel_booking.config.TestingConfig')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def mock_repository():
    """Repository mock for service and rule tests."""
    return MagicMock()


@pytest.fixture
def auth_headers():
    """Build the Authorization header for a token."""

    def _headers(token):
        return {'Authorization': f'Bearer {token}'}

    return _headers
