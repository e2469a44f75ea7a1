# hotel_booking/repositories.py
from sqlalchemy.orm import joinedload, selectinload

from hotel_booking.models import Enrollment, Hotel, Session, Ticket


class HotelRepository:
    def __init__(self, session):
        self.session = session

    def find_hotels(self):
        return self.session.query(Hotel).order_by(Hotel.id).all()

    def find_hotel_by_id(self, hotel_id):
        if hotel_id is None:
            return None
        return (
            self.session.query(Hotel)
            .options(selectinload(Hotel.rooms))
            .filter_by(id=hotel_id)
            .first()
        )


class EnrollmentRepository:
    def __init__(self, session):
        self.session = session

    def find_by_user_id(self, user_id):
        return self.session.query(Enrollment).filter_by(user_id=user_id).first()


class TicketRepository:
    def __init__(self, session):
        self.session = session

    def find_by_enrollment_id(self, enrollment_id):
        """Most recent ticket of the enrollment, with its ticket type loaded."""
        return (
            self.session.query(Ticket)
            .options(joinedload(Ticket.ticket_type))
            .filter_by(enrollment_id=enrollment_id)
            .order_by(Ticket.id.desc())
            .first()
        )


class SessionRepository:
    def __init__(self, session):
        self.session = session

    def find_by_token(self, token):
        return self.session.query(Session).filter_by(token=token).first()
