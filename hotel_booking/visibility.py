# hotel_booking/visibility.py
import enum
from dataclasses import dataclass
from typing import Optional

from hotel_booking.models import TicketStatus


class DenyReason(enum.Enum):
    NO_ENROLLMENT = 'no enrollment'
    NO_TICKET = 'no ticket'
    REMOTE_TICKET = 'remote ticket ineligible'
    HOTEL_NOT_INCLUDED = 'ticket type excludes hotel'
    NOT_PAID = 'payment not confirmed'


@dataclass(frozen=True)
class Decision:
    reason: Optional[DenyReason] = None

    @property
    def permitted(self):
        return self.reason is None


PERMIT = Decision()


class VisibilityRule:
    def __init__(self, enrollments, tickets):
        self.enrollments = enrollments
        self.tickets = tickets

    # enrollment, ticket, remote, hotel, paid: stops at the first failure
    def check(self, user_id) -> Decision:
        enrollment = self.enrollments.find_by_user_id(user_id)
        if enrollment is None:
            return Decision(DenyReason.NO_ENROLLMENT)

        ticket = self.tickets.find_by_enrollment_id(enrollment.id)
        if ticket is None:
            return Decision(DenyReason.NO_TICKET)

        ticket_type = ticket.ticket_type
        if ticket_type.is_remote:
            return Decision(DenyReason.REMOTE_TICKET)
        if not ticket_type.includes_hotel:
            return Decision(DenyReason.HOTEL_NOT_INCLUDED)
        if ticket.status != TicketStatus.PAID:
            return Decision(DenyReason.NOT_PAID)

        return PERMIT
