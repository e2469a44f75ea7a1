# hotel_booking/models.py
from datetime import datetime, timezone

from hotel_booking import db


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


def iso_timestamp(value):
    # 2024-01-31T12:00:00.000Z
    return value.strftime('%Y-%m-%dT%H:%M:%S.') + f'{value.microsecond // 1000:03d}Z'


class TicketStatus:
    RESERVED = 'RESERVED'
    PAID = 'PAID'


class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)  # bcrypt hash
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)


class Session(db.Model):
    __tablename__ = 'sessions'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    token = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    user = db.relationship('User', backref=db.backref('sessions', lazy=True))


class Enrollment(db.Model):
    __tablename__ = 'enrollments'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    cpf = db.Column(db.String(20), nullable=False)
    birthday = db.Column(db.DateTime, nullable=False)
    phone = db.Column(db.String(20), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), unique=True, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    user = db.relationship('User', backref=db.backref('enrollment', uselist=False))


class Address(db.Model):
    __tablename__ = 'addresses'

    id = db.Column(db.Integer, primary_key=True)
    cep = db.Column(db.String(10), nullable=False)
    street = db.Column(db.String(255), nullable=False)
    city = db.Column(db.String(255), nullable=False)
    state = db.Column(db.String(2), nullable=False)
    number = db.Column(db.String(20), nullable=False)
    neighborhood = db.Column(db.String(255), nullable=False)
    address_detail = db.Column(db.String(255))
    enrollment_id = db.Column(db.Integer, db.ForeignKey('enrollments.id'), nullable=False)

    enrollment = db.relationship('Enrollment', backref=db.backref('addresses', lazy=True))


class TicketType(db.Model):
    __tablename__ = 'ticket_types'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    price = db.Column(db.Integer, nullable=False)
    is_remote = db.Column(db.Boolean, nullable=False)
    includes_hotel = db.Column(db.Boolean, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)


class Ticket(db.Model):
    __tablename__ = 'tickets'

    id = db.Column(db.Integer, primary_key=True)
    ticket_type_id = db.Column(db.Integer, db.ForeignKey('ticket_types.id'), nullable=False)
    enrollment_id = db.Column(db.Integer, db.ForeignKey('enrollments.id'), nullable=False)
    status = db.Column(db.Enum(TicketStatus.RESERVED, TicketStatus.PAID, name='ticket_status'),
                       nullable=False, default=TicketStatus.RESERVED)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    ticket_type = db.relationship('TicketType', backref=db.backref('tickets', lazy=True))
    enrollment = db.relationship('Enrollment', backref=db.backref('tickets', lazy=True))


class Payment(db.Model):
    __tablename__ = 'payments'

    id = db.Column(db.Integer, primary_key=True)
    ticket_id = db.Column(db.Integer, db.ForeignKey('tickets.id'), nullable=False)
    value = db.Column(db.Integer, nullable=False)
    card_issuer = db.Column(db.String(50), nullable=False)
    card_last_digits = db.Column(db.String(4), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    ticket = db.relationship('Ticket', backref=db.backref('payments', lazy=True))


class Hotel(db.Model):
    __tablename__ = 'hotels'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    image = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    rooms = db.relationship('Room', backref='hotel', lazy=True, order_by='Room.id')


class Room(db.Model):
    __tablename__ = 'rooms'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    capacity = db.Column(db.Integer, nullable=False)
    hotel_id = db.Column(db.Integer, db.ForeignKey('hotels.id'), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)


def room_to_dict(room):
    return {
        'id': room.id,
        'name': room.name,
        'capacity': room.capacity,
        'hotelId': room.hotel_id,
        'createdAt': iso_timestamp(room.created_at),
        'updatedAt': iso_timestamp(room.updated_at),
    }


def hotel_to_dict(hotel, with_rooms=False):
    data = {
        'id': hotel.id,
        'name': hotel.name,
        'image': hotel.image,
        'createdAt': iso_timestamp(hotel.created_at),
        'updatedAt': iso_timestamp(hotel.updated_at),
    }
    if with_rooms:
        data['Rooms'] = [room_to_dict(room) for room in hotel.rooms]
    return data
