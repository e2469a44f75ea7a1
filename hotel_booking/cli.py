# hotel_booking/cli.py
import bcrypt
import click
from flask.cli import with_appcontext

from hotel_booking import db
from hotel_booking.models import Hotel, Room, TicketType, User

HOTELS = [
    ('Driven Resort', 'https://images.unsplash.com/photo-1566073771259-6a8506099945', [
        ('101', 1), ('102', 2), ('103', 3),
    ]),
    ('Driven Palace', 'https://images.unsplash.com/photo-1551882547-ff40c63fe5fa', [
        ('201', 2), ('202', 2),
    ]),
    ('Driven World', 'https://images.unsplash.com/photo-1520250497591-112f2f40a3f4', [
        ('301', 1), ('302', 3),
    ]),
]

TICKET_TYPES = [
    ('Online', 100, True, False),
    ('Presencial sem hotel', 250, False, False),
    ('Presencial com hotel', 600, False, True),
]


def hash_password(password):
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=8)).decode('utf-8')


@click.command('seed')
@click.option('--email', default='demo@hotel-booking.dev', show_default=True)
@click.option('--password', default='demo1234', show_default=True)
@with_appcontext
def seed(email, password):
    """Carga hoteles, habitaciones, tipos de ticket y un usuario demo."""
    if Hotel.query.first() is not None:
        click.echo('Database already seeded')
        return

    for name, image, rooms in HOTELS:
        hotel = Hotel(name=name, image=image)
        hotel.rooms = [Room(name=number, capacity=capacity) for number, capacity in rooms]
        db.session.add(hotel)

    for name, price, is_remote, includes_hotel in TICKET_TYPES:
        db.session.add(TicketType(name=name, price=price, is_remote=is_remote,
                                  includes_hotel=includes_hotel))

    if User.query.filter_by(email=email).first() is None:
        db.session.add(User(email=email, password=hash_password(password)))

    db.session.commit()
    click.echo(f'Seeded {len(HOTELS)} hotels and {len(TICKET_TYPES)} ticket types')
