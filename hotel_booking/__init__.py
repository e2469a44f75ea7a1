from logging.config import dictConfig

from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_jwt_extended import JWTManager
from flask_migrate import Migrate

db = SQLAlchemy()
migrate = Migrate()
jwt = JWTManager()


class Components:
    """Repositories and services built once per app and shared by every request."""

    def __init__(self, session):
        from hotel_booking.repositories import (
            EnrollmentRepository, HotelRepository, SessionRepository, TicketRepository,
        )
        from hotel_booking.services import HotelsService
        from hotel_booking.visibility import VisibilityRule

        self.hotels = HotelRepository(session)
        self.sessions = SessionRepository(session)
        self.visibility = VisibilityRule(EnrollmentRepository(session), TicketRepository(session))
        self.hotels_service = HotelsService(self.hotels, self.visibility)


def configure_logging(level):
    dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {'default': {
            'format': '[%(asctime)s] %(levelname)s in %(module)s: %(message)s',
        }},
        'handlers': {'wsgi': {
            'class': 'logging.StreamHandler',
            'stream': 'ext://flask.logging.wsgi_errors_stream',
            'formatter': 'default',
        }},
        'root': {'level': level, 'handlers': ['wsgi']},
    })


def create_app(config='hotel_booking.config.Config'):
    app = Flask(__name__)
    app.config.from_object(config)

    configure_logging(app.config['LOG_LEVEL'])

    # Inicializar extensiones
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    from hotel_booking.auth import register_jwt_callbacks
    from hotel_booking.errors import register_error_handlers
    register_jwt_callbacks(jwt)
    register_error_handlers(app)

    with app.app_context():
        from hotel_booking import models  # noqa: F401 registra las tablas
        from hotel_booking import routes
        from hotel_booking.cli import seed
        app.register_blueprint(routes.api)
        app.cli.add_command(seed)

        app.extensions['hotel_booking'] = Components(db.session)

        db.create_all()  # Crear tablas si no existen

    return app
