"""
Hotel website backend: contact messages, guest registrations and room reservations.
"""
import logging

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from database.db_manager import DBManager
from hotel.config import get_settings
from hotel.errors import ApiError
from hotel.routes.main_routes import main_bp
from hotel.routes.reservation_routes import reservation_bp
from hotel.services.contact_service import ContactService
from hotel.services.registration_service import RegistrationService
from hotel.services.reservation_service import ReservationService

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = '¡Algo salió mal en el servidor!'


def register_error_handlers(app):
    """Maps ApiError to JSON and anything unexpected to a plain-text 500."""

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        if isinstance(error, HTTPException):
            return error
        logger.exception("Unhandled error while serving request: %s", error)
        return FALLBACK_MESSAGE, 500, {'Content-Type': 'text/plain; charset=utf-8'}


def create_app(settings=None, db=None):
    """
    Builds the Flask app around one shared database handle.
    `db` is a DBManager (or anything with the same query methods).
    """
    settings = settings or get_settings()
    if db is None:
        db = DBManager(settings)

    app = Flask(__name__)
    app.config['DEBUG'] = settings.DEBUG
    app.json.sort_keys = False
    app.json.ensure_ascii = False

    app.settings = settings
    app.db = db

    # Services shared by the blueprints
    app.contact_service = ContactService(db)
    app.registration_service = RegistrationService(db)
    app.reservation_service = ReservationService(db)

    origins = settings.cors_origins
    CORS(app, origins=origins, send_wildcard="*" in origins)
    register_error_handlers(app)

    app.register_blueprint(main_bp, url_prefix='/api')
    app.register_blueprint(reservation_bp, url_prefix='/api/reservations')

    return app
