"""
File: reservation_service.py
Purpose: Service Layer for room reservations (creation and lookup).
"""
import logging
import secrets
import string
import time

import mysql.connector

from hotel.errors import MissingLookupKeyError, NotFoundError, StoreError, ValidationError
from hotel.models.daos.reservation_dao import ReservationDAO
from hotel.utils.dates import to_calendar_date
from hotel.utils.validators import BodyValidator

logger = logging.getLogger(__name__)

SUFFIX_ALPHABET = string.ascii_uppercase + string.digits
SUFFIX_LENGTH = 5


def generate_reservation_number():
    """
    '<epoch millis>-<5 uppercase alphanumerics>', e.g. '1751328000000-K7Q2Z'.
    Collisions are very unlikely but not checked for.
    """
    millis = int(time.time() * 1000)
    suffix = ''.join(secrets.choice(SUFFIX_ALPHABET) for _ in range(SUFFIX_LENGTH))
    return f"{millis}-{suffix}"


def format_reservation(row):
    """Row dict as returned to clients: plain calendar dates, ISO created_at."""
    formatted = dict(row)
    formatted['check_in_date'] = to_calendar_date(row.get('check_in_date'))
    formatted['check_out_date'] = to_calendar_date(row.get('check_out_date'))
    created_at = row.get('created_at')
    if created_at is not None and hasattr(created_at, 'isoformat'):
        formatted['created_at'] = created_at.isoformat()
    return formatted


class ReservationService:
    """
    Orchestrates reservation creation and guest lookup.
    """

    def __init__(self, db_manager):
        self.reservation_dao = ReservationDAO(db_manager)

    # --- Lookup ---
    def lookup(self, body):
        """Reservations matching the given number and/or email, newest check-in first."""
        data = (
            BodyValidator(body)
            .text('numero', 'El número de reserva no puede estar vacío si se proporciona', required=False)
            .email('emailReserva', 'Ingresa un correo electrónico válido si se proporciona', required=False)
            .validate()
        )
        numero = data['numero']
        email = data['emailReserva']

        if not numero and not email:
            raise MissingLookupKeyError('Debes proporcionar el número de reserva o el correo electrónico.')

        try:
            rows = self.reservation_dao.find_reservations(reservation_number=numero, email=email)
        except mysql.connector.Error as e:
            logger.error("Error looking up reservation: %s %s", e.errno, e.msg)
            raise StoreError('Error del servidor al buscar la reserva.') from e

        if not rows:
            raise NotFoundError('No se encontró ninguna reserva con los datos proporcionados.')

        return [format_reservation(row) for row in rows]

    # --- Creation ---
    def create_reservation(self, body):
        """Stores a reservation and returns the summary echoed to the guest."""
        validator = (
            BodyValidator(body)
            .text('nombreReserva', 'El nombre es requerido')
            .text('apellidoReserva', 'El apellido es requerido')
            .email('emailReserva', 'Ingresa un correo electrónico válido')
            .iso_date('checkInDate', 'La fecha de entrada es requerida y debe ser válida')
            .iso_date('checkOutDate', 'La fecha de salida es requerida y debe ser válida')
            .date_after('checkOutDate', 'checkInDate', 'La fecha de salida debe ser posterior a la fecha de entrada.')
            .text('roomType', 'El tipo de habitación es requerido')
        )
        try:
            data = validator.validate()
        except ValidationError as e:
            logger.info("Reservation validation errors: %s", e.errors)
            raise

        reservation_number = generate_reservation_number()
        check_in = to_calendar_date(data['checkInDate'])
        check_out = to_calendar_date(data['checkOutDate'])

        try:
            reservation_id = self.reservation_dao.create_reservation(
                reservation_number=reservation_number,
                first_name=data['nombreReserva'],
                last_name=data['apellidoReserva'],
                email=data['emailReserva'],
                check_in_date=check_in,
                check_out_date=check_out,
                room_type=data['roomType'],
            )
        except mysql.connector.Error as e:
            logger.error("Error creating reservation: %s %s", e.errno, e.msg)
            raise StoreError('Error del servidor al crear la reserva.') from e

        logger.info("Reservation created, id=%s number=%s", reservation_id, reservation_number)
        return {
            'id': reservation_id,
            'reservation_number': reservation_number,
            'room_type': data['roomType'],
            'check_in_date': check_in,
            'check_out_date': check_out,
        }
