"""
File: registration_service.py
Purpose: Service Layer for guest registrations.
"""
import logging

import mysql.connector

from hotel.errors import ConflictError, DuplicateEntryError, StoreError
from hotel.models.daos.registration_dao import RegistrationDAO
from hotel.utils.validators import BodyValidator

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = 'Este correo electrónico ya está registrado.'


class RegistrationService:
    """
    Registers a guest email (with an optional name and a promotions opt-in).

    A duplicate email is rejected with the same ConflictError whether the
    pre-check sees it or the unique key catches a concurrent insert.
    """

    def __init__(self, db_manager):
        self.registration_dao = RegistrationDAO(db_manager)

    def register(self, body):
        """Returns (id, normalized email) of the new registration."""
        data = (
            BodyValidator(body)
            .email('email', 'Ingresa un correo electrónico válido')
            .text('nombre', required=False, allow_empty=True)
            .boolean('promos')
            .validate()
        )
        email = data['email']

        try:
            if self.registration_dao.get_registration_id(email) is not None:
                raise ConflictError(DUPLICATE_MESSAGE)

            registration_id = self.registration_dao.create_registration(
                email=email,
                full_name=data['nombre'] or None,
                accepts_promos=data['promos'],
            )
        except DuplicateEntryError:
            logger.warning("Registration raced on duplicate email %s", email)
            raise ConflictError(DUPLICATE_MESSAGE)
        except mysql.connector.Error as e:
            logger.error("Error registering user: %s %s", e.errno, e.msg)
            raise StoreError('Error del servidor al procesar el registro.') from e

        logger.info("User registered, id=%s", registration_id)
        return registration_id, email
