"""
File: contact_service.py
Purpose: Service Layer for contact-form submissions.
"""
import logging

import mysql.connector

from hotel.errors import StoreError
from hotel.models.daos.contact_dao import ContactDAO
from hotel.utils.validators import BodyValidator

logger = logging.getLogger(__name__)


class ContactService:
    """Validates and stores messages sent through the website's contact form."""

    def __init__(self, db_manager):
        self.contact_dao = ContactDAO(db_manager)

    def submit_contact(self, body):
        """Returns the id of the stored message."""
        data = (
            BodyValidator(body)
            .text('nombre', 'El nombre es requerido')
            .email('email', 'Ingresa un correo electrónico válido')
            .text('mensaje', 'El mensaje es requerido')
            .validate()
        )

        try:
            contact_id = self.contact_dao.create_contact(data['nombre'], data['email'], data['mensaje'])
        except mysql.connector.Error as e:
            logger.error("Error saving contact message: %s %s", e.errno, e.msg)
            raise StoreError('Error del servidor al procesar el mensaje.') from e

        logger.info("Contact message saved, id=%s", contact_id)
        return contact_id
