from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from hotel.errors import DuplicateEntryError


class RegistrationDAO:
    """
    Data Access Object for guest registrations (newsletter / promotions sign-up).
    The `email` column is UNIQUE in the store.
    """

    def __init__(self, db_manager):
        self.db = db_manager

    def get_registration_id(self, email):
        """Returns the id registered for this email, or None."""
        query = "SELECT id FROM registrations WHERE email = %s"
        row = self.db.fetch_one(query, (email,))
        return row['id'] if row else None

    def create_registration(self, email, full_name, accepts_promos):
        """
        Inserts a registration and returns its id.
        Raises DuplicateEntryError if the store rejects the email as already taken.
        """
        query = "INSERT INTO registrations (email, full_name, accepts_promos) VALUES (%s, %s, %s)"
        try:
            result = self.db.execute_query(query, (email, full_name, accepts_promos))
        except IntegrityError as e:
            if e.errno == errorcode.ER_DUP_ENTRY:
                raise DuplicateEntryError(email) from e
            raise
        return result['lastrowid']
