class ContactDAO:
    """
    Data Access Object for contact-form messages.
    Messages are only ever inserted; nothing here updates or deletes them.
    """

    def __init__(self, db_manager):
        self.db = db_manager

    def create_contact(self, name, email, message):
        """Stores one message and returns its generated id."""
        query = "INSERT INTO contacts (name, email, message) VALUES (%s, %s, %s)"
        result = self.db.execute_query(query, (name, email, message))
        return result['lastrowid']
