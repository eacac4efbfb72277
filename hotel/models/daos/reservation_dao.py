class ReservationDAO:
    """
    Data Access Object for room reservations.

    Reservations are inserted once and looked up by reservation number or
    guest email. No availability or capacity checks happen here.
    """

    COLUMNS = (
        "id, reservation_number, first_name, last_name, email, "
        "check_in_date, check_out_date, room_type, created_at"
    )

    def __init__(self, db_manager):
        self.db = db_manager

    def create_reservation(self, reservation_number, first_name, last_name, email,
                           check_in_date, check_out_date, room_type):
        """Stores one reservation and returns its generated id."""
        query = """
            INSERT INTO reservations
            (first_name, last_name, email, check_in_date, check_out_date, room_type, reservation_number)
            VALUES (%s, %s, %s, %s, %s, %s, %s)
        """
        params = (first_name, last_name, email, check_in_date, check_out_date, room_type, reservation_number)
        result = self.db.execute_query(query, params)
        return result['lastrowid']

    def find_reservations(self, reservation_number=None, email=None):
        """
        Reservations matching the number OR the email (whichever are given),
        most recent check-in first.
        """
        conditions = []
        params = []

        if reservation_number:
            conditions.append("reservation_number = %s")
            params.append(reservation_number)
        if email:
            conditions.append("email = %s")
            params.append(email)

        if not conditions:
            return []

        query = f"SELECT {self.COLUMNS} FROM reservations WHERE "
        query += " OR ".join(conditions)
        query += " ORDER BY check_in_date DESC"

        return self.db.fetch_all(query, tuple(params))
