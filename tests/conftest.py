"""
pytest configuration and fixtures.
"""
from datetime import date, datetime
from typing import Generator

import pytest
from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from hotel import create_app
from hotel.config import Settings


def _normalize_sql(query: str) -> str:
    return " ".join(query.split())


class FakeDB:
    """
    In-memory stand-in for DBManager.

    Understands exactly the statements the DAOs issue. Every call is
    recorded in `queries` as (normalized_sql, params); setting `fail_with`
    makes the next statements raise that error instead.
    """

    def __init__(self):
        self.tables = {"contacts": [], "registrations": [], "reservations": []}
        self.queries = []
        self.fail_with = None

    # --- DBManager surface ---
    def execute_query(self, query, params=None):
        sql = _normalize_sql(query)
        params = tuple(params or ())
        self.queries.append((sql, params))
        if self.fail_with is not None:
            raise self.fail_with

        if sql.startswith("INSERT INTO contacts"):
            return self._insert("contacts", ("name", "email", "message"), params)

        if sql.startswith("SELECT id FROM registrations WHERE email = %s"):
            return [{"id": r["id"]} for r in self.tables["registrations"] if r["email"] == params[0]]

        if sql.startswith("INSERT INTO registrations"):
            if any(r["email"] == params[0] for r in self.tables["registrations"]):
                raise IntegrityError(
                    msg=f"Duplicate entry '{params[0]}' for key 'registrations.email'",
                    errno=errorcode.ER_DUP_ENTRY,
                )
            return self._insert("registrations", ("email", "full_name", "accepts_promos"), params)

        if sql.startswith("INSERT INTO reservations"):
            columns = ("first_name", "last_name", "email", "check_in_date",
                       "check_out_date", "room_type", "reservation_number")
            return self._insert("reservations", columns, params)

        if sql.startswith("SELECT") and "FROM reservations WHERE" in sql:
            return self._select_reservations(sql, params)

        raise AssertionError(f"Unexpected query: {sql}")

    def fetch_all(self, query, params=None):
        return self.execute_query(query, params)

    def fetch_one(self, query, params=None):
        rows = self.execute_query(query, params)
        return rows[0] if rows else None

    # --- helpers ---
    def _insert(self, table, columns, params):
        row = dict(zip(columns, params))
        row["id"] = len(self.tables[table]) + 1
        row["created_at"] = datetime(2025, 1, 15, 10, 30, 0)
        # MySQL DATE columns come back as datetime.date
        for column in ("check_in_date", "check_out_date"):
            if isinstance(row.get(column), str):
                row[column] = date.fromisoformat(row[column])
        self.tables[table].append(row)
        return {"rowcount": 1, "lastrowid": row["id"]}

    def _select_reservations(self, sql, params):
        where = sql.split(" WHERE ", 1)[1].split(" ORDER BY ", 1)[0]
        columns = [condition.split(" = ")[0] for condition in where.split(" OR ")]
        matches = [
            dict(row) for row in self.tables["reservations"]
            if any(row[column] == value for column, value in zip(columns, params))
        ]
        assert sql.endswith("ORDER BY check_in_date DESC")
        return sorted(matches, key=lambda r: r["check_in_date"], reverse=True)

    def add_reservation(self, **fields):
        """Seeds a reservation row directly, bypassing the API."""
        row = {
            "reservation_number": "1700000000000-ABCDE",
            "first_name": "Ana",
            "last_name": "García",
            "email": "ana@example.com",
            "check_in_date": date(2025, 6, 1),
            "check_out_date": date(2025, 6, 5),
            "room_type": "doble",
        }
        row.update(fields)
        columns = tuple(row)
        return self._insert("reservations", columns, tuple(row[c] for c in columns))

    def count(self, table, **where):
        return sum(
            1 for row in self.tables[table]
            if all(row.get(k) == v for k, v in where.items())
        )


@pytest.fixture
def settings() -> Settings:
    """Test configuration, independent of any .env file."""
    return Settings(_env_file=None, DB_HOST="db.test", DB_POOL_SIZE=2, CORS_ORIGINS="*")


@pytest.fixture
def fake_db() -> FakeDB:
    return FakeDB()


@pytest.fixture
def app(settings, fake_db):
    app = create_app(settings, fake_db)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app) -> Generator:
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def reservation_body() -> dict:
    """A valid reservation request body."""
    return {
        "nombreReserva": "Ana",
        "apellidoReserva": "García",
        "emailReserva": "ana@example.com",
        "checkInDate": "2025-07-10",
        "checkOutDate": "2025-07-14",
        "roomType": "suite",
    }
