"""
File: init_db.py
Purpose: Creates the contacts, registrations and reservations tables if they are missing.
"""
import logging
import os
import sys

import mysql.connector

from database.db_manager import DBManager
from hotel.config import get_settings

logger = logging.getLogger("hotel.init_db")

SCHEMA_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "database", "schema.sql")


def init_database(db, schema_path=SCHEMA_PATH):
    """Applies the schema script; returns the number of statements executed."""
    return db.execute_sql_script(schema_path)


def main():
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(levelname)s %(message)s")

    try:
        count = init_database(DBManager(settings))
    except mysql.connector.Error as err:
        logger.error("Schema initialization failed: %s", err)
        return 1

    logger.info("Database schema ready (%d statements).", count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
