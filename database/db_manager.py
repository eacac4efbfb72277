"""
File: db_manager.py
Purpose: Owns the MySQL connection pool and executes parameterized queries.
"""
import logging
import threading
from contextlib import contextmanager

import mysql.connector
from mysql.connector import pooling

logger = logging.getLogger(__name__)


class DBManager:
    """
    Handles database connections via a bounded connection pool.

    One instance is created at process start and handed to every service.
    At most `pool_size` connections are checked out at once; further callers
    wait until one is released.
    """

    def __init__(self, settings, pool_name="hotel_pool"):
        self.settings = settings
        self.pool_name = pool_name
        self.pool_size = settings.DB_POOL_SIZE
        self._connection_pool = None
        self._pool_lock = threading.Lock()
        self._slots = threading.BoundedSemaphore(self.pool_size)
        self._initialize_pool()

    def _initialize_pool(self):
        """Creates the pool; a failure is logged and retried on the next query."""
        try:
            self._create_pool()
        except mysql.connector.Error as e:
            logger.error("Failed to create connection pool: %s", e)

    def _create_pool(self):
        with self._pool_lock:
            if self._connection_pool is None:
                self._connection_pool = pooling.MySQLConnectionPool(
                    pool_name=self.pool_name,
                    pool_size=self.pool_size,
                    pool_reset_session=True,
                    **self.settings.db_config()
                )
                logger.info("Connection pool '%s' created (size=%d)", self.pool_name, self.pool_size)
        return self._connection_pool

    @contextmanager
    def connection(self):
        """
        Yields a pooled connection and always returns it to the pool.
        Blocks while all `pool_size` connections are in use.
        """
        self._slots.acquire()
        try:
            pool = self._connection_pool or self._create_pool()
            conn = pool.get_connection()
            try:
                yield conn
            finally:
                conn.close()
        finally:
            self._slots.release()

    def execute_query(self, query, params=None):
        """
        Executes a statement with bound parameters.

        SELECT returns a list of row dicts, INSERT returns
        {'rowcount', 'lastrowid'}, any other statement returns the rowcount.
        Driver errors are rolled back and re-raised.
        """
        with self.connection() as conn:
            cursor = conn.cursor(dictionary=True)
            try:
                cursor.execute(query, params or ())

                statement = query.strip().upper()
                if statement.startswith("SELECT"):
                    return cursor.fetchall()

                conn.commit()
                if statement.startswith("INSERT"):
                    return {'rowcount': cursor.rowcount, 'lastrowid': cursor.lastrowid}
                return cursor.rowcount
            except mysql.connector.Error as e:
                logger.debug("Query error (%s): %s", e.errno, e.msg)
                conn.rollback()
                raise
            finally:
                cursor.close()

    def fetch_all(self, query, params=None):
        """Executes a SELECT query and returns all rows as a list of dictionaries."""
        return self.execute_query(query, params)

    def fetch_one(self, query, params=None):
        """Executes a SELECT query and returns the first row, or None."""
        rows = self.execute_query(query, params)
        return rows[0] if rows else None

    def check_connection(self, stage="startup"):
        """
        Liveness probe: borrow a connection, run SELECT NOW(), give it back.
        Logs the outcome and never raises.
        """
        try:
            with self.connection() as conn:
                cursor = conn.cursor()
                try:
                    cursor.execute("SELECT NOW()")
                    cursor.fetchall()
                finally:
                    cursor.close()
        except (mysql.connector.Error, OSError) as e:
            logger.error("Could not reach MySQL database (%s check): %s", stage, e)
            return False

        logger.info("Connected to MySQL database (%s check).", stage)
        return True

    def execute_sql_script(self, file_path):
        """Executes a multi-statement SQL script file, one statement at a time."""
        logger.info("Reading SQL script: %s", file_path)
        with open(file_path, 'r', encoding='utf-8') as f:
            sql_script = f.read()

        statements = [s.strip() for s in sql_script.split(';') if s.strip()]

        with self.connection() as conn:
            cursor = conn.cursor()
            try:
                for statement in statements:
                    cursor.execute(statement)
                conn.commit()
            except mysql.connector.Error:
                conn.rollback()
                raise
            finally:
                cursor.close()

        logger.info("Executed %d SQL statements from %s", len(statements), file_path)
        return len(statements)
