"""
File: run.py
Purpose: Process entry point. Loads settings, opens the pool, binds the HTTP listener and serves.
"""
import logging

from werkzeug.serving import make_server

from database.db_manager import DBManager
from hotel import create_app
from hotel.config import get_settings

logger = logging.getLogger("hotel")


def configure_logging(level):
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def main():
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    # DB startup check is non-fatal: the server still comes up
    db = DBManager(settings)
    db.check_connection("startup")

    app = create_app(settings, db)

    server = make_server(settings.HOST, settings.PORT, app, threaded=True)
    logger.info("Hotel backend (MySQL) listening on http://localhost:%d", settings.PORT)
    db.check_connection("post-listen")

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        server.server_close()


if __name__ == '__main__':
    main()
