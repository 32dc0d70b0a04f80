"""Opening the service's database connection."""

from __future__ import annotations

import logging
import sqlite3

from .config import Config

logger = logging.getLogger(__name__)

_CONNECT_TIMEOUT = 5.0


def connect_db(config: Config) -> sqlite3.Connection:
    """Open the SQLite database named by ``config.db_name`` and check that it answers.

    An empty database name opens a private in-memory database. Raises
    ConnectionError when the database cannot be opened or does not respond.
    """
    path = config.db_name or ":memory:"
    try:
        connection = sqlite3.connect(path, timeout=_CONNECT_TIMEOUT, check_same_thread=False)
    except sqlite3.Error as exc:
        logger.error("Failed to open database: %s", exc)
        raise ConnectionError(f"failed to open database: {exc}") from exc

    try:
        connection.execute("PRAGMA foreign_keys = ON")
        connection.execute("SELECT 1").fetchone()
    except sqlite3.Error as exc:
        connection.close()
        logger.error("Failed to ping database: %s", exc)
        raise ConnectionError(f"failed to ping database: {exc}") from exc

    logger.info("Connected to database")
    return connection