"""
SQLite database integration.

This module provides the ``Database`` handle shared by the whole
application.  A single instance is created by ``create_app`` and stored
on ``app.state``; request handlers receive it through a FastAPI
dependency instead of importing a global connection.

Every unit of work opens its own connection through ``Database.cursor``,
commits on success and closes the connection on exit.  Errors raised
by ``sqlite3`` are re-raised as ``StorageError``.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import Settings
from .exceptions import StorageError

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS PLANTS (
    ID INTEGER PRIMARY KEY AUTOINCREMENT,
    NAME TEXT,
    QUANTITY INTEGER,
    WATERING_FREQUENCY INTEGER,
    HAS_FRUIT INTEGER
);
"""


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    If ``database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the package root.
    """
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # plants_api/
    return str((base_dir / database_url).resolve())


class Database:
    """Handle to the SQLite database file holding the ``PLANTS`` table."""

    def __init__(self, path: str) -> None:
        self.path = path

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(get_database_path(settings.database_url))

    def connect(self) -> sqlite3.Connection:
        """Create and return a new SQLite connection.

        Rows are returned as ``sqlite3.Row`` so columns can be accessed
        by name.
        """
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, commit on success and close the connection on exit."""
        try:
            conn = self.connect()
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot open database {self.path}: {exc}") from exc
        try:
            yield conn.cursor()
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StorageError(str(exc)) from exc
        finally:
            conn.close()

    def init_db(self) -> None:
        """Create the ``PLANTS`` table if it does not exist yet."""
        with self.cursor() as cursor:
            cursor.executescript(SCHEMA)
        logger.info("Database initialised at %s", self.path)
